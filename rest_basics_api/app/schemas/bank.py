"""
Pydantic models for the bank ledger.

``AmountRequest`` deliberately accepts any JSON value for ``amount``:
the type check (a number, not a string or boolean) is performed by
``BankService`` so that a bad amount is reported with the same
message as a non‑positive one.
"""

from typing import Any, Literal, Union

from pydantic import BaseModel, Field


class AmountRequest(BaseModel):
    """Body of ``POST /deposit`` and ``POST /withdraw``."""

    amount: Any = Field(None, examples=[500])


class BalanceRead(BaseModel):
    balance: Union[int, float] = Field(..., examples=[300])


class OperationResult(BalanceRead):
    """Result of a deposit or withdrawal."""

    message: str = Field(..., examples=["Deposited $500"])


class TransactionRead(BaseModel):
    """A single entry of the transaction log."""

    type: Literal["deposit", "withdrawal"]
    amount: Union[int, float]
    date: str = Field(..., examples=["2025-01-01T12:00:00.000Z"])
