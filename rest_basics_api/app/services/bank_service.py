"""
Business logic for the bank ledger.

There is exactly one implicit account.  ``BankService`` keeps its
balance and an append‑only transaction log in the in‑memory store.
The balance is never recomputed from the log, and clearing the log
leaves the balance untouched.
"""

from __future__ import annotations

import logging
import math
from datetime import datetime, timezone
from typing import Any, List

from rest_basics_api.app.core.errors import InsufficientFundsError, InvalidAmountError
from rest_basics_api.app.core.store import Number, get_store
from rest_basics_api.app.schemas.bank import BalanceRead, OperationResult, TransactionRead

logger = logging.getLogger(__name__)


def utc_timestamp() -> str:
    """Current UTC time as ISO‑8601 with milliseconds and a ``Z`` suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def normalize_amount(amount: Number) -> Number:
    """Store whole floats as ints so ``500.0`` is kept and sent as ``500``."""
    if isinstance(amount, float) and amount.is_integer():
        return int(amount)
    return amount


def format_amount(amount: Number) -> str:
    """Render an amount for messages: ``500`` rather than ``500.0``."""
    return str(normalize_amount(amount))


def validate_amount(amount: Any, error_message: str) -> Number:
    """Return ``amount`` if it is a finite number greater than zero.

    Booleans and numeric strings are rejected.  Raises
    ``InvalidAmountError`` carrying ``error_message`` otherwise.
    """
    if isinstance(amount, bool) or not isinstance(amount, (int, float)):
        raise InvalidAmountError(error_message)
    if isinstance(amount, float) and not math.isfinite(amount):
        raise InvalidAmountError(error_message)
    if amount <= 0:
        raise InvalidAmountError(error_message)
    return normalize_amount(amount)


class BankService:
    """Service for the single in‑memory account."""

    @classmethod
    def _record(cls, kind: str, amount: Number) -> None:
        get_store().transactions.append(
            {"type": kind, "amount": amount, "date": utc_timestamp()}
        )

    @classmethod
    async def get_balance(cls) -> BalanceRead:
        return BalanceRead(balance=get_store().balance)

    @classmethod
    async def deposit(cls, amount: Any) -> OperationResult:
        """Add ``amount`` to the balance and log a ``deposit``.

        Raises ``InvalidAmountError`` unless ``amount`` is a positive
        number.
        """
        try:
            amount = validate_amount(amount, "Invalid deposit amount")
        except InvalidAmountError:
            logger.warning("Rejected deposit of %r", amount)
            raise
        store = get_store()
        store.balance = normalize_amount(store.balance + amount)
        cls._record("deposit", amount)
        logger.info("Deposited %s, balance is now %s", amount, store.balance)
        return OperationResult(
            message=f"Deposited ${format_amount(amount)}", balance=store.balance
        )

    @classmethod
    async def withdraw(cls, amount: Any) -> OperationResult:
        """Subtract ``amount`` from the balance and log a ``withdrawal``.

        Raises ``InvalidAmountError`` for a bad amount and
        ``InsufficientFundsError`` if it exceeds the balance.  The
        balance may reach exactly zero.
        """
        try:
            amount = validate_amount(amount, "Invalid withdrawal amount")
        except InvalidAmountError:
            logger.warning("Rejected withdrawal of %r", amount)
            raise
        store = get_store()
        if amount > store.balance:
            logger.warning(
                "Withdrawal of %s exceeds balance %s", amount, store.balance
            )
            raise InsufficientFundsError()
        store.balance = normalize_amount(store.balance - amount)
        cls._record("withdrawal", amount)
        logger.info("Withdrew %s, balance is now %s", amount, store.balance)
        return OperationResult(
            message=f"Withdrew ${format_amount(amount)}", balance=store.balance
        )

    @classmethod
    async def list_transactions(cls) -> List[TransactionRead]:
        """Return the transaction log, oldest first."""
        return [TransactionRead(**tx) for tx in get_store().transactions]

    @classmethod
    async def clear_transactions(cls) -> int:
        """Empty the transaction log and return how many entries were dropped."""
        store = get_store()
        cleared = len(store.transactions)
        store.transactions = []
        logger.info("Cleared %d transaction(s)", cleared)
        return cleared
