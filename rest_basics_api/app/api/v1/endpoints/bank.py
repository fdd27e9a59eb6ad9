"""
Bank endpoints for API v1.

A single implicit account with a balance and a transaction history.
Deposits and withdrawals take ``{"amount": <number>}``; anything other
than a positive number is answered with 400, as is a withdrawal larger
than the balance.
"""

from typing import List, Optional

from fastapi import APIRouter, HTTPException, status

from rest_basics_api.app.schemas.bank import (
    AmountRequest,
    BalanceRead,
    OperationResult,
    TransactionRead,
)
from rest_basics_api.app.schemas.common import MessageRead
from rest_basics_api.app.services.bank_service import BankService


router = APIRouter()


@router.get("/balance", response_model=BalanceRead)
async def get_balance() -> BalanceRead:
    """Return the current balance of the account."""
    return await BankService.get_balance()


@router.post("/deposit", response_model=OperationResult)
async def deposit(payload: Optional[AmountRequest] = None) -> OperationResult:
    """Add money to the account and record the transaction."""
    amount = payload.amount if payload is not None else None
    try:
        return await BankService.deposit(amount)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post("/withdraw", response_model=OperationResult)
async def withdraw(payload: Optional[AmountRequest] = None) -> OperationResult:
    """Take money out of the account if the balance allows it."""
    amount = payload.amount if payload is not None else None
    try:
        return await BankService.withdraw(amount)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/transactions", response_model=List[TransactionRead])
async def list_transactions() -> List[TransactionRead]:
    """Return every past deposit and withdrawal, oldest first."""
    return await BankService.list_transactions()


@router.delete("/transactions", response_model=MessageRead)
async def clear_transactions() -> MessageRead:
    """Clear the transaction history.  The balance is not affected."""
    await BankService.clear_transactions()
    return MessageRead(message="All transactions cleared.")
