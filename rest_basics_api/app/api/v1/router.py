"""
Top‑level router for version 1 of the API.

This router aggregates the resource routers under a unified prefix.
When new resources are introduced, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import bank, root, users

router = APIRouter()

router.include_router(root.router, tags=["root"])
router.include_router(users.router, prefix="/users", tags=["users"])
# The bank router defines its own paths (/balance, /deposit, ...).  Do not
# add a prefix here or they would move under e.g. ``/bank/balance``.
router.include_router(bank.router, tags=["bank"])
