"""
In‑memory storage for the API.

All state lives in a single ``MemoryStore`` instance for the lifetime
of the process: the user directory and the bank ledger (a balance and
an append‑only transaction log).  Nothing is written to disk; a
restart starts from the seed data again.

Services obtain the store via ``get_store`` and mutate it in place.
``init_store`` is called on application startup and by the tests to
return to a known state.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Union

Number = Union[int, float]

# Users present when the application starts.
SEED_USERS: List[Dict[str, Any]] = [
    {"id": 1, "name": "Eddie"},
    {"id": 2, "name": "Kai"},
]


@dataclass
class MemoryStore:
    """Process‑lifetime collections backing the API."""

    users: List[Dict[str, Any]] = field(default_factory=list)
    balance: Number = 0
    transactions: List[Dict[str, Any]] = field(default_factory=list)


_store = MemoryStore()


def get_store() -> MemoryStore:
    """Return the store shared by every request."""
    return _store


def init_store(seed_users: bool = True) -> MemoryStore:
    """Reset the store to its startup state.

    The existing ``MemoryStore`` object is cleared in place so that
    references held elsewhere stay valid.  When ``seed_users`` is true
    the user directory is populated with copies of ``SEED_USERS``.
    """
    store = get_store()
    store.users = [dict(user) for user in SEED_USERS] if seed_users else []
    store.balance = 0
    store.transactions = []
    logging.getLogger(__name__).debug(
        "Store initialised with %d user(s)", len(store.users)
    )
    return store
