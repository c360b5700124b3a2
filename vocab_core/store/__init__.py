"""
Stores backing practice sessions.
"""

from __future__ import annotations

from typing import Optional

from vocab_core.config import get_store_backend
from vocab_core.store.database import init_db, reset_db, reset_learning_progress
from vocab_core.store.mongo_store import MongoItemStore
from vocab_core.store.sql_store import SqlItemStore


def build_store(user_id: str, backend: Optional[str] = None):
    """
    Create the configured store for a user.

    Args:
        user_id: Owner of the practiced records
        backend: "sql" or "mongo" (default: STORE_BACKEND env var)
    """
    backend = backend or get_store_backend()
    if backend == "mongo":
        return MongoItemStore(user_id)
    return SqlItemStore(user_id)


__all__ = [
    "build_store",
    "init_db",
    "reset_db",
    "reset_learning_progress",
    "MongoItemStore",
    "SqlItemStore",
]
