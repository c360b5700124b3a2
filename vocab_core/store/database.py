"""
Database - SQL connection management and schema setup.

This module handles ONLY connections and schema.
Record queries live in sql_store.
"""

from __future__ import annotations
import logging
from typing import Optional

from sqlalchemy import create_engine, inspect, update
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from vocab_core.config import get_database_url
from vocab_core.store.models import Base, Verb, Word


logger = logging.getLogger(__name__)

# Reused across requests
_engine: Optional[Engine] = None
_session_factory: Optional[sessionmaker] = None


def get_engine() -> Engine:
    """
    Get the SQLAlchemy engine, creating it on first use.

    Returns:
        SQLAlchemy Engine instance
    """
    global _engine
    if _engine is None:
        _engine = create_engine(
            get_database_url(),
            pool_pre_ping=True,  # Verify connections before use
            echo=False
        )
    return _engine


def get_session_factory() -> sessionmaker:
    global _session_factory
    if _session_factory is None:
        _session_factory = sessionmaker(bind=get_engine(), expire_on_commit=False)
    return _session_factory


def get_session() -> Session:
    """Get a SQLAlchemy session for database operations."""
    return get_session_factory()()


def init_db(engine: Optional[Engine] = None) -> None:
    """
    Create tables that don't exist yet.

    Safe to call multiple times.
    """
    engine = engine or get_engine()
    existing_tables = set(inspect(engine).get_table_names())
    missing = set(Base.metadata.tables) - existing_tables
    if missing:
        Base.metadata.create_all(engine)
        logger.info("Created tables: %s", ", ".join(sorted(missing)))


def reset_db(engine: Optional[Engine] = None) -> None:
    """
    DANGEROUS: Delete all data and recreate tables.

    All words, verbs and practice history will be lost!
    """
    engine = engine or get_engine()
    Base.metadata.drop_all(engine)
    logger.warning("All tables dropped")
    init_db(engine)


def reset_learning_progress(user_id: str, session: Optional[Session] = None) -> int:
    """
    Reset score, last practice and practice count of a user's words and verbs.

    Returns:
        Number of records reset
    """
    own_session = session is None
    session = session or get_session()
    try:
        reset_values = {"learning_score": 0, "last_practiced": None, "practice_count": 0}
        total = 0
        for model in (Word, Verb):
            result = session.execute(
                update(model).where(model.user_id == user_id).values(**reset_values)
            )
            total += result.rowcount or 0
        session.commit()
        return total
    finally:
        if own_session:
            session.close()
