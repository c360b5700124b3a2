"""
Environment configuration.

Values come from the process environment, optionally populated from a
.env file in the working directory.
"""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

# Load environment
load_dotenv()

DEFAULT_DATABASE_URL = "sqlite:///vocab_trainer.db"
DB_NAME = "vocab_trainer"
TEST_DB_NAME = "test_vocab_trainer"

STORE_BACKENDS = ("sql", "mongo")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def is_test_mode() -> bool:
    """Check if running in test mode."""
    return os.getenv("TEST_MODE", "false").lower() == "true"


def get_database_url() -> str:
    """
    Get the SQL database URL.

    In test mode the database name `vocab_trainer` in the URL is replaced
    with `test_vocab_trainer`.

    Returns:
        SQLAlchemy connection string
    """
    url = os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL)
    if is_test_mode():
        return url.replace(DB_NAME, TEST_DB_NAME)
    return url


def get_mongo_uri() -> str:
    mongo_uri = os.getenv("MONGO_URI")
    if not mongo_uri:
        raise ValueError("MONGO_URI not found in environment variables")
    return mongo_uri


def get_mongo_db_name() -> str:
    name = os.getenv("MONGO_DB_NAME", DB_NAME)
    return TEST_DB_NAME if is_test_mode() and name == DB_NAME else name


def get_store_backend() -> str:
    """Which store backs practice sessions: "sql" (default) or "mongo"."""
    backend = os.getenv("STORE_BACKEND", "sql").lower()
    if backend not in STORE_BACKENDS:
        raise ValueError(f"Unknown STORE_BACKEND: {backend!r} (expected one of {STORE_BACKENDS})")
    return backend


def get_default_user_id() -> str:
    """Get default user id for scoping vocabulary records."""
    return os.getenv("DEFAULT_USER_ID", "default")


def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()


def configure_logging(level: str | None = None) -> None:
    """Set up root logging once; later calls only adjust the level."""
    logging.basicConfig(level=level or get_log_level(), format=LOG_FORMAT)
    logging.getLogger().setLevel(level or get_log_level())
