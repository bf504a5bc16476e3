"""Database layer for the emoji URL shortener."""

import logging
from typing import Optional
from urllib.parse import urlparse

from .base import EmojiURLDBBase
from .memory import InMemoryStore
from .postgres import EmojiURLPostgres
from .models import Record

__all__ = [
    "EmojiURLDBBase",
    "InMemoryStore",
    "EmojiURLPostgres",
    "Record",
    "create_store",
]


def create_store(
    db_url: str,
    create_tables: bool = False,
    logger: Optional[logging.Logger] = None,
) -> EmojiURLDBBase:
    """Create a store for a connection URL.

    Args:
        db_url: postgres://, postgresql:// or memory:// URL
        create_tables: Create missing tables on first use (PostgreSQL only)
        logger: Optional logger

    Returns:
        Store instance

    Raises:
        ValueError: If the URL scheme is not supported
    """
    scheme = urlparse(db_url).scheme.lower()

    if scheme == "memory":
        return InMemoryStore(db_config=db_url, logger=logger)
    if scheme in ("postgres", "postgresql"):
        return EmojiURLPostgres(
            db_config=db_url,
            create_tables=create_tables,
            logger=logger,
        )

    raise ValueError(f"Unsupported database URL scheme: '{scheme}'")
