"""Repositories package - data access layer for our database."""

from app.repositories.base import BaseRepository
from app.repositories.db import (
    close_db,
    get_db,
    init_tables,
    transaction,
)
from app.repositories.election import (
    ContestantRepository,
    ElectionRepository,
    VoteLedgerRepository,
)

__all__ = [
    # DB
    "get_db",
    "close_db",
    "init_tables",
    "transaction",
    # Repositories
    "BaseRepository",
    "ElectionRepository",
    "ContestantRepository",
    "VoteLedgerRepository",
]
