"""Models package - DDL and entities."""

from app.models.common import BaseEntity
from app.models.election import (
    CONTESTANT_DDL,
    ELECTION_DDL,
    VOTE_LEDGER_DDL,
    Contestant,
    Election,
    ElectionResults,
    ElectionState,
)

ALL_DDL = [
    ELECTION_DDL,
    CONTESTANT_DDL,
    VOTE_LEDGER_DDL,
]

__all__ = [
    # Common
    "BaseEntity",
    # Election
    "ELECTION_DDL",
    "CONTESTANT_DDL",
    "VOTE_LEDGER_DDL",
    "Election",
    "ElectionState",
    "ElectionResults",
    "Contestant",
    # All DDL
    "ALL_DDL",
]
