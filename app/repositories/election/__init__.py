"""Election repositories."""

from app.repositories.election.contestant import ContestantRepository
from app.repositories.election.election import ElectionRepository
from app.repositories.election.ledger import VoteLedgerRepository

__all__ = ["ContestantRepository", "ElectionRepository", "VoteLedgerRepository"]
