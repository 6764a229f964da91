"""Election domain models - elections, contestants and the vote ledger."""

from app.models.election.contestant import CONTESTANT_DDL, Contestant
from app.models.election.election import ELECTION_DDL, Election, ElectionState
from app.models.election.entities import ElectionResults
from app.models.election.ledger import VOTE_LEDGER_DDL

__all__ = [
    "ELECTION_DDL",
    "CONTESTANT_DDL",
    "VOTE_LEDGER_DDL",
    "Election",
    "ElectionState",
    "ElectionResults",
    "Contestant",
]
