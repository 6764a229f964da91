"""Election domain entities - computed results."""

from dataclasses import dataclass, field

from app.models.common import BaseEntity
from app.models.election.contestant import Contestant
from app.models.election.election import ElectionState


@dataclass
class ElectionResults(BaseEntity):
    """Standings for one election."""

    election_key: str
    state: ElectionState
    total_votes: int
    standings: list[Contestant] = field(default_factory=list)
