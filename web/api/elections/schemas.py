"""Election API response schemas."""

from datetime import datetime

from pydantic import BaseModel


class ElectionItem(BaseModel):
    """Election record."""

    key: str
    creator: str
    created_at: datetime
    contestant_tags: list[int]
    started: bool
    ended: bool
    state: str


class ElectionsResponse(BaseModel):
    """Election list response."""

    items: list[ElectionItem]
    total: int


class ContestantItem(BaseModel):
    """Contestant record."""

    tag: int
    name: str
    election_key: str
    vote_count: int
    created_at: datetime
    updated_at: datetime | None = None


class ContestantsResponse(BaseModel):
    """Contestants of one election."""

    election_key: str
    items: list[ContestantItem]


class ResultResponse(BaseModel):
    """Vote count for one contestant."""

    tag: int
    vote_count: int


class WinnerResponse(BaseModel):
    """Winner of an election, empty when it has no contestants."""

    election_key: str
    winner: ContestantItem | None = None


class ResultsResponse(BaseModel):
    """Standings for an election."""

    election_key: str
    state: str
    total_votes: int
    standings: list[ContestantItem]
