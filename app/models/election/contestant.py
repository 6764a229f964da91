"""Contestant model."""

from dataclasses import dataclass
from datetime import datetime

from app.models.common import BaseEntity

# seq = insertion order inside the owning election
CONTESTANT_DDL = """
CREATE TABLE IF NOT EXISTS contestant (
    tag INTEGER PRIMARY KEY,
    name VARCHAR NOT NULL,
    vote_count INTEGER NOT NULL DEFAULT 0,
    created_at TIMESTAMP NOT NULL,
    updated_at TIMESTAMP,
    election_key VARCHAR NOT NULL,
    seq INTEGER NOT NULL
)
"""


@dataclass
class Contestant(BaseEntity):
    """Candidate within exactly one election."""

    tag: int
    name: str
    election_key: str
    created_at: datetime
    vote_count: int = 0
    updated_at: datetime | None = None
