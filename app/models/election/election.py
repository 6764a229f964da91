"""Election model."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum

from app.models.common import BaseEntity

ELECTION_DDL = """
CREATE TABLE IF NOT EXISTS election (
    key VARCHAR PRIMARY KEY,
    creator VARCHAR NOT NULL,
    created_at TIMESTAMP NOT NULL,
    started BOOLEAN NOT NULL DEFAULT FALSE,
    ended BOOLEAN NOT NULL DEFAULT FALSE
)
"""


class ElectionState(StrEnum):
    """Lifecycle states."""

    DRAFT = "DRAFT"
    OPEN = "OPEN"
    CLOSED = "CLOSED"


@dataclass
class Election(BaseEntity):
    """One election owned by its creator."""

    key: str
    creator: str
    created_at: datetime
    contestant_tags: list[int] = field(default_factory=list)
    started: bool = False
    ended: bool = False

    @property
    def state(self) -> ElectionState:
        if self.ended:
            return ElectionState.CLOSED
        if self.started:
            return ElectionState.OPEN
        return ElectionState.DRAFT
