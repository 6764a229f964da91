"""Election services."""

from app.services.election.clock import SystemClock
from app.services.election.identifiers import (
    CreatorElectionKeys,
    TagCounter,
    UuidElectionKeys,
    election_keys_for,
)
from app.services.election.lifecycle import ElectionLifecycle

__all__ = [
    "ElectionLifecycle",
    "SystemClock",
    "TagCounter",
    "UuidElectionKeys",
    "CreatorElectionKeys",
    "election_keys_for",
]
