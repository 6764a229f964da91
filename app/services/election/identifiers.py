"""Identifier services - contestant tags and election keys."""

import uuid
from typing import Protocol

from loguru import logger


class TagCounter:
    """Monotonic integer tag source."""

    def __init__(self, start: int = 1):
        self._next = start
        logger.debug("TagCounter starting at {}", start)

    def peek(self) -> int:
        """Tag the next call to `next` will return."""
        return self._next

    def next(self) -> int:
        tag = self._next
        self._next += 1
        return tag


class ElectionKeys(Protocol):
    def new_key(self, creator: str) -> str: ...


class UuidElectionKeys:
    """Random key per election - many elections per creator."""

    def new_key(self, creator: str) -> str:
        return uuid.uuid4().hex


class CreatorElectionKeys:
    """Creator identity is the key - one election per creator."""

    def new_key(self, creator: str) -> str:
        return creator


def election_keys_for(scheme: str) -> ElectionKeys:
    """Pick the election key scheme by name."""
    schemes = {"generated": UuidElectionKeys, "creator": CreatorElectionKeys}
    if scheme not in schemes:
        raise ValueError(f"Unknown election key scheme: {scheme}. Use one of {sorted(schemes)}")
    return schemes[scheme]()
