"""Election API views - thin layer over the lifecycle service."""

from app.container import container
from app.models.election import Contestant, Election
from web.api.errors import validate_election_key, validate_tag

from .schemas import (
    ContestantItem,
    ContestantsResponse,
    ElectionItem,
    ElectionsResponse,
    ResultResponse,
    ResultsResponse,
    WinnerResponse,
)


def _election_item(e: Election) -> ElectionItem:
    return ElectionItem(
        key=e.key,
        creator=e.creator,
        created_at=e.created_at,
        contestant_tags=e.contestant_tags,
        started=e.started,
        ended=e.ended,
        state=e.state.value,
    )


def _contestant_item(c: Contestant) -> ContestantItem:
    return ContestantItem(
        tag=c.tag,
        name=c.name,
        election_key=c.election_key,
        vote_count=c.vote_count,
        created_at=c.created_at,
        updated_at=c.updated_at,
    )


def create_election(caller: str) -> ElectionItem:
    """Create an election owned by caller."""
    return _election_item(container.lifecycle.create_election(caller))


def add_contestant(caller: str, election_key: str, name: str) -> ContestantItem:
    """Add a contestant to a DRAFT election."""
    validate_election_key(election_key)
    return _contestant_item(container.lifecycle.add_contestant(caller, election_key, name))


def start_election(caller: str, election_key: str) -> ElectionItem:
    validate_election_key(election_key)
    return _election_item(container.lifecycle.start_election(caller, election_key))


def end_election(caller: str, election_key: str) -> ElectionItem:
    validate_election_key(election_key)
    return _election_item(container.lifecycle.end_election(caller, election_key))


def vote(caller: str, tag: int) -> ContestantItem:
    """Cast a vote for a contestant."""
    validate_tag(tag)
    return _contestant_item(container.lifecycle.vote(caller, tag))


def get_status(election_key: str) -> ElectionItem:
    validate_election_key(election_key)
    return _election_item(container.lifecycle.get_status(election_key))


def check_result(tag: int) -> ResultResponse:
    validate_tag(tag)
    return ResultResponse(tag=tag, vote_count=container.lifecycle.check_result(tag))


def get_contestants(election_key: str) -> ContestantsResponse:
    validate_election_key(election_key)
    items = [_contestant_item(c) for c in container.lifecycle.get_contestants(election_key)]
    return ContestantsResponse(election_key=election_key, items=items)


def announce_winner(caller: str, election_key: str) -> WinnerResponse:
    validate_election_key(election_key)
    winner = container.lifecycle.announce_winner(caller, election_key)
    return WinnerResponse(
        election_key=election_key,
        winner=_contestant_item(winner) if winner else None,
    )


def list_elections(creator: str | None = None) -> ElectionsResponse:
    items = [_election_item(e) for e in container.lifecycle.list_elections(creator)]
    return ElectionsResponse(items=items, total=len(items))


def get_results(election_key: str) -> ResultsResponse:
    """Standings for an election."""
    validate_election_key(election_key)
    results = container.lifecycle.get_results(election_key)
    return ResultsResponse(
        election_key=results.election_key,
        state=results.state.value,
        total_votes=results.total_votes,
        standings=[_contestant_item(c) for c in results.standings],
    )


def has_voted(election_key: str, voter: str) -> bool:
    validate_election_key(election_key)
    return container.lifecycle.has_voted(election_key, voter)
