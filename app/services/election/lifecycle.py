"""Election lifecycle service - DRAFT -> OPEN -> CLOSED.

Every operation is a read-validate-write over the election, contestant and
vote ledger stores. Multi-store writes run in one DuckDB transaction.
"""

from collections.abc import Callable
from datetime import datetime

from loguru import logger

from app.errors import (
    AlreadyExistsError,
    AlreadyVotedError,
    ForbiddenError,
    IntegrityError,
    InvalidStateError,
    NotFoundError,
    ValidationError,
)
from app.models.election import Contestant, Election, ElectionResults, ElectionState
from app.repositories.db import transaction
from app.repositories.election import (
    ContestantRepository,
    ElectionRepository,
    VoteLedgerRepository,
)
from app.services.election.clock import read_clock, require_caller
from app.services.election.identifiers import ElectionKeys, TagCounter


class ElectionLifecycle:
    """Creates elections, registers contestants and records votes."""

    def __init__(
        self,
        election_repo: ElectionRepository,
        contestant_repo: ContestantRepository,
        ledger_repo: VoteLedgerRepository,
        tags: TagCounter,
        election_keys: ElectionKeys,
        clock: Callable[[], datetime],
        min_contestants: int = 2,
    ):
        self._elections = election_repo
        self._contestants = contestant_repo
        self._ledger = ledger_repo
        self._tags = tags
        self._keys = election_keys
        self._clock = clock
        self._min_contestants = min_contestants
        logger.debug("ElectionLifecycle initialized (min_contestants={})", min_contestants)

    # Lookups

    def _election(self, key: str) -> Election:
        election = self._elections.get(key)
        if election is None:
            raise NotFoundError(f"Election not found: {key}")
        return election

    def _owned_election(self, caller: str, key: str) -> Election:
        election = self._election(key)
        if election.creator != caller:
            logger.warning("{} is not the creator of election {}", caller, key)
            raise ForbiddenError(f"Only the creator of election {key} may do this")
        return election

    def _contestant(self, tag: int) -> Contestant:
        contestant = self._contestants.get(tag)
        if contestant is None:
            raise NotFoundError(f"Contestant not found: {tag}")
        return contestant

    # Mutations

    def create_election(self, caller: str) -> Election:
        """Create an election in DRAFT owned by caller."""
        caller = require_caller(caller)
        key = self._keys.new_key(caller)
        if self._elections.exists(key):
            logger.warning("Election {} already exists", key)
            raise AlreadyExistsError(f"Election already exists: {key}")

        election = self._elections.insert(key, caller, read_clock(self._clock))
        logger.info("Election {} created by {}", key, caller)
        return election

    def add_contestant(self, caller: str, election_key: str, name: str) -> Contestant:
        """Register a contestant in a DRAFT election."""
        caller = require_caller(caller)
        election = self._owned_election(caller, election_key)
        if not name or not name.strip():
            raise ValidationError("Contestant name must not be empty")
        if election.started or election.ended:
            logger.warning("Rejected contestant for {} election {}", election.state, election_key)
            raise InvalidStateError("Cannot add contestant to started/ended election")

        now = read_clock(self._clock)
        with transaction(self._contestants.connection):
            contestant = self._contestants.insert(self._tags.next(), name, election_key, now)

        logger.info("Contestant {} ({}) added to election {}", contestant.tag, name, election_key)
        return contestant

    def start_election(self, caller: str, election_key: str) -> Election:
        """Open voting. Starting an open election is a no-op."""
        caller = require_caller(caller)
        election = self._owned_election(caller, election_key)
        if election.ended:
            raise InvalidStateError("Election has already ended")
        if election.started:
            return election
        if len(election.contestant_tags) < self._min_contestants:
            raise InvalidStateError(
                f"Need at least {self._min_contestants} contestants, have {len(election.contestant_tags)}"
            )

        self._elections.set_started(election_key)
        logger.info("Election {} started", election_key)
        return self._election(election_key)

    def end_election(self, caller: str, election_key: str) -> Election:
        """Close voting."""
        caller = require_caller(caller)
        election = self._owned_election(caller, election_key)
        if not election.started:
            raise InvalidStateError("Election has not started yet")
        if election.ended:
            raise InvalidStateError("Election has already ended")

        self._elections.set_ended(election_key)
        logger.info("Election {} ended", election_key)
        return self._election(election_key)

    def vote(self, caller: str, tag: int) -> Contestant:
        """Cast caller's single vote in the contestant's election."""
        caller = require_caller(caller)
        contestant = self._contestant(tag)
        election = self._elections.get(contestant.election_key)
        if election is None:
            raise NotFoundError(f"Election not found for contestant {tag}: {contestant.election_key}")
        if election.state != ElectionState.OPEN:
            logger.warning("Vote rejected: election {} is {}", election.key, election.state)
            raise InvalidStateError(f"Election not open ({election.state})")
        if self._ledger.has_voted(election.key, caller):
            logger.warning("Vote rejected: {} already voted in {}", caller, election.key)
            raise AlreadyVotedError(f"{caller} already voted in election {election.key}")

        now = read_clock(self._clock)
        with transaction(self._contestants.connection):
            updated = self._contestants.record_vote(tag, now)
            self._ledger.record(election.key, caller, now)

        logger.info("Vote recorded: election={}, tag={}, count={}", election.key, tag, updated.vote_count)
        return updated

    # Queries

    def get_status(self, election_key: str) -> Election:
        return self._election(election_key)

    def get_state(self, election_key: str) -> ElectionState:
        return self._election(election_key).state

    def check_result(self, tag: int) -> int:
        """Vote count of one contestant."""
        return self._contestant(tag).vote_count

    def get_contestants(self, election_key: str) -> list[Contestant]:
        """Contestants of an election in registration order."""
        election = self._election(election_key)
        by_tag = self._contestants.get_many(election.contestant_tags)
        missing = [t for t in election.contestant_tags if t not in by_tag]
        if missing:
            raise IntegrityError(f"Election {election_key} references missing contestants: {missing}")
        return [by_tag[t] for t in election.contestant_tags]

    def announce_winner(self, caller: str, election_key: str) -> Contestant | None:
        """First contestant with the highest vote count, None when there are none."""
        caller = require_caller(caller)
        self._owned_election(caller, election_key)

        winner = None
        for contestant in self.get_contestants(election_key):
            if winner is None or contestant.vote_count > winner.vote_count:
                winner = contestant
        return winner

    def list_elections(self, creator: str | None = None) -> list[Election]:
        if creator is None:
            return self._elections.list_all()
        return self._elections.list_by_creator(creator)

    def has_voted(self, election_key: str, voter: str) -> bool:
        self._election(election_key)
        return self._ledger.has_voted(election_key, voter)

    def get_results(self, election_key: str) -> ElectionResults:
        """Standings by vote count; registration order breaks ties."""
        election = self._election(election_key)
        contestants = self.get_contestants(election_key)
        standings = sorted(contestants, key=lambda c: c.vote_count, reverse=True)
        return ElectionResults(
            election_key=election_key,
            state=election.state,
            total_votes=self._ledger.count_for_election(election_key),
            standings=standings,
        )
