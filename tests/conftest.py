"""Shared fixtures - fresh DuckDB file, fixed clock, deterministic ids."""

from datetime import datetime, timedelta

import pytest

from app.repositories import db as db_module
from app.repositories.election import (
    ContestantRepository,
    ElectionRepository,
    VoteLedgerRepository,
)
from app.services.election import ElectionLifecycle, TagCounter

T0 = datetime(2024, 1, 1, 12, 0, 0)


class FakeClock:
    """Advances one second per reading."""

    def __init__(self, start: datetime = T0):
        self.now = start

    def __call__(self) -> datetime:
        self.now += timedelta(seconds=1)
        return self.now


class SequentialKeys:
    """Election keys e1, e2, ..."""

    def __init__(self):
        self.count = 0

    def new_key(self, creator: str) -> str:
        self.count += 1
        return f"e{self.count}"


@pytest.fixture
def db(tmp_path, monkeypatch):
    db_module.close_db()
    monkeypatch.setattr(db_module, "DB_PATH", str(tmp_path / "test.duckdb"))
    yield db_module.get_db()
    db_module.close_db()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def lifecycle(db, clock):
    return ElectionLifecycle(
        election_repo=ElectionRepository(),
        contestant_repo=ContestantRepository(),
        ledger_repo=VoteLedgerRepository(),
        tags=TagCounter(start=1),
        election_keys=SequentialKeys(),
        clock=clock,
        min_contestants=2,
    )


@pytest.fixture
def open_election(lifecycle):
    """Election e1 by p1 with Alice (1) and Bob (2), started."""
    election = lifecycle.create_election("p1")
    lifecycle.add_contestant("p1", election.key, "Alice")
    lifecycle.add_contestant("p1", election.key, "Bob")
    return lifecycle.start_election("p1", election.key)
