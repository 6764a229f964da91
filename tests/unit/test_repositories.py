"""Tests for DuckDB repositories."""

from datetime import datetime

import pytest

from app.repositories import transaction
from app.repositories.election import (
    ContestantRepository,
    ElectionRepository,
    VoteLedgerRepository,
)

T = datetime(2024, 1, 1)


class TestContestantRepository:
    def test_max_tag(self, db):
        repo = ContestantRepository()
        assert repo.max_tag() is None
        repo.insert(5, "A", "e1", T)
        repo.insert(9, "B", "e1", T)
        assert repo.max_tag() == 9

    def test_get_many(self, db):
        repo = ContestantRepository()
        repo.insert(1, "A", "e1", T)
        repo.insert(2, "B", "e1", T)
        assert set(repo.get_many([1, 2, 3])) == {1, 2}
        assert repo.get_many([]) == {}

    def test_record_vote(self, db):
        repo = ContestantRepository()
        repo.insert(1, "A", "e1", T)
        updated = repo.record_vote(1, datetime(2024, 1, 2))
        assert updated.vote_count == 1
        assert updated.updated_at == datetime(2024, 1, 2)


class TestElectionRepository:
    def test_tags_follow_insertion_order(self, db):
        elections = ElectionRepository()
        contestants = ContestantRepository()
        elections.insert("e1", "p1", T)
        contestants.insert(7, "A", "e1", T)
        contestants.insert(3, "B", "e1", T)
        assert elections.get("e1").contestant_tags == [7, 3]

    def test_set_ended_requires_started(self, db):
        repo = ElectionRepository()
        repo.insert("e1", "p1", T)
        repo.set_ended("e1")
        assert not repo.get("e1").ended
        repo.set_started("e1")
        repo.set_ended("e1")
        assert repo.get("e1").ended


class TestVoteLedgerRepository:
    def test_record(self, db):
        repo = VoteLedgerRepository()
        repo.record("e1", "p2", T)
        repo.record("e1", "p3", datetime(2024, 1, 2))
        repo.record("e2", "p2", T)
        assert repo.has_voted("e1", "p2")
        assert not repo.has_voted("e1", "p4")
        assert repo.count_for_election("e1") == 2
        assert repo.count_for_election("e2") == 1

    def test_identities_with_separators_do_not_collide(self, db):
        repo = VoteLedgerRepository()
        repo.record("a", "b:c", T)
        assert repo.has_voted("a", "b:c")
        assert not repo.has_voted("a:b", "c")
        repo.record("a:b", "c", T)
        assert repo.count_for_election("a:b") == 1


class TestTransaction:
    def test_rollback(self, db):
        repo = VoteLedgerRepository()
        with pytest.raises(ValueError):
            with transaction(repo.connection):
                repo.record("e1", "p2", T)
                raise ValueError("boom")
        assert not repo.has_voted("e1", "p2")

    def test_commit(self, db):
        repo = VoteLedgerRepository()
        with transaction(repo.connection):
            repo.record("e1", "p2", T)
        assert repo.has_voted("e1", "p2")
