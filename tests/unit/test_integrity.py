"""Tests for data integrity checks."""

from app.services.election.integrity import validate_all, validate_election


class TestValidateElection:
    def test_valid(self, lifecycle, open_election, db):
        lifecycle.vote("p2", 1)
        lifecycle.vote("p3", 2)
        result = validate_election(db, open_election.key)
        assert result["valid"]
        assert result["stats"] == {"contestants": 2, "votes": 2, "ledger_entries": 2}

    def test_missing(self, db):
        result = validate_election(db, "nope")
        assert not result["valid"]

    def test_ended_not_started(self, lifecycle, db):
        election = lifecycle.create_election("p1")
        db.execute("UPDATE election SET ended = TRUE WHERE key = ?", [election.key])
        result = validate_election(db, election.key)
        assert "Election ended but never started" in result["issues"]

    def test_count_mismatch(self, lifecycle, open_election, db):
        lifecycle.vote("p2", 1)
        db.execute("UPDATE contestant SET vote_count = 5 WHERE tag = 1")
        result = validate_election(db, open_election.key)
        assert not result["valid"]
        assert any("ledger" in i for i in result["issues"])


class TestValidateAll:
    def test_empty(self, db):
        assert validate_all(db) == []

    def test_orphans(self, lifecycle, open_election, db):
        lifecycle.create_election("p2")
        db.execute("DELETE FROM election WHERE key = ?", [open_election.key])
        results = validate_all(db)
        assert len(results) == 2
        assert results[0]["valid"]
        assert results[1]["election"] == open_election.key
        assert not results[1]["valid"]
