"""Tests for identifier services and host inputs."""

from datetime import datetime

import pytest

from app.errors import HostUnavailableError
from app.services.election import CreatorElectionKeys, TagCounter, UuidElectionKeys, election_keys_for
from app.services.election.clock import SystemClock, read_clock, require_caller


class TestTagCounter:
    def test_monotonic(self):
        tags = TagCounter(start=1)
        assert [tags.next() for _ in range(3)] == [1, 2, 3]

    def test_peek_does_not_consume(self):
        tags = TagCounter(start=7)
        assert tags.peek() == 7
        assert tags.next() == 7
        assert tags.peek() == 8


class TestElectionKeys:
    def test_uuid_keys_unique(self):
        keys = UuidElectionKeys()
        assert keys.new_key("p1") != keys.new_key("p1")

    def test_creator_key(self):
        assert CreatorElectionKeys().new_key("p1") == "p1"

    def test_scheme_lookup(self):
        assert isinstance(election_keys_for("generated"), UuidElectionKeys)
        assert isinstance(election_keys_for("creator"), CreatorElectionKeys)

    def test_unknown_scheme(self):
        with pytest.raises(ValueError):
            election_keys_for("random")


class TestHostInputs:
    def test_system_clock_naive(self):
        assert SystemClock()().tzinfo is None

    def test_read_clock(self):
        now = datetime(2024, 1, 1)
        assert read_clock(lambda: now) == now

    def test_read_clock_failure(self):
        def broken():
            raise RuntimeError("down")

        with pytest.raises(HostUnavailableError):
            read_clock(broken)

    def test_read_clock_none(self):
        with pytest.raises(HostUnavailableError):
            read_clock(lambda: None)

    def test_require_caller(self):
        assert require_caller("p1") == "p1"
        with pytest.raises(HostUnavailableError):
            require_caller(None)
        with pytest.raises(HostUnavailableError):
            require_caller("")
