"""Contestant repository - contestant store keyed by tag."""

from datetime import datetime

from loguru import logger

from app.models.election import Contestant
from app.repositories.base import BaseRepository

_COLUMNS = "tag, name, election_key, created_at, vote_count, updated_at"


def _to_entity(row) -> Contestant:
    return Contestant(
        tag=row[0],
        name=row[1],
        election_key=row[2],
        created_at=row[3],
        vote_count=row[4],
        updated_at=row[5],
    )


class ContestantRepository(BaseRepository):
    """Repository for contestant records."""

    def get(self, tag: int) -> Contestant | None:
        """Get contestant by tag."""
        row = self.fetchone(f"SELECT {_COLUMNS} FROM contestant WHERE tag = ?", [tag])
        return _to_entity(row) if row else None

    def get_many(self, tags: list[int]) -> dict[int, Contestant]:
        """Get contestants by tags: {tag: contestant}."""
        if not tags:
            return {}
        rows = self.fetchall(
            f"SELECT {_COLUMNS} FROM contestant WHERE list_contains(?::INTEGER[], tag)",
            [tags],
        )
        return {r[0]: _to_entity(r) for r in rows}

    def count_for_election(self, election_key: str) -> int:
        row = self.fetchone("SELECT COUNT(*) FROM contestant WHERE election_key = ?", [election_key])
        return row[0]

    def max_tag(self) -> int | None:
        """Highest tag ever allocated, None on an empty store."""
        row = self.fetchone("SELECT MAX(tag) FROM contestant")
        return row[0]

    def insert(self, tag: int, name: str, election_key: str, created_at: datetime) -> Contestant:
        """Insert a contestant at the end of its election's list."""
        seq = self.count_for_election(election_key)
        self.execute(
            """
            INSERT INTO contestant (tag, name, vote_count, created_at, updated_at, election_key, seq)
            VALUES (?, ?, 0, ?, NULL, ?, ?)
            """,
            [tag, name, created_at, election_key, seq],
        )
        logger.debug("Contestant inserted: tag={}, election={}, seq={}", tag, election_key, seq)
        return Contestant(tag=tag, name=name, election_key=election_key, created_at=created_at)

    def record_vote(self, tag: int, voted_at: datetime) -> Contestant:
        """Increment vote count and stamp updated_at."""
        self.execute(
            "UPDATE contestant SET vote_count = vote_count + 1, updated_at = ? WHERE tag = ?",
            [voted_at, tag],
        )
        return self.get(tag)
