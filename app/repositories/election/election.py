"""Election repository - election store keyed by election key."""

from datetime import datetime

from loguru import logger

from app.models.election import Election
from app.repositories.base import BaseRepository

_COLUMNS = "key, creator, created_at, started, ended"


class ElectionRepository(BaseRepository):
    """Repository for election records."""

    def _tags(self, key: str) -> list[int]:
        rows = self.fetchall(
            "SELECT tag FROM contestant WHERE election_key = ? ORDER BY seq",
            [key],
        )
        return [r[0] for r in rows]

    def _to_entity(self, row) -> Election:
        return Election(
            key=row[0],
            creator=row[1],
            created_at=row[2],
            contestant_tags=self._tags(row[0]),
            started=row[3],
            ended=row[4],
        )

    def get(self, key: str) -> Election | None:
        """Get election by key."""
        row = self.fetchone(f"SELECT {_COLUMNS} FROM election WHERE key = ?", [key])
        if row is None:
            return None
        return self._to_entity(row)

    def exists(self, key: str) -> bool:
        row = self.fetchone("SELECT COUNT(*) FROM election WHERE key = ?", [key])
        return row[0] > 0

    def insert(self, key: str, creator: str, created_at: datetime) -> Election:
        """Insert a new election in DRAFT."""
        self.execute(
            "INSERT INTO election (key, creator, created_at, started, ended) VALUES (?, ?, ?, FALSE, FALSE)",
            [key, creator, created_at],
        )
        logger.debug("Election inserted: {}", key)
        return Election(key=key, creator=creator, created_at=created_at)

    def set_started(self, key: str) -> None:
        self.execute("UPDATE election SET started = TRUE WHERE key = ?", [key])

    def set_ended(self, key: str) -> None:
        self.execute("UPDATE election SET ended = TRUE WHERE key = ? AND started", [key])

    def list_all(self) -> list[Election]:
        """All elections in creation order."""
        rows = self.fetchall(f"SELECT {_COLUMNS} FROM election ORDER BY created_at, key")
        result = [self._to_entity(r) for r in rows]
        logger.debug("list_all: {} elections", len(result))
        return result

    def list_by_creator(self, creator: str) -> list[Election]:
        """Elections created by one identity."""
        rows = self.fetchall(
            f"SELECT {_COLUMNS} FROM election WHERE creator = ? ORDER BY created_at, key",
            [creator],
        )
        result = [self._to_entity(r) for r in rows]
        logger.debug("list_by_creator({}): {} elections", creator, len(result))
        return result
