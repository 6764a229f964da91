"""Vote ledger repository - who voted in which election."""

from datetime import datetime

from loguru import logger

from app.repositories.base import BaseRepository


class VoteLedgerRepository(BaseRepository):
    """Repository for the append-only vote ledger."""

    def has_voted(self, election_key: str, voter: str) -> bool:
        row = self.fetchone(
            "SELECT voted FROM vote_ledger WHERE election_key = ? AND voter = ?",
            [election_key, voter],
        )
        return bool(row and row[0])

    def record(self, election_key: str, voter: str, voted_at: datetime) -> None:
        """Mark voter as having voted in election."""
        self.execute(
            "INSERT INTO vote_ledger (election_key, voter, voted, voted_at) VALUES (?, ?, TRUE, ?)",
            [election_key, voter, voted_at],
        )
        logger.debug("Ledger entry: election={}, voter={}", election_key, voter)

    def count_for_election(self, election_key: str) -> int:
        row = self.fetchone("SELECT COUNT(*) FROM vote_ledger WHERE election_key = ?", [election_key])
        return row[0]
