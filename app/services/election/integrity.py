"""Data integrity checks over the election stores."""

import duckdb


def validate_election(conn: duckdb.DuckDBPyConnection, key: str) -> dict:
    """Validate invariants for one election."""
    issues = []
    stats = {}

    row = conn.execute("SELECT started, ended FROM election WHERE key = ?", [key]).fetchone()
    if row is None:
        return {"election": key, "valid": False, "stats": stats, "issues": ["Election not found"]}
    started, ended = row
    if ended and not started:
        issues.append("Election ended but never started")

    contestant_check = conn.execute(
        """
        SELECT
            COUNT(*) as contestants,
            COALESCE(SUM(vote_count), 0) as votes,
            SUM(CASE WHEN vote_count < 0 THEN 1 ELSE 0 END) as negative,
            COUNT(*) - COUNT(DISTINCT seq) as duplicate_seq
        FROM contestant WHERE election_key = ?
        """,
        [key],
    ).fetchone()
    stats["contestants"] = contestant_check[0]
    stats["votes"] = int(contestant_check[1])
    if contestant_check[2]:
        issues.append(f"{contestant_check[2]} contestants have negative vote counts")
    if contestant_check[3]:
        issues.append(f"{contestant_check[3]} contestants share a position")

    ledger_count = conn.execute("SELECT COUNT(*) FROM vote_ledger WHERE election_key = ?", [key]).fetchone()[0]
    stats["ledger_entries"] = ledger_count
    if ledger_count != stats["votes"]:
        issues.append(f"Vote counts sum to {stats['votes']} but ledger has {ledger_count} entries")

    if not started and stats["votes"] > 0:
        issues.append("Votes recorded before election started")

    return {
        "election": key,
        "valid": len(issues) == 0,
        "stats": stats,
        "issues": issues,
    }


def validate_all(conn: duckdb.DuckDBPyConnection) -> list[dict]:
    """Validate every election, plus orphaned contestants."""
    keys = [r[0] for r in conn.execute("SELECT key FROM election ORDER BY created_at, key").fetchall()]
    results = [validate_election(conn, k) for k in keys]

    orphans = conn.execute(
        """
        SELECT c.election_key, COUNT(*) FROM contestant c
        LEFT JOIN election e ON e.key = c.election_key
        WHERE e.key IS NULL
        GROUP BY c.election_key
        """
    ).fetchall()
    for election_key, count in orphans:
        results.append(
            {
                "election": election_key,
                "valid": False,
                "stats": {"contestants": count},
                "issues": [f"{count} contestants reference a missing election"],
            }
        )
    return results
