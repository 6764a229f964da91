"""Vote ledger model - one row per (election, voter)."""

VOTE_LEDGER_DDL = """
CREATE TABLE IF NOT EXISTS vote_ledger (
    election_key VARCHAR NOT NULL,
    voter VARCHAR NOT NULL,
    voted BOOLEAN NOT NULL DEFAULT TRUE,
    voted_at TIMESTAMP NOT NULL,
    PRIMARY KEY (election_key, voter)
)
"""
