"""Application settings."""

import os
from pathlib import Path

# Database
DB_PATH = os.getenv("ELECTION_DB_PATH", "elections.duckdb")

# Logging
LOG_DIR = Path(os.getenv("ELECTION_LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("ELECTION_LOG_LEVEL", "INFO")

# Elections
ELECTION_KEY_SCHEME = os.getenv("ELECTION_KEY_SCHEME", "generated")  # generated | creator
MIN_CONTESTANTS_TO_START = int(os.getenv("ELECTION_MIN_CONTESTANTS", "2"))
FIRST_TAG = 1
