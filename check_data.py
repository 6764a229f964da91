#!/usr/bin/env python3
"""
Check election data integrity.

Usage:
    python check_data.py                 # Validate all elections
    python check_data.py --election KEY  # Validate one election
"""

import sys
from pathlib import Path

# Add project to path
sys.path.insert(0, str(Path(__file__).parent))

import duckdb

from app.services.election.integrity import validate_all, validate_election
from settings import DB_PATH
from settings.logging import setup_logging

logger = setup_logging(to_file=False)


def run_validation(key: str | None = None) -> bool:
    """Validate elections in database."""
    if not Path(DB_PATH).exists():
        print(f"\n⚠️  No database at {DB_PATH}.\n")
        return True

    conn = duckdb.connect(DB_PATH, read_only=True)
    results = [validate_election(conn, key)] if key else validate_all(conn)
    conn.close()

    print("\n" + "=" * 60)
    print("ELECTION DATA REPORT")
    print("=" * 60)

    all_valid = True
    for result in results:
        status = "✅" if result["valid"] else "❌"
        print(f"\nElection {result['election']} {status}")
        for name, value in result["stats"].items():
            print(f"  {name}: {value:,}")
        if result["issues"]:
            all_valid = False
            for issue in result["issues"]:
                print(f"  ⚠️  {issue}")

    print("\n" + "=" * 60)
    print("✅ All data valid!" if all_valid else "❌ Some issues found.")
    print("=" * 60 + "\n")
    return all_valid


def main():
    args = sys.argv[1:]
    key = None
    if "--election" in args:
        idx = args.index("--election")
        if idx + 1 >= len(args):
            print(__doc__)
            sys.exit(1)
        key = args[idx + 1]

    logger.info("Validating {}", key or "all elections")
    sys.exit(0 if run_validation(key) else 1)


if __name__ == "__main__":
    main()
