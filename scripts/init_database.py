#!/usr/bin/env python
"""
Create the indexes the Movie Reviews API relies on.

This script:
1. Creates a text index on movies.title (required by title search)
2. Creates an index on reviews.movie_id (used by the reviews lookup)
3. Verifies both collections and the text index exist

Usage:
    python scripts/init_database.py
    python scripts/init_database.py --uri mongodb://localhost:27017 --ns sample_mflix
"""

import sys
import argparse
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from movie_reviews.database import DatabaseManager, init_database, verify_schema


def print_section(title):
    """Print a formatted section header."""
    print(f"\n{'='*60}")
    print(f"{title}")
    print('='*60)


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Create Movie Reviews database indexes")
    parser.add_argument('--uri', help='MongoDB connection string (default: MOVIEREVIEWS_DB_URI)')
    parser.add_argument('--ns', help='Database name (default: MOVIEREVIEWS_NS)')
    args = parser.parse_args()

    db_manager = DatabaseManager(uri=args.uri, database_name=args.ns)
    try:
        print_section(f"Creating indexes in {db_manager.database_name}")
        init_database(db_manager)
        print("Indexes created.")

        print_section("Verifying schema")
        ok = verify_schema(db_manager)
    finally:
        db_manager.close()

    if ok:
        print("\n[SUCCESS] Database initialization successful")
    else:
        print("\n[FAILED] Database is missing collections or indexes")
    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
