#!/usr/bin/env python
"""
Database verification script.

This script performs checks on the movie reviews database:
1. Basic statistics (movie and review counts)
2. Rating values (distinct rated field)
3. Coverage (movies that have no reviews)

Usage:
    # Full verification
    python scripts/verify_database.py

    # Counts only
    python scripts/verify_database.py --quick
"""

import sys
import argparse
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from movie_reviews.database import DatabaseManager, MoviesDAO


def print_section(title):
    """Print a formatted section header."""
    print(f"\n{'='*60}")
    print(f"{title}")
    print('='*60)


def check_basic_stats(db):
    """Print collection counts; fails when there are no movies."""
    print_section("1. Database Statistics")
    movie_count = db["movies"].count_documents({})
    review_count = db["reviews"].count_documents({})
    print(f"  Movies:  {movie_count:,}")
    print(f"  Reviews: {review_count:,}")
    if movie_count == 0:
        print("  [WARNING] movies collection is empty")
        return False
    return True


def check_ratings(dao):
    print_section("2. Rating Values")
    ratings = dao.get_ratings()
    print(f"  {len(ratings)} distinct values: {', '.join(str(r) for r in ratings)}")
    return bool(ratings)


def check_review_coverage(db, sample=5):
    """Count movies that no review points to."""
    print_section("3. Review Coverage")
    reviewed = list(db["reviews"].distinct("movie_id"))
    unreviewed_query = {"_id": {"$nin": reviewed}}
    unreviewed = db["movies"].count_documents(unreviewed_query)
    print(f"  Movies with reviews:    {len(reviewed):,}")
    print(f"  Movies without reviews: {unreviewed:,}")
    for movie in db["movies"].find(unreviewed_query, {"title": 1}).limit(sample):
        print(f"    - {movie['_id']} {movie.get('title', '')}")
    return True


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Verify movie reviews database contents")
    parser.add_argument('--uri', help='MongoDB connection string (default: MOVIEREVIEWS_DB_URI)')
    parser.add_argument('--ns', help='Database name (default: MOVIEREVIEWS_NS)')
    parser.add_argument('--quick', action='store_true', help='Print counts only')
    args = parser.parse_args()

    db_manager = DatabaseManager(uri=args.uri, database_name=args.ns)
    try:
        db = db_manager.get_database()
        success = check_basic_stats(db)
        if not args.quick:
            dao = MoviesDAO()
            dao.inject_db(db_manager.client, db_manager.database_name)
            success = check_ratings(dao) and success
            success = check_review_coverage(db) and success
    except Exception as e:
        print(f"\n[ERROR] Verification failed: {e}")
        import traceback
        traceback.print_exc()
        success = False
    finally:
        db_manager.close()

    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
