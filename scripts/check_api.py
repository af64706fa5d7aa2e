#!/usr/bin/env python
"""
Smoke check for the Movie Reviews API.

Starts the app in-process (running its startup and shutdown), calls the
health endpoint and prints the result. Exits non-zero unless the database
answered the ping.

Usage:
    python scripts/check_api.py
    MOVIEREVIEWS_DB_URI=mongodb://db:27017 python scripts/check_api.py
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from fastapi.testclient import TestClient

from movie_reviews.api.main import app


def main():
    """Main entry point."""
    with TestClient(app) as client:
        r = client.get("/api/v1/health")
    print("Health status:", r.status_code)
    print("Response:", r.json())
    sys.exit(0 if r.json().get("status") == "healthy" else 1)


if __name__ == "__main__":
    main()
