"""Utility script to create every table in the configured database."""

from __future__ import annotations

import argparse

from sqlalchemy.exc import SQLAlchemyError

from app.infrastructure.database import initialize_database


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Create the Faith Whisperer tables in the database set by DATABASE_URL.",
    )
    return parser.parse_args()


def main() -> None:
    parse_args()
    try:
        initialize_database()
    except SQLAlchemyError as exc:
        raise SystemExit(f"Could not initialize the database: {exc}") from exc
    print("Database tables are ready.")


if __name__ == "__main__":
    main()
