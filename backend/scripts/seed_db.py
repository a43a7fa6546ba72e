#!/usr/bin/env python3
"""
Create the schema (optionally dropping it first) and insert the default seed data.

Usage:
    python scripts/seed_db.py           # seed only if every table is empty
    python scripts/seed_db.py --reset   # drop + recreate all tables, then seed

Refuses to run unless SEED_ENABLED is true. For schema changes use `alembic upgrade head`.
"""
import argparse
import logging
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), ".."))

from db import SessionLocal, engine  # noqa: E402
from models import Base  # noqa: E402
from utils.config import DATABASE_URL, LOG_LEVEL, SEED_ENABLED  # noqa: E402
from utils.seed import reset_schema, seed_if_empty  # noqa: E402

LOG = logging.getLogger("seed_db")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--reset", action="store_true", help="drop and recreate all tables before seeding")
    args = parser.parse_args(argv)

    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s %(message)s")
    if not SEED_ENABLED:
        LOG.error("SEED_ENABLED is false; refusing to touch %s", DATABASE_URL)
        return 1

    LOG.info("Database: %s", DATABASE_URL)
    if args.reset:
        reset_schema(engine)
    else:
        Base.metadata.create_all(engine)

    db = SessionLocal()
    try:
        seed_if_empty(db)
    finally:
        db.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
