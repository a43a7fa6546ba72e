"""Sequential id allocation: next id is max(id) + 1 per table."""
import logging
from collections.abc import Callable
from typing import TypeVar

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from models import Base

LOG = logging.getLogger(__name__)

MAX_ID_ATTEMPTS = 5

ModelT = TypeVar("ModelT", bound=Base)


def next_id(session: Session, table: str) -> int:
    """Return max(id) + 1 for table, or 1 when the table is empty. Raises KeyError for unknown tables."""
    tbl = Base.metadata.tables[table]
    result = session.execute(select(func.coalesce(func.max(tbl.c.id), 0) + 1))
    return int(result.scalar() or 1)


def insert_with_next_id(
    session: Session,
    model: type[ModelT],
    build: Callable[[int], ModelT],
) -> ModelT:
    """
    Allocate max+1, build the row with it and insert it inside a savepoint, then commit.

    Reading max+1 and inserting are two round-trips, so a concurrent writer can take the
    same id first. When the insert fails and a row with that id now exists, the id is
    re-read and the insert retried (up to MAX_ID_ATTEMPTS). Any other integrity error,
    e.g. a unique plate taken concurrently, propagates.
    """
    table = model.__tablename__
    for attempt in range(1, MAX_ID_ATTEMPTS + 1):
        new_id = next_id(session, table)
        row = build(new_id)
        try:
            with session.begin_nested():
                session.add(row)
        except IntegrityError:
            if attempt == MAX_ID_ATTEMPTS or session.get(model, new_id) is None:
                raise
            LOG.warning("id %s already taken in %s, retrying (attempt %d)", new_id, table, attempt)
            continue
        session.commit()
        session.refresh(row)
        return row
    raise RuntimeError(f"could not allocate id for {table}")
