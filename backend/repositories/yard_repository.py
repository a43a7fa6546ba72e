"""Yard (patio) repository: list, get, create, update, delete."""
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from models.yard import Yard
from repositories.id_allocator import insert_with_next_id


def list_yards(session: Session, offset: int, limit: int) -> list[Yard]:
    """Return one page of yards ordered by id."""
    result = session.execute(select(Yard).order_by(Yard.id).offset(offset).limit(limit))
    return list(result.scalars().all())


def count_yards(session: Session) -> int:
    """Return the number of yards."""
    return session.execute(select(func.count()).select_from(Yard)).scalar() or 0


def get_yard(session: Session, yard_id: int) -> Optional[Yard]:
    """Return a yard by id or None."""
    return session.get(Yard, yard_id)


def yard_exists(session: Session, yard_id: int) -> bool:
    """True if a yard with this id exists."""
    return session.execute(select(Yard.id).where(Yard.id == yard_id)).first() is not None


def create_yard(session: Session, nome: str) -> Yard:
    """Create a yard, commit, and return it."""
    return insert_with_next_id(session, Yard, lambda new_id: Yard(id=new_id, nome=nome))


def update_yard(session: Session, yard_id: int, *, nome: str) -> Optional[Yard]:
    """Rename a yard. Returns updated yard or None if not found."""
    yard = get_yard(session, yard_id)
    if yard is None:
        return None
    yard.nome = nome
    session.commit()
    session.refresh(yard)
    return yard


def delete_yard(session: Session, yard_id: int) -> bool:
    """Delete a yard by id. Returns True if deleted, False if not found."""
    yard = get_yard(session, yard_id)
    if yard is None:
        return False
    session.delete(yard)
    session.commit()
    return True
