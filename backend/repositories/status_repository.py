"""Status repository: list, get, create, update, delete."""
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session, selectinload

from models.status import Status
from repositories.id_allocator import insert_with_next_id


def list_statuses(session: Session, offset: int, limit: int) -> list[Status]:
    """Return one page of statuses ordered by id, with their group loaded."""
    result = session.execute(
        select(Status)
        .order_by(Status.id)
        .offset(offset)
        .limit(limit)
        .options(selectinload(Status.status_grupo))
    )
    return list(result.scalars().all())


def count_statuses(session: Session) -> int:
    """Return the number of statuses."""
    return session.execute(select(func.count()).select_from(Status)).scalar() or 0


def get_status(session: Session, status_id: int) -> Optional[Status]:
    """Return a status by id (group loaded) or None."""
    return session.execute(
        select(Status).where(Status.id == status_id).options(selectinload(Status.status_grupo))
    ).scalar_one_or_none()


def status_exists(session: Session, status_id: int) -> bool:
    """True if a status with this id exists."""
    return session.execute(select(Status.id).where(Status.id == status_id)).first() is not None


def create_status(session: Session, nome: str, status_grupo_id: int) -> Status:
    """Create a status in a group, commit, and return it."""
    return insert_with_next_id(
        session,
        Status,
        lambda new_id: Status(id=new_id, nome=nome, status_grupo_id=status_grupo_id),
    )


def update_status(
    session: Session, status_id: int, *, nome: str, status_grupo_id: int
) -> Optional[Status]:
    """Replace name and group. Returns updated status or None if not found."""
    status = session.get(Status, status_id)
    if status is None:
        return None
    status.nome = nome
    status.status_grupo_id = status_grupo_id
    session.commit()
    session.refresh(status)
    return status


def delete_status(session: Session, status_id: int) -> bool:
    """Delete a status by id. Returns True if deleted, False if not found."""
    status = session.get(Status, status_id)
    if status is None:
        return False
    session.delete(status)
    session.commit()
    return True
