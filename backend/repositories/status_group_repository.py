"""StatusGroup repository: list, get, create, update, delete."""
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session, selectinload

from models.status import Status
from models.status_group import StatusGroup
from repositories.id_allocator import insert_with_next_id


def list_status_groups(session: Session, offset: int, limit: int) -> list[StatusGroup]:
    """Return one page of status groups ordered by id."""
    result = session.execute(
        select(StatusGroup).order_by(StatusGroup.id).offset(offset).limit(limit)
    )
    return list(result.scalars().all())


def count_status_groups(session: Session) -> int:
    """Return the number of status groups."""
    return session.execute(select(func.count()).select_from(StatusGroup)).scalar() or 0


def get_status_group(session: Session, group_id: int, with_statuses: bool = False) -> Optional[StatusGroup]:
    """Return a status group by id or None. with_statuses eager-loads its statuses."""
    stmt = select(StatusGroup).where(StatusGroup.id == group_id)
    if with_statuses:
        stmt = stmt.options(selectinload(StatusGroup.statuses)).execution_options(populate_existing=True)
    return session.execute(stmt).scalar_one_or_none()


def status_group_exists(session: Session, group_id: int) -> bool:
    """True if a status group with this id exists."""
    return session.execute(select(StatusGroup.id).where(StatusGroup.id == group_id)).first() is not None


def count_statuses_in_group(session: Session, group_id: int) -> int:
    """Number of statuses that belong to the group."""
    return session.execute(
        select(func.count()).select_from(Status).where(Status.status_grupo_id == group_id)
    ).scalar() or 0


def create_status_group(session: Session, nome: str) -> StatusGroup:
    """Create a status group, commit, and return it."""
    return insert_with_next_id(session, StatusGroup, lambda new_id: StatusGroup(id=new_id, nome=nome))


def update_status_group(session: Session, group_id: int, *, nome: str) -> Optional[StatusGroup]:
    """Rename a status group. Returns updated group or None if not found."""
    group = session.get(StatusGroup, group_id)
    if group is None:
        return None
    group.nome = nome
    session.commit()
    session.refresh(group)
    return group


def delete_status_group(session: Session, group_id: int) -> bool:
    """Delete a status group by id. Returns True if deleted, False if not found."""
    group = session.get(StatusGroup, group_id)
    if group is None:
        return False
    session.delete(group)
    session.commit()
    return True
