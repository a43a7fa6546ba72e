"""Zone repository: list, get, create, update, delete."""
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from models.zone import Zone
from repositories.id_allocator import insert_with_next_id


def list_zones(session: Session, offset: int, limit: int) -> list[Zone]:
    """Return one page of zones ordered by id."""
    result = session.execute(select(Zone).order_by(Zone.id).offset(offset).limit(limit))
    return list(result.scalars().all())


def count_zones(session: Session) -> int:
    """Return the number of zones."""
    return session.execute(select(func.count()).select_from(Zone)).scalar() or 0


def get_zone(session: Session, zone_id: int) -> Optional[Zone]:
    """Return a zone by id or None."""
    return session.get(Zone, zone_id)


def zone_exists(session: Session, zone_id: int) -> bool:
    """True if a zone with this id exists."""
    return session.execute(select(Zone.id).where(Zone.id == zone_id)).first() is not None


def create_zone(session: Session, nome: str, letra: str) -> Zone:
    """Create a zone, commit, and return it."""
    return insert_with_next_id(session, Zone, lambda new_id: Zone(id=new_id, nome=nome, letra=letra))


def update_zone(session: Session, zone_id: int, *, nome: str, letra: str) -> Optional[Zone]:
    """Replace name and letter. Returns updated zone or None if not found."""
    zone = get_zone(session, zone_id)
    if zone is None:
        return None
    zone.nome = nome
    zone.letra = letra
    session.commit()
    session.refresh(zone)
    return zone


def delete_zone(session: Session, zone_id: int) -> bool:
    """Delete a zone by id. Returns True if deleted, False if not found."""
    zone = get_zone(session, zone_id)
    if zone is None:
        return False
    session.delete(zone)
    session.commit()
    return True
