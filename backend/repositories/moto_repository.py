"""Moto repository: list (with plate filter), get, create, update, delete, reference counts."""
from datetime import datetime
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session, selectinload

from models.moto import Moto
from repositories.id_allocator import insert_with_next_id

_RELATIONS = (
    selectinload(Moto.zona),
    selectinload(Moto.patio),
    selectinload(Moto.status),
)


def _filtered(stmt, placa: Optional[str]):
    if placa and placa.strip():
        stmt = stmt.where(Moto.placa.icontains(placa.strip(), autoescape=True))
    return stmt


def list_motos(
    session: Session, offset: int, limit: int, placa: Optional[str] = None
) -> list[Moto]:
    """Return one page of motos ordered by id; placa filters by case-insensitive substring."""
    stmt = _filtered(select(Moto), placa).order_by(Moto.id).offset(offset).limit(limit)
    result = session.execute(stmt.options(*_RELATIONS))
    return list(result.scalars().all())


def count_motos(session: Session, placa: Optional[str] = None) -> int:
    """Return the number of motos matching the optional plate filter."""
    stmt = _filtered(select(func.count()).select_from(Moto), placa)
    return session.execute(stmt).scalar() or 0


def get_moto(session: Session, moto_id: int) -> Optional[Moto]:
    """Return a moto by id, with zone, yard and status loaded, or None."""
    return session.execute(
        select(Moto).where(Moto.id == moto_id).options(*_RELATIONS)
    ).scalar_one_or_none()


def plate_taken(session: Session, placa: str, exclude_id: Optional[int] = None) -> bool:
    """True if another moto (not exclude_id) already has this plate."""
    stmt = select(Moto.id).where(Moto.placa == placa)
    if exclude_id is not None:
        stmt = stmt.where(Moto.id != exclude_id)
    return session.execute(stmt.limit(1)).first() is not None


def chassis_taken(session: Session, chassi: str, exclude_id: Optional[int] = None) -> bool:
    """True if another moto (not exclude_id) already has this chassis."""
    stmt = select(Moto.id).where(Moto.chassi == chassi)
    if exclude_id is not None:
        stmt = stmt.where(Moto.id != exclude_id)
    return session.execute(stmt.limit(1)).first() is not None


def count_motos_by_yard(session: Session, yard_id: int) -> int:
    """Number of motos parked in the yard."""
    return session.execute(
        select(func.count()).select_from(Moto).where(Moto.patio_id == yard_id)
    ).scalar() or 0


def count_motos_by_zone(session: Session, zone_id: int) -> int:
    """Number of motos assigned to the zone."""
    return session.execute(
        select(func.count()).select_from(Moto).where(Moto.zona_id == zone_id)
    ).scalar() or 0


def count_motos_by_status(session: Session, status_id: int) -> int:
    """Number of motos currently in the status."""
    return session.execute(
        select(func.count()).select_from(Moto).where(Moto.status_id == status_id)
    ).scalar() or 0


def create_moto(
    session: Session,
    *,
    placa: str,
    chassi: str,
    data_entrada: datetime,
    zona_id: int,
    patio_id: int,
    status_id: int,
    qr_code: Optional[str] = None,
    previsao_entrega: Optional[datetime] = None,
    fotos: Optional[str] = None,
    observacoes: Optional[str] = None,
) -> Moto:
    """Create a moto, commit, and return it with relations loaded."""
    moto = insert_with_next_id(
        session,
        Moto,
        lambda new_id: Moto(
            id=new_id,
            placa=placa,
            chassi=chassi,
            qr_code=qr_code,
            data_entrada=data_entrada,
            previsao_entrega=previsao_entrega,
            fotos=fotos,
            zona_id=zona_id,
            patio_id=patio_id,
            status_id=status_id,
            observacoes=observacoes,
        ),
    )
    return get_moto(session, moto.id)


def update_moto(
    session: Session,
    moto_id: int,
    *,
    placa: str,
    chassi: str,
    data_entrada: datetime,
    zona_id: int,
    patio_id: int,
    status_id: int,
    qr_code: Optional[str] = None,
    previsao_entrega: Optional[datetime] = None,
    fotos: Optional[str] = None,
    observacoes: Optional[str] = None,
) -> Optional[Moto]:
    """Replace all mutable fields of a moto (PUT semantics). Returns updated moto or None if not found."""
    moto = session.get(Moto, moto_id)
    if moto is None:
        return None
    moto.placa = placa
    moto.chassi = chassi
    moto.qr_code = qr_code
    moto.data_entrada = data_entrada
    moto.previsao_entrega = previsao_entrega
    moto.fotos = fotos
    moto.zona_id = zona_id
    moto.patio_id = patio_id
    moto.status_id = status_id
    moto.observacoes = observacoes
    session.commit()
    return get_moto(session, moto_id)


def delete_moto(session: Session, moto_id: int) -> bool:
    """Delete a moto by id. Returns True if deleted, False if not found."""
    moto = session.get(Moto, moto_id)
    if moto is None:
        return False
    session.delete(moto)
    session.commit()
    return True
