"""Referential and field checks run before writes. Each returns an error message, or None when valid."""
from typing import Optional

from sqlalchemy.orm import Session

from repositories.moto_repository import (
    chassis_taken,
    count_motos_by_status,
    count_motos_by_yard,
    count_motos_by_zone,
    plate_taken,
)
from repositories.status_group_repository import count_statuses_in_group, status_group_exists
from repositories.status_repository import status_exists
from repositories.user_repository import username_taken
from repositories.yard_repository import yard_exists
from repositories.zone_repository import zone_exists

NAME_REQUIRED = "Nome obrigatório."


def _blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def validate_moto(
    db: Session,
    *,
    zona_id: int,
    patio_id: int,
    status_id: int,
    placa: str,
    chassi: str,
    exclude_id: Optional[int] = None,
) -> Optional[str]:
    """
    Check a moto write. Stops at the first failure, in this order:
    zone, yard, status, plate, chassis. exclude_id is the moto being updated.
    """
    if not zone_exists(db, zona_id):
        return "ZonaId inválido."
    if not yard_exists(db, patio_id):
        return "PatioId inválido."
    if not status_exists(db, status_id):
        return "StatusId inválido."
    if plate_taken(db, placa, exclude_id=exclude_id):
        return "Placa já cadastrada."
    if chassis_taken(db, chassi, exclude_id=exclude_id):
        return "Chassi já cadastrado."
    return None


def validate_status(db: Session, *, nome: str, status_grupo_id: int) -> Optional[str]:
    """Name must be non-blank and the group must exist."""
    if _blank(nome):
        return NAME_REQUIRED
    if not status_group_exists(db, status_grupo_id):
        return "StatusGrupoId inválido."
    return None


def validate_name(nome: str) -> Optional[str]:
    """Yards and status groups only need a non-blank name."""
    if _blank(nome):
        return NAME_REQUIRED
    return None


def validate_zone(nome: str, letra: Optional[str]) -> Optional[str]:
    """Name must be non-blank and letra exactly one character."""
    if _blank(nome) or letra is None or len(letra) != 1:
        return "Nome obrigatório e Letra deve ter 1 caractere."
    return None


def validate_user(db: Session, *, usuario: str, exclude_id: Optional[int] = None) -> Optional[str]:
    """Username must be free; on update (exclude_id set) it may only be held by the same row."""
    if username_taken(db, usuario, exclude_id=exclude_id):
        if exclude_id is None:
            return "Usuário já existe."
        return "Já existe outro usuário com esse nome."
    return None


# --- Delete guards: a parent cannot go while children still reference it ---


def check_yard_deletable(db: Session, yard_id: int) -> Optional[str]:
    if count_motos_by_yard(db, yard_id) > 0:
        return "Não é possível remover pátio com motos associadas."
    return None


def check_zone_deletable(db: Session, zone_id: int) -> Optional[str]:
    if count_motos_by_zone(db, zone_id) > 0:
        return "Não é possível remover zona com motos associadas."
    return None


def check_status_group_deletable(db: Session, group_id: int) -> Optional[str]:
    if count_statuses_in_group(db, group_id) > 0:
        return "Não é possível remover StatusGrupo que contém Statuses."
    return None


def check_status_deletable(db: Session, status_id: int) -> Optional[str]:
    if count_motos_by_status(db, status_id) > 0:
        return "Não é possível remover Status com motos associadas."
    return None
