"""Fixed seed dataset and schema reset, used by scripts/seed_db.py (never by the running app)."""
import logging
from datetime import datetime, timedelta

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from models import Base
from repositories.moto_repository import count_motos, create_moto
from repositories.status_group_repository import count_status_groups, create_status_group
from repositories.status_repository import count_statuses, create_status
from repositories.user_repository import count_users, create_user
from repositories.yard_repository import count_yards, create_yard
from repositories.zone_repository import count_zones, create_zone

LOG = logging.getLogger(__name__)


def reset_schema(engine: Engine) -> None:
    """Drop and recreate every table. Destroys all data."""
    Base.metadata.drop_all(engine)
    Base.metadata.create_all(engine)
    LOG.warning("Schema dropped and recreated")


def _is_empty(session: Session) -> bool:
    counts = (
        count_users(session),
        count_zones(session),
        count_yards(session),
        count_status_groups(session),
        count_statuses(session),
        count_motos(session),
    )
    return not any(counts)


def seed_if_empty(session: Session, now: datetime | None = None) -> bool:
    """Insert the default users, zones, yards, statuses and two motos. Returns False if any table already has rows."""
    if not _is_empty(session):
        LOG.info("Database already has data; seed skipped")
        return False
    now = now or datetime.now()

    create_user(session, "admin", "admin@123")
    create_user(session, "operador", "123456")

    norte = create_zone(session, "Norte", "N")
    sul = create_zone(session, "Sul", "S")

    patio_a = create_yard(session, "Pátio A")
    patio_b = create_yard(session, "Pátio B")

    operacional = create_status_group(session, "Operacional")
    excecao = create_status_group(session, "Exceção")
    ok = create_status(session, "OK", operacional.id)
    manutencao = create_status(session, "Manutenção", operacional.id)
    create_status(session, "Sinistro", excecao.id)

    create_moto(
        session,
        placa="ABC1D23",
        chassi="9BWZZZ377VT004251",
        qr_code="QR001",
        data_entrada=now,
        previsao_entrega=now + timedelta(days=1),
        zona_id=norte.id,
        patio_id=patio_a.id,
        status_id=ok.id,
        observacoes="Moto em perfeito estado",
    )
    create_moto(
        session,
        placa="EFG4H56",
        chassi="9BWZZZ377VT004252",
        qr_code="QR002",
        data_entrada=now,
        zona_id=sul.id,
        patio_id=patio_b.id,
        status_id=manutencao.id,
        observacoes="Em manutenção preventiva",
    )
    LOG.info("Seed data inserted")
    return True
