"""Integration tests: seed dataset."""
from datetime import datetime

import pytest

from models.moto import Moto
from models.status import Status
from models.status_group import StatusGroup
from models.user import User
from models.yard import Yard
from models.zone import Zone
from repositories.moto_repository import list_motos
from repositories.user_repository import list_users
from utils.security import verify_password
from utils.seed import seed_if_empty

pytestmark = pytest.mark.integration


def _empty_all(session):
    for model in (Moto, Status, StatusGroup, Yard, Zone, User):
        session.query(model).delete()
    session.flush()


def test_seed_inserts_default_rows(db_session):
    """On an empty database the fixed dataset is inserted with ids starting at 1."""
    _empty_all(db_session)
    assert seed_if_empty(db_session, now=datetime(2025, 1, 1, 12, 0)) is True
    motos = list_motos(db_session, 0, 10)
    assert [m.placa for m in motos] == ["ABC1D23", "EFG4H56"]
    assert [m.id for m in motos] == [1, 2]
    assert motos[0].zona.letra == "N"
    assert motos[1].status.nome == "Manutenção"
    users = list_users(db_session, 0, 10)
    assert [u.usuario for u in users] == ["admin", "operador"]
    assert verify_password("admin@123", users[0].senha_hash)


def test_seed_skipped_when_data_exists(db_session, refs):
    """Seeding never touches a database that already has rows."""
    assert seed_if_empty(db_session) is False
