# Set test environment before any application or db imports.
import os

os.environ["TESTING"] = "true"
os.environ["TESTING_DATABASE_URL"] = "sqlite:///:memory:"

import uuid
from datetime import datetime
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from db import engine as app_engine, get_db
from main import app
from models import Base
from repositories.moto_repository import create_moto
from repositories.status_group_repository import create_status_group
from repositories.status_repository import create_status
from repositories.yard_repository import create_yard
from repositories.zone_repository import create_zone


@pytest.fixture(scope="session")
def engine():
    """One in-memory engine per test run; create tables once."""
    Base.metadata.create_all(app_engine)
    return app_engine


@pytest.fixture
def db_session(engine):
    """Function-scoped session; each test runs in a transaction that is rolled back."""
    connection = engine.connect()
    trans = connection.begin()
    session = Session(bind=connection)
    session.begin_nested()
    try:
        yield session
    finally:
        session.close()
        if trans.is_active:
            trans.rollback()
        connection.close()


def _override_get_db(session):
    """Return a generator that yields the given session (for dependency override)."""
    def override():
        yield session
    return override


@pytest.fixture
def client(db_session):
    """API test client; overrides get_db to use the test db_session, cleared on teardown."""
    app.dependency_overrides[get_db] = _override_get_db(db_session)
    try:
        with TestClient(app) as c:
            yield c
    finally:
        app.dependency_overrides.clear()


def unique_plate() -> str:
    """Random 7-char plate so tests never collide on the unique constraint."""
    return uuid.uuid4().hex[:7].upper()


def unique_chassis() -> str:
    """Random 17-char chassis number."""
    return uuid.uuid4().hex[:17].upper()


@pytest.fixture
def refs(db_session):
    """A zone, yard, status group and status to hang motos on."""
    zone = create_zone(db_session, "Norte", "N")
    yard = create_yard(db_session, f"Pátio {uuid.uuid4().hex[:6]}")
    group = create_status_group(db_session, "Operacional")
    status = create_status(db_session, "OK", group.id)
    return SimpleNamespace(zone_id=zone.id, yard_id=yard.id, group_id=group.id, status_id=status.id)


@pytest.fixture
def make_moto(db_session, refs):
    """Factory: insert a moto on the refs rows (overridable) and return it."""
    def _make(**overrides):
        fields = {
            "placa": unique_plate(),
            "chassi": unique_chassis(),
            "data_entrada": datetime(2025, 1, 10, 8, 0, 0),
            "zona_id": refs.zone_id,
            "patio_id": refs.yard_id,
            "status_id": refs.status_id,
        }
        fields.update(overrides)
        return create_moto(db_session, **fields)
    return _make
