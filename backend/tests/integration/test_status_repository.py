"""Integration tests: status group and status repositories."""
import pytest
from sqlalchemy import insert

from models.status import Status
from repositories.status_group_repository import (
    count_statuses_in_group,
    create_status_group,
    delete_status_group,
    get_status_group,
    status_group_exists,
    update_status_group,
)
from repositories.status_repository import (
    create_status,
    delete_status,
    get_status,
    list_statuses,
    status_exists,
    update_status,
)

pytestmark = pytest.mark.integration


def test_group_with_statuses(db_session):
    """get_status_group(with_statuses=True) loads the group's statuses ordered by id."""
    group = create_status_group(db_session, "Operacional")
    ok = create_status(db_session, "OK", group.id)
    manut = create_status(db_session, "Manutenção", group.id)
    assert count_statuses_in_group(db_session, group.id) == 2
    loaded = get_status_group(db_session, group.id, with_statuses=True)
    assert [s.id for s in loaded.statuses] == [ok.id, manut.id]


def test_status_loads_group(db_session):
    """get_status and list_statuses load the owning group."""
    group = create_status_group(db_session, "Exceção")
    status = create_status(db_session, "Sinistro", group.id)
    found = get_status(db_session, status.id)
    assert found.status_grupo.nome == "Exceção"
    assert status.id in [s.id for s in list_statuses(db_session, 0, 100)]
    assert status_exists(db_session, status.id)


def test_update_status_moves_group(db_session):
    """update_status can move a status to another group."""
    g1 = create_status_group(db_session, "G1")
    g2 = create_status_group(db_session, "G2")
    status = create_status(db_session, "S", g1.id)
    updated = update_status(db_session, status.id, nome="S2", status_grupo_id=g2.id)
    assert updated.nome == "S2"
    assert updated.status_grupo_id == g2.id
    assert count_statuses_in_group(db_session, g1.id) == 0


def test_delete_status_and_group(db_session):
    """Statuses and empty groups can be deleted."""
    group = create_status_group(db_session, "Temp")
    status = create_status(db_session, "Temp S", group.id)
    assert delete_status(db_session, status.id) is True
    assert get_status(db_session, status.id) is None
    assert update_status_group(db_session, group.id, nome="Temp 2").nome == "Temp 2"
    assert delete_status_group(db_session, group.id) is True
    assert status_group_exists(db_session, group.id) is False
    assert delete_status_group(db_session, group.id) is False


def test_group_statuses_refreshed_when_group_already_loaded(db_session):
    """with_statuses reloads the collection even when the group is already in the session."""
    group = create_status_group(db_session, "Exceção")
    loaded = get_status_group(db_session, group.id, with_statuses=True)
    assert loaded.statuses == []
    db_session.execute(insert(Status).values(id=987001, nome="Sinistro", status_grupo_id=group.id))
    reloaded = get_status_group(db_session, group.id, with_statuses=True)
    assert reloaded is loaded
    assert [s.nome for s in reloaded.statuses] == ["Sinistro"]
