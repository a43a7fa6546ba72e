"""API tests: status groups and statuses endpoints."""
import pytest

from repositories.status_group_repository import create_status_group
from repositories.status_repository import create_status

pytestmark = pytest.mark.api


def test_create_status_group_and_status(client):
    """Create a group, then a status in it; the status embeds its group."""
    rg = client.post("/api/statusgrupos", json={"nome": "Operacional"})
    assert rg.status_code == 201
    group_id = rg.json()["id"]
    assert rg.headers["location"] == f"/api/statusgrupos/{group_id}"

    rs = client.post("/api/statuses", json={"nome": "OK", "statusGrupoId": group_id})
    assert rs.status_code == 201
    data = rs.json()
    assert rs.headers["location"] == f"/api/statuses/{data['id']}"
    assert data["statusGrupoId"] == group_id
    assert data["statusGrupo"] == {"id": group_id, "nome": "Operacional"}


def test_get_status_group_lists_statuses(client, db_session):
    """GET /api/statusgrupos/{id} includes the group's statuses."""
    group = create_status_group(db_session, "Exceção")
    s1 = create_status(db_session, "Sinistro", group.id)
    s2 = create_status(db_session, "Roubo", group.id)
    r = client.get(f"/api/statusgrupos/{group.id}")
    assert r.status_code == 200
    assert r.json()["statuses"] == [{"id": s1.id, "nome": "Sinistro"}, {"id": s2.id, "nome": "Roubo"}]


def test_create_status_unknown_group_400(client):
    r = client.post("/api/statuses", json={"nome": "OK", "statusGrupoId": 987654})
    assert r.status_code == 400
    assert r.json()["detail"] == "StatusGrupoId inválido."


def test_create_status_blank_name_checked_first(client):
    """Blank name is reported before the group check."""
    r = client.post("/api/statuses", json={"nome": "", "statusGrupoId": 987654})
    assert r.status_code == 400
    assert r.json()["detail"] == "Nome obrigatório."


def test_update_status(client, db_session):
    g1 = create_status_group(db_session, "G1")
    g2 = create_status_group(db_session, "G2")
    status = create_status(db_session, "S", g1.id)
    r = client.put(f"/api/statuses/{status.id}", json={"nome": "S2", "statusGrupoId": g2.id})
    assert r.status_code == 200
    assert r.json()["statusGrupo"]["id"] == g2.id
    r = client.put(f"/api/statuses/{status.id}", json={"nome": "S2", "statusGrupoId": 987654})
    assert r.status_code == 400


def test_delete_group_with_statuses_400(client, db_session):
    group = create_status_group(db_session, "Cheio")
    create_status(db_session, "S", group.id)
    r = client.delete(f"/api/statusgrupos/{group.id}")
    assert r.status_code == 400
    assert r.json()["detail"] == "Não é possível remover StatusGrupo que contém Statuses."


def test_delete_status_with_motos_400(client, refs, make_moto):
    make_moto()
    r = client.delete(f"/api/statuses/{refs.status_id}")
    assert r.status_code == 400
    assert r.json()["detail"] == "Não é possível remover Status com motos associadas."


def test_delete_status_then_group(client, db_session):
    """Once its statuses are gone, the group can be deleted."""
    group = create_status_group(db_session, "Temp")
    status = create_status(db_session, "Temp S", group.id)
    assert client.delete(f"/api/statuses/{status.id}").status_code == 204
    assert client.delete(f"/api/statusgrupos/{group.id}").status_code == 204
    assert client.get(f"/api/statusgrupos/{group.id}").status_code == 404
    assert client.get(f"/api/statuses/{status.id}").status_code == 404


def test_list_statuses_and_groups(client, db_session):
    group = create_status_group(db_session, "Listagem")
    create_status(db_session, "L1", group.id)
    rs = client.get("/api/statuses")
    rg = client.get("/api/statusgrupos")
    assert rs.status_code == 200 and rg.status_code == 200
    assert rs.json()["totalCount"] >= 1
    assert any(item["statusGrupo"]["nome"] == "Listagem" for item in rs.json()["items"])
    assert rg.json()["totalCount"] >= 1
