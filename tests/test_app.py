# tests/test_app.py
from models import RoleEnum, SchoolClass, User
from seeds.basic_seed import run_basic_seed


def test_health(client):
    assert client.get("/health").get_json() == {"status": "ok"}


def test_unknown_route_returns_json(client):
    resp = client.get("/api/does-not-exist")
    assert resp.status_code == 404
    assert "error" in resp.get_json()


def test_unexpected_errors_are_json_500(app, client, monkeypatch):
    from api.services.class_service import ClassService

    def boom():
        raise RuntimeError("db exploded")

    monkeypatch.setattr(ClassService, "list_classes", staticmethod(boom))

    resp = client.get("/api/classes")
    assert resp.status_code == 500
    assert resp.get_json() == {"error": "Internal server error"}


def test_seed_is_idempotent(app, client):
    run_basic_seed()
    run_basic_seed()

    assert SchoolClass.query.count() == 1
    assert User.query.filter_by(role=RoleEnum.TEACHER.value).count() == 1

    resp = client.post("/login", json={"username": "jdoe", "password": "profe123"})
    assert resp.status_code == 200
    assert resp.get_json()["facultyAbbreviation"] == "JD"

    class_id = SchoolClass.query.first().id
    schedule = client.get(f"/api/class/{class_id}/schedule").get_json()
    assert "Monday" in schedule
