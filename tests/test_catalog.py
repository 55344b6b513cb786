# tests/test_catalog.py
from extensions import db
from models import (
    Permission,
    RoleEnum,
    SchoolClass,
    Subject,
    Teacher,
    TeacherSubject,
    User,
)


def test_rooms_crud_and_bulk(client):
    resp = client.post("/api/rooms", json={"roomName": "A-101"})
    assert resp.status_code == 201

    resp = client.post("/api/rooms/bulk", json=[{"roomName": "Lab 1"}, {"roomName": "  "}, {}])
    assert resp.status_code == 201
    assert resp.get_json()["count"] == 1

    names = [r["roomName"] for r in client.get("/api/rooms").get_json()]
    assert names == ["A-101", "Lab 1"]

    room_id = client.get("/api/rooms").get_json()[0]["id"]
    assert client.delete(f"/api/rooms/{room_id}").status_code == 200
    assert client.delete(f"/api/rooms/{room_id}").status_code == 404


def test_bulk_without_valid_rows(client):
    resp = client.post("/api/rooms/bulk", json=[{"roomName": ""}])
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "No valid rooms found in the CSV."

    resp = client.post("/api/teachers/bulk", json=[{"facultyName": "Only Name"}])
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "No valid teachers found in the CSV."

    resp = client.post("/api/subjects/bulk", json=[{"subjectCode": "X1", "subjectName": "Algebra"}])
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "No valid subjects found in the CSV."


def test_bulk_teachers_and_subjects(client):
    resp = client.post(
        "/api/teachers/bulk",
        json=[
            {"facultyName": "John Doe", "facultyAbbreviation": "JD", "username": "jdoe"},
            {"facultyName": "No Abbrev"},
        ],
    )
    assert resp.get_json()["count"] == 1
    teacher = client.get("/api/teachers").get_json()[0]
    assert teacher["username"] == "jdoe"
    assert teacher["subjects"] == []

    resp = client.post(
        "/api/subjects/bulk",
        json=[{"subjectCode": "MA101", "subjectName": "Algebra", "subjectAbbreviation": "ALG"}],
    )
    assert resp.status_code == 201
    assert client.get("/api/subjects").get_json()[0]["subjectAbbreviation"] == "ALG"


def test_delete_teacher_with_account(client, catalog, make_user):
    t1 = catalog["teachers"][0]
    make_user("jdoe", "profe123", RoleEnum.TEACHER)

    resp = client.delete(f"/api/teachers/{t1}")
    assert resp.status_code == 200
    assert resp.get_json()["accountDeleted"] is True
    assert User.query.filter_by(username="jdoe").first() is None


def test_delete_teacher_without_account(client, catalog):
    t2 = catalog["teachers"][1]

    resp = client.delete(f"/api/teachers/{t2}")
    assert resp.status_code == 200
    assert resp.get_json()["accountDeleted"] is False
    assert db.session.get(Teacher, t2) is None
    assert client.delete(f"/api/teachers/{t2}").status_code == 404


def test_delete_teacher_cleans_references(client, catalog):
    class_id = catalog["class"]
    s1 = catalog["subjects"][0]
    t1 = catalog["teachers"][0]
    client.put(f"/api/classes/{class_id}/assign-subjects", json={"subjects": [s1]})
    client.put(f"/api/classes/{class_id}/assign-teachers", json={"teacherIds": [t1]})
    client.post(
        "/api/permissions",
        json=[{"teacherId": t1, "classId": class_id, "subjectId": s1, "havePermission": True}],
    )

    client.delete(f"/api/teachers/{t1}")

    db.session.expire_all()
    assert TeacherSubject.query.filter_by(teacher_id=t1).count() == 0
    assert Permission.query.filter_by(teacher_id=t1).count() == 0
    assert db.session.get(SchoolClass, class_id).teachers == []


def test_delete_subject_cleans_references(client, catalog):
    class_id = catalog["class"]
    s1, s2, _ = catalog["subjects"]
    t1 = catalog["teachers"][0]
    client.put(f"/api/classes/{class_id}/assign-subjects", json={"subjects": [s1, s2]})
    client.put(f"/api/classes/{class_id}/assign-teachers", json={"teacherIds": [t1]})

    resp = client.delete(f"/api/subjects/{s1}")
    assert resp.status_code == 200

    db.session.expire_all()
    assert db.session.get(Subject, s1) is None
    assert client.get(f"/api/class/{class_id}/subjects").get_json() == [s2]
    assert TeacherSubject.query.filter_by(subject_id=s1).count() == 0
    assert client.delete(f"/api/subjects/{s1}").status_code == 404
