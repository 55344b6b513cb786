# tests/test_students.py
from models import Marks, Student


def test_create_and_bulk_add(client, catalog):
    resp = client.post("/api/students", json={"enrollmentNumber": "2024CS010", "name": "Eva", "age": 19})
    assert resp.status_code == 201
    assert resp.get_json()["student"]["age"] == "19"

    resp = client.post(
        "/api/bulk-add-students",
        json=[
            {"enrollmentNumber": "2024CS011", "name": "Rui", "classId": catalog["class"]},
            {"name": "Sin legajo"},
        ],
    )
    assert resp.status_code == 201
    assert resp.get_json()["count"] == 1

    resp = client.post("/api/bulk-add-students", json=[{"name": "Sin legajo"}])
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "No valid students to insert"


def test_students_by_class(client, catalog):
    students = client.get(f"/api/students/class/{catalog['class']}").get_json()
    assert [s["enrollmentNumber"] for s in students] == ["2024CS001", "2024CS002"]

    resp = client.get("/api/students/class/999")
    assert resp.status_code == 404
    assert resp.get_json()["error"] == "No students found for this class"


def test_delete_student_removes_marks(client, catalog):
    student_id = catalog["students"][0]
    client.post(
        "/api/upload-marks",
        json=[{
            "studentId": student_id,
            "classId": catalog["class"],
            "subjectId": catalog["subjects"][0],
            "exam": "FINAL",
            "marks": 70,
            "maxMarks": 100,
        }],
    )

    assert client.delete(f"/api/students/{student_id}").status_code == 200
    assert Student.query.filter_by(id=student_id).first() is None
    assert Marks.query.filter_by(student_id=student_id).count() == 0
    assert client.delete(f"/api/students/{student_id}").status_code == 404
