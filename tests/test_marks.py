# tests/test_marks.py
from models import MarkEntry, Marks


def _entry(catalog, marks, exam="MST_I", student=0, subject=0, max_marks=20):
    return {
        "studentId": catalog["students"][student],
        "classId": catalog["class"],
        "subjectId": catalog["subjects"][subject],
        "exam": exam,
        "marks": marks,
        "maxMarks": max_marks,
    }


def test_first_upload_creates_sheet(client, catalog):
    resp = client.post("/api/upload-marks", json=[_entry(catalog, 18)])
    assert resp.status_code == 200
    body = resp.get_json()
    assert (body["updated"], body["inserted"], body["createdSheets"]) == (0, 1, 1)

    sheet = client.get(f"/api/marks/{catalog['students'][0]}").get_json()
    assert sheet["classId"] == catalog["class"]
    assert sheet["grades"]["MST_I"] == [{"subject": catalog["subjects"][0], "marks": 18, "maxMarks": 20}]
    assert sheet["grades"]["MST_II"] == []
    assert sheet["grades"]["FINAL"] == []


def test_reupload_replaces_without_duplicates(client, catalog):
    client.post("/api/upload-marks", json=[_entry(catalog, 18)])
    resp = client.post("/api/upload-marks", json=[_entry(catalog, 19)])
    assert resp.get_json()["updated"] == 1

    grades = client.get(f"/api/marks/{catalog['students'][0]}").get_json()["grades"]
    assert grades["MST_I"] == [{"subject": catalog["subjects"][0], "marks": 19, "maxMarks": 20}]
    assert Marks.query.count() == 1
    assert MarkEntry.query.count() == 1


def test_mixed_batch_updates_and_pushes(client, catalog):
    client.post("/api/upload-marks", json=[_entry(catalog, 10)])
    resp = client.post(
        "/api/upload-marks",
        json=[
            _entry(catalog, 12),
            _entry(catalog, 15, subject=1),
            _entry(catalog, 40, exam="FINAL", max_marks=50),
            _entry(catalog, 7, student=1),
        ],
    )
    body = resp.get_json()
    assert (body["updated"], body["inserted"], body["createdSheets"]) == (1, 3, 1)

    grades = client.get(f"/api/marks/{catalog['students'][0]}").get_json()["grades"]
    assert [g["marks"] for g in grades["MST_I"]] == [12, 15]
    assert grades["FINAL"][0]["maxMarks"] == 50

    class_sheets = client.get(f"/api/marks/class/{catalog['class']}").get_json()
    assert len(class_sheets) == 2


def test_last_duplicate_in_batch_wins(client, catalog):
    client.post("/api/upload-marks", json=[_entry(catalog, 5), _entry(catalog, 9)])

    grades = client.get(f"/api/marks/{catalog['students'][0]}").get_json()["grades"]
    assert [g["marks"] for g in grades["MST_I"]] == [9]


def test_invalid_entries_are_rejected(client, catalog):
    assert client.post("/api/upload-marks", json=[_entry(catalog, 21)]).status_code == 400
    assert client.post("/api/upload-marks", json=[_entry(catalog, 5, exam="MIDTERM")]).status_code == 400
    assert client.post("/api/upload-marks", json=[_entry(catalog, "abc")]).status_code == 400
    assert client.post("/api/upload-marks", json=[]).status_code == 400

    bad_student = _entry(catalog, 5)
    bad_student["studentId"] = 999
    assert client.post("/api/upload-marks", json=[bad_student]).status_code == 404
    assert Marks.query.count() == 0


def test_marks_not_found(client, catalog):
    resp = client.get(f"/api/marks/{catalog['students'][1]}")
    assert resp.status_code == 404
    assert resp.get_json()["error"] == "Marks not found"
    assert client.get("/api/marks/class/999").status_code == 404


def test_non_finite_marks_are_rejected(client, catalog):
    template = (
        '[{{"studentId": {student}, "classId": {klass}, "subjectId": {subject}, '
        '"exam": "MST_I", "marks": {marks}, "maxMarks": {max_marks}}}]'
    )
    for marks, max_marks in (("NaN", "20"), ("5", "Infinity"), ("-Infinity", "20")):
        body = template.format(
            student=catalog["students"][0],
            klass=catalog["class"],
            subject=catalog["subjects"][0],
            marks=marks,
            max_marks=max_marks,
        )
        resp = client.post("/api/upload-marks", data=body, content_type="application/json")
        assert resp.status_code == 400
        assert "finite" in resp.get_json()["error"]

    assert MarkEntry.query.count() == 0


def test_marks_stay_in_the_sheet_class(client, catalog):
    client.post("/api/upload-marks", json=[_entry(catalog, 18)])
    other_class = client.post("/api/classes", json={"className": "Other"}).get_json()["class"]["id"]

    moved = _entry(catalog, 12, subject=1)
    moved["classId"] = other_class
    resp = client.post("/api/upload-marks", json=[moved])
    assert resp.status_code == 400
    assert MarkEntry.query.count() == 1

    # Dentro de un mismo lote tampoco se mezclan clases para un alumno
    resp = client.post(
        "/api/upload-marks",
        json=[_entry(catalog, 5, student=1), {**_entry(catalog, 6, student=1, subject=1), "classId": other_class}],
    )
    assert resp.status_code == 400
    assert Marks.query.count() == 1
