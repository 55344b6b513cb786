# tests/test_uploads.py
import io

import pytest

from models import Assignment, Material

PDF_BYTES = b"%PDF-1.4\n1 0 obj\n<<>>\nendobj\ntrailer\n<<>>\n%%EOF\n"


@pytest.fixture
def form(catalog):
    def _form(filename="notes.pdf", content=PDF_BYTES, **extra):
        data = {
            "file": (io.BytesIO(content), filename),
            "classId": str(catalog["class"]),
            "teacherId": str(catalog["teachers"][0]),
            "subjectId": str(catalog["subjects"][0]),
            "title": "Unit 1 notes",
        }
        data.update(extra)
        return data

    return _form


def _stored_files(tmp_path, kind):
    folder = tmp_path / "uploads" / kind
    return sorted(folder.iterdir()) if folder.exists() else []


def test_upload_pdf_material(client, form, tmp_path):
    resp = client.post("/api/materials/upload", data=form(), content_type="multipart/form-data")
    assert resp.status_code == 201
    upload = resp.get_json()["upload"]
    assert upload["fileName"] == "notes.pdf"
    assert upload["filePath"].startswith("/uploads/materials/")
    assert upload["fileSize"] == len(PDF_BYTES)
    assert "dueDate" not in upload

    files = _stored_files(tmp_path, "materials")
    assert len(files) == 1

    served = client.get(upload["filePath"])
    assert served.status_code == 200
    assert served.data == PDF_BYTES
    served.close()

    listed = client.get("/api/materials").get_json()
    assert [m["id"] for m in listed] == [upload["id"]]


def test_upload_docx_assignment_with_due_date(client, form):
    resp = client.post(
        "/api/assignments/upload",
        data=form(filename="homework.docx", content=b"PK\x03\x04docx", dueDate="2026-11-01T23:59:00Z"),
        content_type="multipart/form-data",
    )
    assert resp.status_code == 201
    upload = resp.get_json()["upload"]
    assert upload["dueDate"] == "2026-11-01T23:59:00"
    assert Assignment.query.count() == 1


def test_rejects_other_extensions(client, form, tmp_path):
    resp = client.post("/api/materials/upload", data=form(filename="notes.txt"), content_type="multipart/form-data")
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "Only PDF and DOCX files are allowed."
    assert _stored_files(tmp_path, "materials") == []


def test_rejects_files_over_limit(client, form, tmp_path):
    too_big = b"0" * (5 * 1024 * 1024 + 1)
    resp = client.post(
        "/api/materials/upload",
        data=form(content=too_big),
        content_type="multipart/form-data",
    )
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "File too large. Maximum size is 5MB."
    assert Material.query.count() == 0


def test_request_body_over_limit_is_json_413(client, form):
    huge = b"0" * (7 * 1024 * 1024)
    resp = client.post("/api/materials/upload", data=form(content=huge), content_type="multipart/form-data")
    assert resp.status_code == 413
    assert resp.get_json()["error"] == "File too large. Maximum size is 5MB."


def test_missing_file_and_unknown_class(client, form, catalog):
    data = form()
    data.pop("file")
    resp = client.post("/api/materials/upload", data=data, content_type="multipart/form-data")
    assert resp.status_code == 400

    resp = client.post("/api/materials/upload", data=form(classId="999"), content_type="multipart/form-data")
    assert resp.status_code == 404


def test_permission_enforcement(app, client, form, catalog):
    app.config["ENFORCE_UPLOAD_PERMISSIONS"] = True

    resp = client.post("/api/materials/upload", data=form(), content_type="multipart/form-data")
    assert resp.status_code == 403

    client.post(
        "/api/permissions",
        json=[{
            "teacherId": catalog["teachers"][0],
            "classId": catalog["class"],
            "subjectId": catalog["subjects"][0],
            "havePermission": True,
        }],
    )
    resp = client.post("/api/materials/upload", data=form(), content_type="multipart/form-data")
    assert resp.status_code == 201


def test_delete_removes_row_and_file(client, form, tmp_path):
    upload = client.post("/api/materials/upload", data=form(), content_type="multipart/form-data").get_json()["upload"]

    resp = client.delete(f"/api/materials/{upload['id']}")
    assert resp.status_code == 200
    assert resp.get_json()["fileDeleted"] is True
    assert _stored_files(tmp_path, "materials") == []
    assert client.delete(f"/api/materials/{upload['id']}").status_code == 404


def test_delete_with_missing_file_still_removes_row(client, form, tmp_path):
    upload = client.post("/api/materials/upload", data=form(), content_type="multipart/form-data").get_json()["upload"]
    for path in _stored_files(tmp_path, "materials"):
        path.unlink()

    resp = client.delete(f"/api/materials/{upload['id']}")
    assert resp.status_code == 200
    assert resp.get_json()["fileDeleted"] is False
    assert Material.query.count() == 0
