# api/students.py

from flask import request, jsonify

from extensions import db
from models import Marks, Student
from api.services.catalog_service import CatalogService
from api.utils.catalog_helper import serialize_student
from api.utils.request_helper import error_response, json_object_body
from . import api_bp


@api_bp.get("/students")
def list_students():
    students = Student.query.order_by(Student.id.asc()).all()
    return jsonify([serialize_student(s) for s in students])


@api_bp.post("/students")
def create_student():
    try:
        student = CatalogService.build_student(json_object_body())
    except ValueError as exc:
        return error_response(exc)

    db.session.add(student)
    db.session.commit()
    return jsonify({"status": "created", "student": serialize_student(student)}), 201


@api_bp.post("/bulk-add-students")
def bulk_add_students():
    """
    Lista de alumnos; se descartan los que no traen enrollmentNumber.
    """
    try:
        students = CatalogService.bulk_create_students(request.get_json(silent=True))
    except ValueError as exc:
        return error_response(exc)

    return jsonify({"status": "created", "count": len(students)}), 201


@api_bp.get("/students/class/<int:class_id>")
def list_students_by_class(class_id):
    students = Student.query.filter_by(class_id=class_id).order_by(Student.id.asc()).all()

    if not students:
        return jsonify({"error": "No students found for this class"}), 404

    return jsonify([serialize_student(s) for s in students])


@api_bp.delete("/students/<int:student_id>")
def delete_student(student_id):
    student = db.session.get(Student, student_id)
    if not student:
        return jsonify({"error": "Student not found"}), 404

    marks = Marks.query.filter_by(student_id=student.id).first()
    if marks:
        db.session.delete(marks)

    db.session.delete(student)
    db.session.commit()
    return jsonify({"status": "deleted", "id": student_id})
