# api/utils/catalog_helper.py
from models import (
    Announcement,
    Permission,
    Room,
    SchoolClass,
    Student,
    Subject,
    Teacher,
    User,
)


def serialize_room(room: Room) -> dict:
    return {"id": room.id, "roomName": room.room_name}


def serialize_subject(subject: Subject) -> dict:
    return {
        "id": subject.id,
        "subjectCode": subject.subject_code,
        "subjectName": subject.subject_name,
        "subjectAbbreviation": subject.subject_abbreviation,
    }


def serialize_teacher(teacher: Teacher) -> dict:
    return {
        "id": teacher.id,
        "facultyName": teacher.faculty_name,
        "facultyAbbreviation": teacher.faculty_abbreviation,
        "username": teacher.username,
        "subjects": [
            {
                "subjectId": entry.subject_id,
                "subjectName": entry.subject_name,
                "uploadPermission": entry.upload_permission,
            }
            for entry in teacher.subjects
        ],
    }


def serialize_class(school_class: SchoolClass) -> dict:
    return {
        "id": school_class.id,
        "className": school_class.class_name,
        "section": school_class.section,
        "schedule": school_class.schedule or {},
        "subjects": [s.id for s in school_class.subjects],
        "teachers": [t.id for t in school_class.teachers],
    }


def serialize_student(student: Student) -> dict:
    return {
        "id": student.id,
        "enrollmentNumber": student.enrollment_number,
        "name": student.name,
        "age": student.age,
        "classId": student.class_id,
    }


def serialize_user(user: User) -> dict:
    # Nunca exponemos el hash
    return {"id": user.id, "username": user.username, "role": user.role}


def serialize_announcement(announcement: Announcement) -> dict:
    return {
        "id": announcement.id,
        "text": announcement.text,
        "postedBy": announcement.posted_by,
        "createdAt": announcement.created_at.isoformat() if announcement.created_at else None,
        "expiresAt": announcement.expires_at.isoformat() if announcement.expires_at else None,
    }


def serialize_permission(permission: Permission, *, with_subject: bool = False) -> dict:
    data = {
        "id": permission.id,
        "teacherId": permission.teacher_id,
        "classId": permission.class_id,
        "subjectId": permission.subject_id,
        "havePermission": permission.have_permission,
    }
    if with_subject:
        data["subject"] = serialize_subject(permission.subject) if permission.subject else None
    return data
