# models/__init__.py
from .roles import RoleEnum
from .user import User
from .room import Room
from .subject import Subject
from .teacher import Teacher, TeacherSubject
from .school_class import SchoolClass, class_subject, class_teacher
from .permission import Permission
from .student import Student
from .announcement import Announcement
from .marks import Marks, MarkEntry, ExamEnum
from .upload import Material, Assignment

__all__ = [
    "RoleEnum",
    "User",
    "Room",
    "Subject",
    "Teacher",
    "TeacherSubject",
    "SchoolClass",
    "class_subject",
    "class_teacher",
    "Permission",
    "Student",
    "Announcement",
    "Marks",
    "MarkEntry",
    "ExamEnum",
    "Material",
    "Assignment",
]
