# api/services/account_service.py

from __future__ import annotations

import logging
from typing import Mapping, Sequence

from extensions import db
from models import RoleEnum, Student, Teacher, User
from api.utils.catalog_helper import serialize_student, serialize_teacher

logger = logging.getLogger(__name__)


class AccountService:
    """
    Cuentas de acceso y login. La ficha de cada rol se busca por texto:
      - teacher → Teacher.username == User.username
      - student → Student.enrollment_number == User.username
      - admin   → sin ficha
    """

    @staticmethod
    def authenticate(username: str, password: str) -> tuple[User, dict]:
        """
        Devuelve (user, payload) donde payload es {"role": ..., **ficha}.
        ValueError → 400 ; LookupError → 404 (ficha inexistente).
        """
        if not username or not password:
            raise ValueError("Username and password are required")

        user = User.query.filter_by(username=username).first()
        if not user:
            raise ValueError("User not found")

        if not user.check_password(password):
            raise ValueError("Invalid password")

        if user.role == RoleEnum.TEACHER.value:
            teacher = Teacher.query.filter_by(username=username).first()
            if not teacher:
                raise LookupError("Teacher data not found")
            return user, {"role": user.role, **serialize_teacher(teacher)}

        if user.role == RoleEnum.STUDENT.value:
            student = Student.query.filter_by(enrollment_number=username).first()
            if not student:
                raise LookupError("Student data not found")
            return user, {"role": user.role, **serialize_student(student)}

        if user.role == RoleEnum.ADMIN.value:
            return user, {"role": user.role}

        raise ValueError("Invalid role")

    @staticmethod
    def create_user(payload: Mapping) -> User:
        username, password, role = AccountService._validate_account(payload)

        if User.query.filter_by(username=username).first():
            raise ValueError("User with this username already exists")

        user = User(username=username, role=role)
        user.set_password(password)
        db.session.add(user)
        db.session.commit()
        return user

    @staticmethod
    def bulk_create_users(payloads: Sequence) -> list[User]:
        """
        Todo o nada: se valida el lote completo antes de insertar.
        """
        if not isinstance(payloads, list) or not payloads:
            raise ValueError("Users should be a non-empty array.")

        seen: set[str] = set()
        validated: list[tuple[str, str, str]] = []
        for payload in payloads:
            if not isinstance(payload, Mapping):
                raise ValueError("Each user must be an object.")
            username, password, role = AccountService._validate_account(payload)
            if username in seen or User.query.filter_by(username=username).first():
                raise ValueError(f"User with this username already exists: {username}")
            seen.add(username)
            validated.append((username, password, role))

        created: list[User] = []
        for username, password, role in validated:
            user = User(username=username, role=role)
            user.set_password(password)
            db.session.add(user)
            created.append(user)

        db.session.commit()
        logger.info("Alta masiva de %s cuentas", len(created))
        return created

    @staticmethod
    def list_users_with_details(role: RoleEnum) -> list[dict]:
        users = User.query.filter_by(role=role.value).order_by(User.id.asc()).all()
        result: list[dict] = []
        for user in users:
            item = {"id": user.id, "username": user.username}
            if role == RoleEnum.TEACHER:
                teacher = Teacher.query.filter_by(username=user.username).first()
                item["teacherDetails"] = serialize_teacher(teacher) if teacher else None
            else:
                student = Student.query.filter_by(enrollment_number=user.username).first()
                item["studentDetails"] = serialize_student(student) if student else None
            result.append(item)
        return result

    @staticmethod
    def delete_account(user_id: int, role: RoleEnum) -> None:
        """
        Borra solo la cuenta (la ficha Teacher / Student se conserva).
        El rol se verifica antes de borrar.
        """
        user = db.session.get(User, user_id)
        if not user or user.role != role.value:
            label = "Teacher" if role == RoleEnum.TEACHER else "Student"
            raise LookupError(f"{label} not found or invalid role")

        db.session.delete(user)
        db.session.commit()

    @staticmethod
    def _validate_account(payload: Mapping) -> tuple[str, str, str]:
        username = payload.get("username")
        password = payload.get("password")
        role = payload.get("role")

        if not isinstance(username, str) or not username.strip():
            raise ValueError("username is required")
        if not isinstance(password, str) or not password:
            raise ValueError("password is required")
        if role not in RoleEnum.values():
            raise ValueError(f"Invalid role for user: {username.strip()}")

        return username.strip(), password, role
