# api/services/permission_service.py

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from extensions import db
from models import Permission, SchoolClass, Subject, Teacher, TeacherSubject
from api.utils.request_helper import parse_id

logger = logging.getLogger(__name__)


class PermissionService:
    """
    Permisos de carga por (profesor, clase, materia) y su propagación al
    flag uploadPermission que cada profesor tiene por materia.
    """

    @staticmethod
    def grant_permissions(payloads: Sequence) -> list[Permission]:
        """
        Inserta los permisos tal cual llegan. No se controla duplicación de
        (teacher, class, subject): pueden existir varios registros iguales.
        """
        if not isinstance(payloads, list):
            raise ValueError("Permissions should be an array of objects.")

        created: list[Permission] = []
        for payload in payloads:
            if not isinstance(payload, dict):
                raise ValueError("Each permission must be an object.")

            teacher_id = parse_id(payload.get("teacherId"), "teacherId")
            class_id = parse_id(payload.get("classId"), "classId")
            subject_id = parse_id(payload.get("subjectId"), "subjectId")
            PermissionService._ensure_exists(Teacher, teacher_id, "Teacher")
            PermissionService._ensure_exists(SchoolClass, class_id, "Class")
            PermissionService._ensure_exists(Subject, subject_id, "Subject")

            created.append(
                Permission(
                    teacher_id=teacher_id,
                    class_id=class_id,
                    subject_id=subject_id,
                    have_permission=bool(payload.get("havePermission", False)),
                )
            )

        # Recién acá se escriben: si un payload es inválido no queda nada a medias
        db.session.add_all(created)

        db.session.flush()
        PermissionService.sync_upload_flags((p.teacher_id, p.subject_id) for p in created)
        db.session.commit()
        return created

    @staticmethod
    def get_permissions(class_id: int, teacher_id: int | None = None) -> list[Permission]:
        """
        Con teacher_id: solo los permisos concedidos (havePermission=True).
        Sin teacher_id: todos los de la clase, sin importar el flag.
        """
        query = Permission.query.filter_by(class_id=class_id)
        if teacher_id is not None:
            query = query.filter_by(teacher_id=teacher_id, have_permission=True)
        return query.order_by(Permission.id.asc()).all()

    @staticmethod
    def set_permission(permission_id: int, have_permission) -> Permission:
        if not isinstance(have_permission, bool):
            raise ValueError("havePermission must be a boolean.")

        permission = db.session.get(Permission, permission_id)
        if not permission:
            raise LookupError("Permission not found")

        permission.have_permission = have_permission
        db.session.flush()
        PermissionService.sync_upload_flags([(permission.teacher_id, permission.subject_id)])
        db.session.commit()
        return permission

    @staticmethod
    def can_upload(teacher_id: int, class_id: int, subject_id: int) -> bool:
        return (
            Permission.query.filter_by(
                teacher_id=teacher_id,
                class_id=class_id,
                subject_id=subject_id,
                have_permission=True,
            ).first()
            is not None
        )

    @staticmethod
    def sync_upload_flags(pairs: Iterable[tuple[int, int]]) -> None:
        """
        uploadPermission de la materia del profesor queda en True si existe
        al menos un permiso concedido para ese (profesor, materia).
        """
        for teacher_id, subject_id in set(pairs):
            entry = TeacherSubject.query.filter_by(teacher_id=teacher_id, subject_id=subject_id).first()
            if not entry:
                continue
            granted = (
                Permission.query.filter_by(
                    teacher_id=teacher_id,
                    subject_id=subject_id,
                    have_permission=True,
                ).first()
                is not None
            )
            if entry.upload_permission != granted:
                logger.info(
                    "uploadPermission de profesor %s / materia %s pasa a %s",
                    teacher_id,
                    subject_id,
                    granted,
                )
            entry.upload_permission = granted

    @staticmethod
    def _ensure_exists(model, object_id: int, label: str) -> None:
        if not db.session.get(model, object_id):
            raise LookupError(f"{label} with id {object_id} not found")
