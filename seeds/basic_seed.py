# seeds/basic_seed.py
"""
Seed de demo para Aulario.

CREA (o reutiliza si ya existen):
    - Aulas y materias
    - Profesores con sus materias asignadas
    - Una clase con horario, materias, profesores y permisos de carga
    - Alumnos de la clase
    - Cuentas: admin, profesor, alumno
    - Un aviso vigente

Modo de uso:
    flask shell
    >>> from seeds.basic_seed import run_basic_seed
    >>> run_basic_seed()
"""

from datetime import datetime, timedelta

from extensions import db
from models import (
    Announcement,
    Permission,
    RoleEnum,
    Room,
    SchoolClass,
    Student,
    Subject,
    Teacher,
    TeacherSubject,
    User,
)

DEMO_PASSWORDS = {
    "admin": "admin123",
    "jdoe": "profe123",
    "2024CS001": "alumno123",
}

DEMO_SCHEDULE = {
    "processedSchedule": {
        "Monday": [
            {"time": "09:00-10:00", "subject": "DS", "teacher": "JD", "room": "A-101"},
            {"time": "10:00-11:00", "subject": "OS", "teacher": "MS", "room": "A-101"},
        ],
        "Tuesday": [
            {"time": "09:00-10:00", "subject": "OS", "teacher": "MS", "room": "Lab 2"},
        ],
    }
}


def _get_or_create(model, defaults=None, **kwargs):
    instance = model.query.filter_by(**kwargs).first()
    if instance:
        return instance, False

    params = {**kwargs}
    if defaults:
        params.update(defaults)

    instance = model(**params)
    db.session.add(instance)
    return instance, True


def _ensure_user(username, role, password=None):
    user, created = _get_or_create(User, username=username, defaults={"role": role.value})
    if created or not user.password_hash:
        user.set_password(password or DEMO_PASSWORDS.get(username, "changeme123"))
    return user


def _ensure_teacher_subject(teacher, subject, upload_permission=False):
    if subject.id in teacher.subject_ids():
        return
    teacher.subjects.append(
        TeacherSubject(
            subject_id=subject.id,
            subject_name=subject.subject_name,
            upload_permission=upload_permission,
        )
    )


def run_basic_seed():
    print("🌱 Ejecutando seed de demo...")

    # 1. Aulas y materias
    for name in ("A-101", "Lab 2"):
        _get_or_create(Room, room_name=name)

    ds, _ = _get_or_create(
        Subject,
        subject_code="CS201",
        defaults={"subject_name": "Data Structures", "subject_abbreviation": "DS"},
    )
    os_subject, _ = _get_or_create(
        Subject,
        subject_code="CS202",
        defaults={"subject_name": "Operating Systems", "subject_abbreviation": "OS"},
    )
    db.session.flush()

    # 2. Profesores
    jdoe, _ = _get_or_create(
        Teacher,
        username="jdoe",
        defaults={"faculty_name": "John Doe", "faculty_abbreviation": "JD"},
    )
    msmith, _ = _get_or_create(
        Teacher,
        username="msmith",
        defaults={"faculty_name": "Mary Smith", "faculty_abbreviation": "MS"},
    )
    db.session.flush()
    _ensure_teacher_subject(jdoe, ds, upload_permission=True)
    _ensure_teacher_subject(msmith, os_subject)

    # 3. Clase con horario, materias y profesores
    school_class, _ = _get_or_create(
        SchoolClass,
        class_name="CSE 3rd Year",
        section="A",
        defaults={"schedule": DEMO_SCHEDULE},
    )
    for subject in (ds, os_subject):
        if subject not in school_class.subjects:
            school_class.subjects.append(subject)
    for teacher in (jdoe, msmith):
        if teacher not in school_class.teachers:
            school_class.teachers.append(teacher)
    db.session.flush()

    _get_or_create(
        Permission,
        teacher_id=jdoe.id,
        class_id=school_class.id,
        subject_id=ds.id,
        defaults={"have_permission": True},
    )
    _get_or_create(
        Permission,
        teacher_id=msmith.id,
        class_id=school_class.id,
        subject_id=os_subject.id,
        defaults={"have_permission": False},
    )

    # 4. Alumnos
    for enrollment, name, age in (
        ("2024CS001", "Ana Gómez", "20"),
        ("2024CS002", "Luis Pérez", "21"),
    ):
        _get_or_create(
            Student,
            enrollment_number=enrollment,
            defaults={"name": name, "age": age, "class_id": school_class.id},
        )

    # 5. Cuentas
    _ensure_user("admin", RoleEnum.ADMIN, DEMO_PASSWORDS["admin"])
    _ensure_user("jdoe", RoleEnum.TEACHER, DEMO_PASSWORDS["jdoe"])
    _ensure_user("2024CS001", RoleEnum.STUDENT, DEMO_PASSWORDS["2024CS001"])

    # 6. Aviso vigente
    if Announcement.query.count() == 0:
        db.session.add(
            Announcement(
                text="Los exámenes MST I comienzan el próximo lunes.",
                posted_by="admin",
                expires_at=datetime.utcnow() + timedelta(days=14),
            )
        )

    db.session.commit()

    print("✅ Seed cargado.")
    print("   Usuarios:")
    for username, pwd in DEMO_PASSWORDS.items():
        print(f"     - {username} / {pwd}")
    print(f"   Clase demo: {school_class.class_name} {school_class.section}")
