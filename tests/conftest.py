# tests/conftest.py
import pytest

from app import create_app
from config import Config
from extensions import db
from models import RoleEnum, SchoolClass, Student, Subject, Teacher, User


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret"
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    ENFORCE_UPLOAD_PERMISSIONS = False
    LOG_LEVEL = "WARNING"


@pytest.fixture
def app(tmp_path):
    class _Config(TestingConfig):
        UPLOAD_FOLDER = str(tmp_path / "uploads")

    app = create_app(_Config)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def catalog(app):
    """
    Catálogo mínimo: tres materias, dos profesores, una clase vacía y dos
    alumnos en esa clase. Devuelve los ids.
    """
    subjects = [
        Subject(subject_code="CS201", subject_name="Data Structures", subject_abbreviation="DS"),
        Subject(subject_code="CS202", subject_name="Operating Systems", subject_abbreviation="OS"),
        Subject(subject_code="CS203", subject_name="Networks", subject_abbreviation="CN"),
    ]
    teachers = [
        Teacher(faculty_name="John Doe", faculty_abbreviation="JD", username="jdoe"),
        Teacher(faculty_name="Mary Smith", faculty_abbreviation="MS", username="msmith"),
    ]
    school_class = SchoolClass(class_name="CSE 3rd Year", section="A", schedule={})
    db.session.add_all(subjects + teachers + [school_class])
    db.session.flush()

    students = [
        Student(enrollment_number="2024CS001", name="Ana", age="20", class_id=school_class.id),
        Student(enrollment_number="2024CS002", name="Luis", age="21", class_id=school_class.id),
    ]
    db.session.add_all(students)
    db.session.commit()

    return {
        "subjects": [s.id for s in subjects],
        "teachers": [t.id for t in teachers],
        "class": school_class.id,
        "students": [s.id for s in students],
    }


@pytest.fixture
def make_user(app):
    def _make_user(username, password, role: RoleEnum) -> User:
        user = User(username=username, role=role.value)
        user.set_password(password)
        db.session.add(user)
        db.session.commit()
        return user

    return _make_user
