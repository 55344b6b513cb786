import enum

from extensions import db


class ExamEnum(str, enum.Enum):
    MST_I = "MST_I"
    MST_II = "MST_II"
    FINAL = "FINAL"


class Marks(db.Model):
    """
    Libreta de notas de un alumno: un único registro por alumno con tres
    instancias de examen fijas (MST_I, MST_II, FINAL).
    """

    __tablename__ = "marks"

    id = db.Column(db.Integer, primary_key=True)
    student_id = db.Column(db.Integer, db.ForeignKey("student.id"), nullable=False, unique=True)
    class_id = db.Column(db.Integer, db.ForeignKey("school_class.id"), nullable=False)

    student = db.relationship("Student")
    school_class = db.relationship("SchoolClass", back_populates="marks")
    entries = db.relationship(
        "MarkEntry",
        back_populates="marks",
        cascade="all, delete-orphan",
        order_by="MarkEntry.id",
    )

    def entries_for(self, exam: ExamEnum) -> list["MarkEntry"]:
        return [entry for entry in self.entries if entry.exam == exam.value]


class MarkEntry(db.Model):
    __tablename__ = "mark_entry"

    id = db.Column(db.Integer, primary_key=True)
    marks_id = db.Column(db.Integer, db.ForeignKey("marks.id"), nullable=False)
    exam = db.Column(db.String(10), nullable=False)
    subject_id = db.Column(db.Integer, db.ForeignKey("subject.id"), nullable=False)
    marks_obtained = db.Column(db.Float, nullable=False)
    max_marks = db.Column(db.Float, nullable=False)

    marks = db.relationship("Marks", back_populates="entries")
    subject = db.relationship("Subject")

    __table_args__ = (
        db.UniqueConstraint("marks_id", "exam", "subject_id", name="uq_mark_entry_exam_subject"),
    )
