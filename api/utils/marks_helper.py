# api/utils/marks_helper.py
from models import Marks, ExamEnum


def serialize_marks(marks: Marks) -> dict:
    return {
        "id": marks.id,
        "studentId": marks.student_id,
        "classId": marks.class_id,
        "grades": {
            exam.value: [
                {
                    "subject": entry.subject_id,
                    "marks": entry.marks_obtained,
                    "maxMarks": entry.max_marks,
                }
                for entry in marks.entries_for(exam)
            ]
            for exam in ExamEnum
        },
    }
