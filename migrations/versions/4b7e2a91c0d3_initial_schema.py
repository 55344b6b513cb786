"""initial schema: catalog, classes, permissions, marks, uploads

Revision ID: 4b7e2a91c0d3
Revises:
Create Date: 2026-10-18 10:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '4b7e2a91c0d3'
down_revision = None
branch_labels = None
depends_on = None


def _upload_columns():
    return [
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('class_id', sa.Integer(), nullable=False),
        sa.Column('teacher_id', sa.Integer(), nullable=True),
        sa.Column('subject_id', sa.Integer(), nullable=True),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('file_name', sa.String(length=255), nullable=False),
        sa.Column('file_path', sa.String(length=512), nullable=False),
        sa.Column('mime_type', sa.String(length=100), nullable=True),
        sa.Column('file_size', sa.Integer(), nullable=True),
        sa.Column('uploaded_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['class_id'], ['school_class.id']),
        sa.ForeignKeyConstraint(['teacher_id'], ['teacher.id']),
        sa.ForeignKeyConstraint(['subject_id'], ['subject.id']),
        sa.PrimaryKeyConstraint('id'),
    ]


def upgrade():
    op.create_table(
        'user',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('username', sa.String(length=80), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('role', sa.String(length=20), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('username'),
    )

    op.create_table(
        'room',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('room_name', sa.String(length=120), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'subject',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('subject_code', sa.String(length=50), nullable=True),
        sa.Column('subject_name', sa.String(length=255), nullable=True),
        sa.Column('subject_abbreviation', sa.String(length=50), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'teacher',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('faculty_name', sa.String(length=255), nullable=True),
        sa.Column('faculty_abbreviation', sa.String(length=50), nullable=True),
        sa.Column('username', sa.String(length=80), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_teacher_username', 'teacher', ['username'], unique=False)

    op.create_table(
        'teacher_subject',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('teacher_id', sa.Integer(), nullable=False),
        sa.Column('subject_id', sa.Integer(), nullable=False),
        sa.Column('subject_name', sa.String(length=255), nullable=True),
        sa.Column('upload_permission', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.ForeignKeyConstraint(['teacher_id'], ['teacher.id']),
        sa.ForeignKeyConstraint(['subject_id'], ['subject.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('teacher_id', 'subject_id', name='uq_teacher_subject'),
    )

    op.create_table(
        'school_class',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('class_name', sa.String(length=120), nullable=False),
        sa.Column('section', sa.String(length=50), nullable=True),
        sa.Column('schedule', sa.JSON(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'class_subject',
        sa.Column('class_id', sa.Integer(), nullable=False),
        sa.Column('subject_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['class_id'], ['school_class.id']),
        sa.ForeignKeyConstraint(['subject_id'], ['subject.id']),
        sa.PrimaryKeyConstraint('class_id', 'subject_id'),
    )

    op.create_table(
        'class_teacher',
        sa.Column('class_id', sa.Integer(), nullable=False),
        sa.Column('teacher_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['class_id'], ['school_class.id']),
        sa.ForeignKeyConstraint(['teacher_id'], ['teacher.id']),
        sa.PrimaryKeyConstraint('class_id', 'teacher_id'),
    )

    op.create_table(
        'permission',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('teacher_id', sa.Integer(), nullable=False),
        sa.Column('class_id', sa.Integer(), nullable=False),
        sa.Column('subject_id', sa.Integer(), nullable=False),
        sa.Column('have_permission', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['teacher_id'], ['teacher.id']),
        sa.ForeignKeyConstraint(['class_id'], ['school_class.id']),
        sa.ForeignKeyConstraint(['subject_id'], ['subject.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(
        'ix_permission_class_teacher',
        'permission',
        ['class_id', 'teacher_id'],
        unique=False,
    )

    op.create_table(
        'student',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('enrollment_number', sa.String(length=50), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=True),
        sa.Column('age', sa.String(length=20), nullable=True),
        sa.Column('class_id', sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(['class_id'], ['school_class.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_student_enrollment_number', 'student', ['enrollment_number'], unique=False)

    op.create_table(
        'announcement',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('text', sa.Text(), nullable=False),
        sa.Column('posted_by', sa.String(length=120), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('expires_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'marks',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('student_id', sa.Integer(), nullable=False),
        sa.Column('class_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['student_id'], ['student.id']),
        sa.ForeignKeyConstraint(['class_id'], ['school_class.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('student_id'),
    )

    op.create_table(
        'mark_entry',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('marks_id', sa.Integer(), nullable=False),
        sa.Column('exam', sa.String(length=10), nullable=False),
        sa.Column('subject_id', sa.Integer(), nullable=False),
        sa.Column('marks_obtained', sa.Float(), nullable=False),
        sa.Column('max_marks', sa.Float(), nullable=False),
        sa.ForeignKeyConstraint(['marks_id'], ['marks.id']),
        sa.ForeignKeyConstraint(['subject_id'], ['subject.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('marks_id', 'exam', 'subject_id', name='uq_mark_entry_exam_subject'),
    )

    op.create_table('material', *_upload_columns())
    op.create_table(
        'assignment',
        *_upload_columns(),
        sa.Column('due_date', sa.DateTime(), nullable=True),
    )


def downgrade():
    op.drop_table('assignment')
    op.drop_table('material')
    op.drop_table('mark_entry')
    op.drop_table('marks')
    op.drop_table('announcement')
    op.drop_index('ix_student_enrollment_number', table_name='student')
    op.drop_table('student')
    op.drop_index('ix_permission_class_teacher', table_name='permission')
    op.drop_table('permission')
    op.drop_table('class_teacher')
    op.drop_table('class_subject')
    op.drop_table('school_class')
    op.drop_table('teacher_subject')
    op.drop_index('ix_teacher_username', table_name='teacher')
    op.drop_table('teacher')
    op.drop_table('subject')
    op.drop_table('room')
    op.drop_table('user')
