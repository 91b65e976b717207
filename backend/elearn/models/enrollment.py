"""Enrollment ORM — one row per (student, course).

Invariants:
    - (student, course_id) is the composite primary key
    - progress is 0..100; completed is one-way
    - completion_certificate only set once completed
"""

from sqlalchemy import String, Integer, Boolean, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from elearn.db.base import Base


class EnrollmentRow(Base):
    """Enrollment of a student in a course."""
    __tablename__ = "enrollments"

    student: Mapped[str] = mapped_column(
        String(128), ForeignKey("student_profiles.account"), primary_key=True,
    )
    course_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("courses.id"), primary_key=True,
    )
    enrolled_at: Mapped[int] = mapped_column(Integer, nullable=False)
    last_accessed: Mapped[int] = mapped_column(Integer, nullable=False)
    completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    progress: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    rating: Mapped[int | None] = mapped_column(Integer, nullable=True)
    completion_certificate: Mapped[str | None] = mapped_column(
        String(256), nullable=True,
    )
