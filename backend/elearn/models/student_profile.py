"""StudentProfile ORM — one row per student account.

Invariants:
    - account is the primary key (at most one profile per account)
    - achievements and preferences are ordered JSON string lists
    - rows are never deleted
"""

from sqlalchemy import BigInteger, String, Integer, JSON
from sqlalchemy.orm import Mapped, mapped_column

from elearn.db.base import Base


class StudentProfileRow(Base):
    """Student profile keyed by account."""
    __tablename__ = "student_profiles"

    account: Mapped[str] = mapped_column(String(128), primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    completed_courses: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0,
    )
    total_spent: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    achievements: Mapped[list] = mapped_column(
        JSON, nullable=False, default=list,
    )
    joined_at: Mapped[int] = mapped_column(Integer, nullable=False)
    preferences: Mapped[list] = mapped_column(
        JSON, nullable=False, default=list,
    )
