"""Course ORM — catalog entry.

Invariants:
    - id is assigned by the core from platform_config.next_course_id (no autoincrement)
    - instructor references instructor_profiles.account
    - price >= 0
    - prerequisites is a JSON list of course ids

Design Decisions:
    - autoincrement disabled: ids must match the ledger counter exactly, including
      after rolled-back operations
"""

from sqlalchemy import BigInteger, String, Text, Integer, Boolean, JSON, ForeignKey, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column

from elearn.db.base import Base


class CourseRow(Base):
    """Course entity."""
    __tablename__ = "courses"
    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_course_price_non_negative"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    instructor: Mapped[str] = mapped_column(
        String(128), ForeignKey("instructor_profiles.account"), nullable=False, index=True,
    )
    price: Mapped[int] = mapped_column(BigInteger, nullable=False)
    content_hash: Mapped[str] = mapped_column(String(256), nullable=False)
    category: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    total_students: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    average_rating: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    total_ratings: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    prerequisites: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    created_at: Mapped[int] = mapped_column(Integer, nullable=False)
