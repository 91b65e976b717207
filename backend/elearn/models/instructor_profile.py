"""InstructorProfile ORM — one row per instructor account.

Invariants:
    - account is the primary key (at most one profile per account)
    - total_earnings is the withdrawable balance, never negative
"""

from sqlalchemy import BigInteger, String, Text, Integer, JSON, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column

from elearn.db.base import Base


class InstructorProfileRow(Base):
    """Instructor profile keyed by account."""
    __tablename__ = "instructor_profiles"
    __table_args__ = (
        CheckConstraint("total_earnings >= 0", name="ck_instructor_earnings_non_negative"),
    )

    account: Mapped[str] = mapped_column(String(128), primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    credentials: Mapped[str] = mapped_column(Text, nullable=False)
    bio: Mapped[str] = mapped_column(Text, nullable=False)
    social_links: Mapped[list] = mapped_column(
        JSON, nullable=False, default=list,
    )
    rating: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    total_reviews: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    total_students: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    total_earnings: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
