"""PlatformConfig ORM — the singleton configuration row plus the host sequence number.

Invariants:
    - Exactly one row, id = 1, created on first use from settings
    - owner never changes after the row exists
    - fee_percentage in 0..100; counters only grow
    - sequence_number is the last committed ledger sequence number

Design Decisions:
    - sequence_number stored here, not in a separate table: it is bumped in the same
      commit as every operation, so one row lock serializes writers
"""

from datetime import datetime, timezone

from sqlalchemy import BigInteger, String, Integer, DateTime, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column

from elearn.db.base import Base

SINGLETON_ID = 1


class PlatformConfigRow(Base):
    """Singleton platform configuration."""
    __tablename__ = "platform_config"
    __table_args__ = (
        CheckConstraint(
            "fee_percentage >= 0 AND fee_percentage <= 100",
            name="ck_platform_fee_range",
        ),
    )

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, default=SINGLETON_ID, autoincrement=False,
    )
    owner: Mapped[str] = mapped_column(String(128), nullable=False)
    fee_percentage: Mapped[int] = mapped_column(Integer, nullable=False)
    next_course_id: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    next_post_id: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    total_fees_collected: Mapped[int] = mapped_column(
        BigInteger, nullable=False, default=0,
    )
    sequence_number: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    deployed_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
