"""LedgerTransfer ORM — journal of transfer intents for the external settlement process.

Invariants:
    - Append-only; written in the same commit as the operation that emitted it
    - amount > 0
    - executed_at stays NULL until the settlement process moves the funds

Design Decisions:
    - Surrogate autoincrement id: several transfers can share one sequence number
"""

from datetime import datetime

from sqlalchemy import BigInteger, String, Integer, DateTime, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column

from elearn.db.base import Base


class LedgerTransferRow(Base):
    """One transfer intent."""
    __tablename__ = "ledger_transfers"
    __table_args__ = (
        CheckConstraint("amount > 0", name="ck_transfer_amount_positive"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    kind: Mapped[str] = mapped_column(String(30), nullable=False)
    sender: Mapped[str] = mapped_column(String(128), nullable=False)
    recipient: Mapped[str] = mapped_column(String(128), nullable=False)
    amount: Mapped[int] = mapped_column(BigInteger, nullable=False)
    sequence_number: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    executed_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
