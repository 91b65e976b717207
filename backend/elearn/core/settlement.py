"""Financial Settlement — platform fee split, instructor earnings, withdrawals.

Invariants:
    - fee = price * fee_percentage // 100 (integer, truncating); instructor share = price - fee
    - total_earnings only grows through settle_enrollment and only shrinks through
      withdraw_earnings; it never goes negative
    - Funds never move here: a Transfer intent is emitted for the host ledger
    - Zero-amount transfers are never emitted
    - No running balance (total_spent, total_earnings, total_fees_collected)
      is ever pushed past MAX_BALANCE
"""

from elearn.core.access_control import check_authenticated
from elearn.core.domain_types import (
    Account, MAX_BALANCE, PLATFORM_ACCOUNT, Table, TransferKind,
)
from elearn.core.errors import ElearnError, InsufficientBalanceError, InvalidInputError
from elearn.core.ledger_state import Course, StudentProfile, Transfer
from elearn.core.ledger_transaction import LedgerTransaction
from elearn.core.profiles import check_instructor_exists


def compute_fee_split(price: int, fee_percentage: int) -> tuple[int, int]:
    """Return (platform fee, instructor share) for a course price."""
    fee = price * fee_percentage // 100
    return fee, price - fee


def check_accrual_capacity(
    tx: LedgerTransaction, student: StudentProfile, course: Course,
) -> ElearnError | None:
    """Reject an enrollment whose payment would overflow a stored balance."""
    config = tx.get_config()
    fee, share = compute_fee_split(course.price, config.fee_percentage)
    instructor = tx.get(Table.INSTRUCTOR_PROFILES, course.instructor)
    balances = (
        ("total_spent", student.total_spent + course.price),
        ("total_earnings", instructor.total_earnings + share),
        ("total_fees_collected", config.total_fees_collected + fee),
    )
    for field, value in balances:
        if value > MAX_BALANCE:
            return InvalidInputError(f"Enrollment would overflow {field}", field)
    return None


def settle_enrollment(tx: LedgerTransaction, student: Account, course: Course) -> int:
    """Accrue the instructor share and platform fee for one paid enrollment.

    Returns the platform fee retained.
    """
    config = tx.get_config()
    fee, share = compute_fee_split(course.price, config.fee_percentage)

    instructor = tx.get(Table.INSTRUCTOR_PROFILES, course.instructor)
    instructor.total_earnings += share
    instructor.total_students += 1
    tx.put(Table.INSTRUCTOR_PROFILES, course.instructor, instructor)

    config.total_fees_collected += fee
    tx.put_config(config)

    if course.price > 0:
        tx.emit_transfer(Transfer(
            kind=TransferKind.ENROLLMENT_PAYMENT, sender=student,
            recipient=PLATFORM_ACCOUNT, amount=course.price,
            sequence_number=tx.sequence_number,
        ))
    return fee


def check_withdrawal_amount(amount: int, available: int) -> ElearnError | None:
    if amount <= 0:
        return InvalidInputError(f"Withdrawal amount must be positive, got {amount}", "amount")
    if amount > available:
        return InsufficientBalanceError(amount, available)
    return None


def withdraw_earnings(tx: LedgerTransaction, caller: Account | None, amount: int) -> bool:
    error = check_authenticated(caller) or check_instructor_exists(tx, caller)
    if error:
        raise error
    instructor = tx.get(Table.INSTRUCTOR_PROFILES, caller)
    error = check_withdrawal_amount(amount, instructor.total_earnings)
    if error:
        raise error
    instructor.total_earnings -= amount
    tx.put(Table.INSTRUCTOR_PROFILES, caller, instructor)
    tx.emit_transfer(Transfer(
        kind=TransferKind.WITHDRAWAL, sender=PLATFORM_ACCOUNT,
        recipient=caller, amount=amount, sequence_number=tx.sequence_number,
    ))
    return True
