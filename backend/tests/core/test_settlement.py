"""Financial Settlement — tests for the fee split, earnings accrual and withdrawals.

Tests cover:
    - compute_fee_split truncates the fee and gives the remainder to the instructor
    - enrollment accrues earnings, platform fees and a student -> platform transfer
    - free courses emit no transfer
    - an enrollment that would overflow a stored balance is rejected before any write
    - withdraw_earnings checks profile first, then amount, then balance
"""

import pytest

from elearn.core.domain_types import (
    Account, CourseId, MAX_BALANCE, MAX_PRICE, PLATFORM_ACCOUNT, TransferKind,
)
from elearn.core.errors import (
    ErrorCode, InsufficientBalanceError, InvalidInputError, ResourceNotFoundError,
)
from elearn.core.enrollment import get_enrollment
from elearn.core.profiles import get_instructor_profile, get_student_profile
from elearn.core.settlement import compute_fee_split

OWNER = Account("deployer")
ALICE = Account("alice")
PROF = Account("prof")
BOB = Account("bob")
COURSE = CourseId(1)


@pytest.mark.parametrize("price, pct, expected", [
    (1000, 5, (50, 950)),
    (999, 5, (49, 950)),
    (1000, 0, (0, 1000)),
    (1000, 100, (1000, 0)),
    (0, 5, (0, 0)),
])
def test_compute_fee_split(price, pct, expected):
    assert compute_fee_split(price, pct) == expected


def test_enrollment_accrues_earnings_and_fees(course_ledger):
    course_ledger.call("enroll_in_course", ALICE, COURSE)
    assert get_instructor_profile(course_ledger.state, PROF).total_earnings == 950
    assert course_ledger.state.config.total_fees_collected == 50


def test_enrollment_emits_payment_transfer(course_ledger):
    course_ledger.call("enroll_in_course", ALICE, COURSE)
    [transfer] = course_ledger.state.transfers
    assert transfer.kind == TransferKind.ENROLLMENT_PAYMENT
    assert transfer.sender == ALICE
    assert transfer.recipient == PLATFORM_ACCOUNT
    assert transfer.amount == 1000
    assert transfer.sequence_number == course_ledger.sequence_number


def test_fee_change_applies_to_later_enrollments(course_ledger):
    course_ledger.call("set_platform_fee", OWNER, 20)
    course_ledger.call("enroll_in_course", ALICE, COURSE)
    assert get_instructor_profile(course_ledger.state, PROF).total_earnings == 800


def test_free_course_emits_no_transfer(instructor_ledger):
    course_id = instructor_ledger.call(
        "create_course", PROF, "Free", 0, "QmFree", "cs", "", [],
    )
    instructor_ledger.call("create_student_profile", ALICE, "Alice")
    instructor_ledger.call("enroll_in_course", ALICE, course_id)
    assert instructor_ledger.state.transfers == []
    assert get_instructor_profile(instructor_ledger.state, PROF).total_students == 1


def test_enrollment_overflowing_earnings_rejected(instructor_ledger):
    course_id = instructor_ledger.call(
        "create_course", PROF, "Priceless", MAX_PRICE, "QmMax", "cs", "", [],
    )
    instructor_ledger.call("create_student_profile", ALICE, "Alice")
    instructor_ledger.call("create_student_profile", BOB, "Bob")
    instructor_ledger.call("enroll_in_course", ALICE, course_id)
    earned = get_instructor_profile(instructor_ledger.state, PROF).total_earnings
    sequence_number = instructor_ledger.sequence_number

    with pytest.raises(InvalidInputError) as exc:
        instructor_ledger.call("enroll_in_course", BOB, course_id)
    assert exc.value.code == ErrorCode.UNAUTHORIZED
    assert exc.value.reason == "invalid_total_earnings"
    assert instructor_ledger.sequence_number == sequence_number
    assert get_enrollment(instructor_ledger.state, BOB, course_id) is None
    assert get_student_profile(instructor_ledger.state, BOB).total_spent == 0
    assert get_instructor_profile(instructor_ledger.state, PROF).total_earnings == earned


def test_enrollment_overflowing_student_spend_rejected(ledger):
    ledger.call("create_instructor_profile", PROF, "Prof", "PhD", "", [])
    ledger.call("create_instructor_profile", BOB, "Bob", "MSc", "", [])
    first = ledger.call("create_course", PROF, "A", MAX_PRICE, "QmA", "cs", "", [])
    second = ledger.call("create_course", BOB, "B", 1, "QmB", "cs", "", [])
    ledger.call("create_student_profile", ALICE, "Alice")
    ledger.call("enroll_in_course", ALICE, first)
    assert get_student_profile(ledger.state, ALICE).total_spent == MAX_BALANCE

    with pytest.raises(InvalidInputError) as exc:
        ledger.call("enroll_in_course", ALICE, second)
    assert exc.value.reason == "invalid_total_spent"
    assert get_enrollment(ledger.state, ALICE, second) is None


# ─── withdraw_earnings ───────────────────────────────────────────

@pytest.mark.parametrize("amount", [0, 1, 10**9])
def test_withdraw_without_instructor_profile_not_found(ledger, amount):
    with pytest.raises(ResourceNotFoundError) as exc:
        ledger.call("withdraw_earnings", ALICE, amount)
    assert exc.value.code == ErrorCode.NOT_FOUND


def test_withdraw_decrements_balance_and_emits_transfer(course_ledger):
    course_ledger.call("enroll_in_course", ALICE, COURSE)
    course_ledger.call("withdraw_earnings", PROF, 500)
    assert get_instructor_profile(course_ledger.state, PROF).total_earnings == 450
    transfer = course_ledger.state.transfers[-1]
    assert transfer.kind == TransferKind.WITHDRAWAL
    assert (transfer.sender, transfer.recipient) == (PLATFORM_ACCOUNT, PROF)
    assert transfer.amount == 500


def test_withdraw_full_balance(course_ledger):
    course_ledger.call("enroll_in_course", ALICE, COURSE)
    course_ledger.call("withdraw_earnings", PROF, 950)
    assert get_instructor_profile(course_ledger.state, PROF).total_earnings == 0


def test_withdraw_more_than_balance_rejected(course_ledger):
    course_ledger.call("enroll_in_course", ALICE, COURSE)
    with pytest.raises(InsufficientBalanceError) as exc:
        course_ledger.call("withdraw_earnings", PROF, 951)
    assert exc.value.code == ErrorCode.UNAUTHORIZED
    assert exc.value.available == 950
    assert get_instructor_profile(course_ledger.state, PROF).total_earnings == 950


@pytest.mark.parametrize("amount", [0, -10])
def test_withdraw_non_positive_amount_rejected(instructor_ledger, amount):
    with pytest.raises(InvalidInputError) as exc:
        instructor_ledger.call("withdraw_earnings", PROF, amount)
    assert exc.value.reason == "invalid_amount"
