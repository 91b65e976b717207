"""Ledger Transaction — tests for staging, atomicity and sequence numbering.

Tests cover:
    - reads see staged writes; the base is untouched until apply
    - commit closes the transaction
    - a rejected operation leaves state and sequence number unchanged
    - reads never mutate and are repeatable
"""

import pytest

from elearn.core.domain_types import Account, CourseId, SequenceNumber, Table
from elearn.core.errors import ElearnError
from elearn.core.ledger_state import LedgerState, StudentProfile
from elearn.core.ledger_transaction import (
    LedgerTransaction, TransactionClosedError, run_operation,
)
from elearn.core.operations import OPERATIONS, get_operation
from elearn.core.profiles import get_student_profile

OWNER = Account("deployer")
ALICE = Account("alice")
COURSE = CourseId(1)


def test_staged_write_visible_to_transaction_only():
    base = LedgerState.genesis(OWNER)
    tx = LedgerTransaction(base, SequenceNumber(1))
    tx.put(Table.STUDENT_PROFILES, ALICE, StudentProfile(name="Alice", joined_at=1))
    assert tx.get(Table.STUDENT_PROFILES, ALICE).name == "Alice"
    assert base.get(Table.STUDENT_PROFILES, ALICE) is None


def test_staged_record_is_copied():
    base = LedgerState.genesis(OWNER)
    tx = LedgerTransaction(base, SequenceNumber(1))
    profile = StudentProfile(name="Alice", joined_at=1)
    tx.put(Table.STUDENT_PROFILES, ALICE, profile)
    profile.name = "Mallory"
    assert tx.get(Table.STUDENT_PROFILES, ALICE).name == "Alice"


def test_commit_closes_transaction():
    tx = LedgerTransaction(LedgerState.genesis(OWNER), SequenceNumber(1))
    changes = tx.commit()
    assert changes.is_empty
    with pytest.raises(TransactionClosedError):
        tx.get_config()


def test_run_operation_does_not_touch_base():
    base = LedgerState.genesis(OWNER)
    result, changes = run_operation(
        base, SequenceNumber(1), get_operation("create_student_profile"), ALICE, "Alice",
    )
    assert result is True
    assert base.student_profiles == {}
    assert ALICE in changes.writes[Table.STUDENT_PROFILES]


def test_sequence_number_advances_per_committed_operation(ledger):
    ledger.call("create_student_profile", ALICE, "Alice")
    ledger.call("update_student_preferences", ALICE, ["x"])
    assert ledger.sequence_number == 2


def test_failed_operation_changes_nothing(course_ledger):
    course_ledger.call("enroll_in_course", ALICE, COURSE)
    before = course_ledger.sequence_number
    snapshot = course_ledger.state.get(Table.STUDENT_PROFILES, ALICE)
    with pytest.raises(ElearnError):
        course_ledger.call("enroll_in_course", ALICE, COURSE)
    assert course_ledger.sequence_number == before
    assert course_ledger.state.get(Table.STUDENT_PROFILES, ALICE) == snapshot
    assert len(course_ledger.state.transfers) == 1


def test_reads_are_repeatable_and_do_not_mutate(course_ledger):
    first = get_student_profile(course_ledger.state, ALICE)
    first.preferences.append("tampered")
    second = get_student_profile(course_ledger.state, ALICE)
    assert second.preferences == []
    assert get_student_profile(course_ledger.state, ALICE) == second


def test_unknown_operation():
    with pytest.raises(KeyError):
        get_operation("transfer_ownership")


def test_registry_lists_every_mutation():
    assert len(OPERATIONS) == 16
