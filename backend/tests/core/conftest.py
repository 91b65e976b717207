"""Core test fixtures — a fresh in-memory ledger with a few standard accounts."""

import pytest

from elearn.core.domain_types import Account
from elearn.core.ledger import Ledger

OWNER = Account("deployer")
ALICE = Account("alice")
BOB = Account("bob")
PROF = Account("prof")


@pytest.fixture
def ledger() -> Ledger:
    return Ledger(OWNER)


@pytest.fixture
def instructor_ledger(ledger) -> Ledger:
    """Ledger with PROF registered as an instructor."""
    ledger.call("create_instructor_profile", PROF, "Prof", "PhD", "Teaches things", [])
    return ledger


@pytest.fixture
def course_ledger(instructor_ledger) -> Ledger:
    """PROF teaches course 1 (price 1000); ALICE holds a student profile."""
    instructor_ledger.call(
        "create_course", PROF, "Intro", 1000, "QmIntro", "cs", "Basics", [],
    )
    instructor_ledger.call("create_student_profile", ALICE, "Alice")
    return instructor_ledger
