"""Identity & Profile Registry — student/instructor profiles and the achievement registry.

Invariants:
    - At most one StudentProfile and one InstructorProfile per account; never deleted
    - Preferences are replaced wholesale, never merged
    - Achievements are append-only and only the platform owner appends
    - Reads return a copy or None, never raise

Design Decisions:
    - Duplicate instructor profiles rejected exactly like student profiles
      (AlreadyExists), rather than silently overwriting
"""

from elearn.core.access_control import check_authenticated, check_owner
from elearn.core.domain_types import Account, Table
from elearn.core.errors import AlreadyExistsError, ElearnError, ResourceNotFoundError
from elearn.core.ledger_state import InstructorProfile, StudentProfile
from elearn.core.ledger_transaction import LedgerTransaction
from elearn.core.repository_protocols import LedgerReader


def check_student_absent(reader: LedgerReader, account: Account) -> ElearnError | None:
    if reader.get(Table.STUDENT_PROFILES, account) is not None:
        return AlreadyExistsError("Student profile", account)
    return None


def check_student_exists(reader: LedgerReader, account: Account | None) -> ElearnError | None:
    if not account or reader.get(Table.STUDENT_PROFILES, account) is None:
        return ResourceNotFoundError("Student profile", account)
    return None


def check_instructor_absent(reader: LedgerReader, account: Account) -> ElearnError | None:
    if reader.get(Table.INSTRUCTOR_PROFILES, account) is not None:
        return AlreadyExistsError("Instructor profile", account)
    return None


def check_instructor_exists(reader: LedgerReader, account: Account | None) -> ElearnError | None:
    if not account or reader.get(Table.INSTRUCTOR_PROFILES, account) is None:
        return ResourceNotFoundError("Instructor profile", account)
    return None


# ─── Operations ──────────────────────────────────────────────────

def create_student_profile(tx: LedgerTransaction, caller: Account | None, name: str) -> bool:
    error = check_authenticated(caller) or check_student_absent(tx, caller)
    if error:
        raise error
    tx.put(
        Table.STUDENT_PROFILES, caller,
        StudentProfile(name=name, joined_at=tx.sequence_number),
    )
    return True


def update_student_preferences(
    tx: LedgerTransaction, caller: Account | None, preferences: list[str],
) -> bool:
    error = check_authenticated(caller) or check_student_exists(tx, caller)
    if error:
        raise error
    profile = tx.get(Table.STUDENT_PROFILES, caller)
    profile.preferences = list(preferences)
    tx.put(Table.STUDENT_PROFILES, caller, profile)
    return True


def create_instructor_profile(
    tx: LedgerTransaction,
    caller: Account | None,
    name: str,
    credentials: str,
    bio: str,
    social_links: list[str],
) -> bool:
    error = check_authenticated(caller) or check_instructor_absent(tx, caller)
    if error:
        raise error
    tx.put(
        Table.INSTRUCTOR_PROFILES, caller,
        InstructorProfile(
            name=name, credentials=credentials, bio=bio,
            social_links=list(social_links),
        ),
    )
    return True


def award_achievement(
    tx: LedgerTransaction, caller: Account | None, account: Account, achievement: str,
) -> bool:
    """Owner appends `achievement` to a student's achievement list."""
    error = check_owner(tx, caller) or check_student_exists(tx, account)
    if error:
        raise error
    profile = tx.get(Table.STUDENT_PROFILES, account)
    profile.achievements.append(achievement)
    tx.put(Table.STUDENT_PROFILES, account, profile)
    return True


# ─── Reads ───────────────────────────────────────────────────────

def get_student_profile(reader: LedgerReader, account: Account) -> StudentProfile | None:
    return reader.get(Table.STUDENT_PROFILES, account)


def get_instructor_profile(reader: LedgerReader, account: Account) -> InstructorProfile | None:
    return reader.get(Table.INSTRUCTOR_PROFILES, account)
