"""Identity & Profile Registry — tests for student/instructor profiles and achievements.

Tests cover:
    - create_student_profile stores zeroed counters and joined_at = sequence number
    - duplicate profiles rejected with AlreadyExists, first data kept
    - update_student_preferences replaces wholesale; NotFound without a profile
    - award_achievement: owner appends, non-owner Unauthorized, missing student NotFound
    - unauthenticated callers rejected
"""

import pytest

from elearn.core.domain_types import Account
from elearn.core.errors import (
    AlreadyExistsError, ErrorCode, ResourceNotFoundError, UnauthorizedError,
)
from elearn.core.profiles import get_instructor_profile, get_student_profile

OWNER = Account("deployer")
ALICE = Account("alice")
PROF = Account("prof")


# ─── create_student_profile ──────────────────────────────────────

def test_create_student_profile_initial_values(ledger):
    assert ledger.call("create_student_profile", ALICE, "Alice") is True
    profile = get_student_profile(ledger.state, ALICE)
    assert profile.name == "Alice"
    assert profile.completed_courses == 0
    assert profile.total_spent == 0
    assert profile.achievements == []
    assert profile.preferences == []
    assert profile.joined_at == ledger.sequence_number


def test_duplicate_student_profile_rejected_and_first_kept(ledger):
    ledger.call("create_student_profile", ALICE, "Alice")
    with pytest.raises(AlreadyExistsError) as exc:
        ledger.call("create_student_profile", ALICE, "Impostor")
    assert exc.value.code == ErrorCode.ALREADY_EXISTS
    assert get_student_profile(ledger.state, ALICE).name == "Alice"


def test_create_student_profile_requires_caller(ledger):
    with pytest.raises(UnauthorizedError) as exc:
        ledger.call("create_student_profile", None, "Nobody")
    assert exc.value.reason == "unauthenticated"
    assert ledger.state.student_profiles == {}


def test_get_student_profile_absent_returns_none(ledger):
    assert get_student_profile(ledger.state, ALICE) is None


# ─── update_student_preferences ──────────────────────────────────

def test_update_preferences_without_profile_not_found(ledger):
    with pytest.raises(ResourceNotFoundError) as exc:
        ledger.call("update_student_preferences", ALICE, ["math"])
    assert exc.value.code == ErrorCode.NOT_FOUND


def test_update_preferences_replaces_wholesale(ledger):
    ledger.call("create_student_profile", ALICE, "Alice")
    ledger.call("update_student_preferences", ALICE, ["math", "art"])
    ledger.call("update_student_preferences", ALICE, ["music"])
    assert get_student_profile(ledger.state, ALICE).preferences == ["music"]


def test_update_preferences_can_clear(ledger):
    ledger.call("create_student_profile", ALICE, "Alice")
    ledger.call("update_student_preferences", ALICE, ["math"])
    ledger.call("update_student_preferences", ALICE, [])
    assert get_student_profile(ledger.state, ALICE).preferences == []


# ─── create_instructor_profile ───────────────────────────────────

def test_create_instructor_profile_zeroed(ledger):
    ledger.call(
        "create_instructor_profile", PROF, "Prof", "PhD", "Bio", ["https://x.y"],
    )
    profile = get_instructor_profile(ledger.state, PROF)
    assert profile.credentials == "PhD"
    assert profile.social_links == ["https://x.y"]
    assert (profile.rating, profile.total_reviews) == (0, 0)
    assert (profile.total_students, profile.total_earnings) == (0, 0)


def test_duplicate_instructor_profile_rejected(ledger):
    ledger.call("create_instructor_profile", PROF, "Prof", "PhD", "Bio", [])
    with pytest.raises(AlreadyExistsError):
        ledger.call("create_instructor_profile", PROF, "Other", "MSc", "", [])
    assert get_instructor_profile(ledger.state, PROF).name == "Prof"


def test_account_may_hold_both_profiles(ledger):
    ledger.call("create_instructor_profile", PROF, "Prof", "PhD", "", [])
    ledger.call("create_student_profile", PROF, "Prof as student")
    assert get_student_profile(ledger.state, PROF) is not None
    assert get_instructor_profile(ledger.state, PROF) is not None


# ─── award_achievement ───────────────────────────────────────────

def test_owner_awards_achievement_in_order(ledger):
    ledger.call("create_student_profile", ALICE, "Alice")
    ledger.call("award_achievement", OWNER, ALICE, "First steps")
    ledger.call("award_achievement", OWNER, ALICE, "Finisher")
    assert get_student_profile(ledger.state, ALICE).achievements == [
        "First steps", "Finisher",
    ]


def test_non_owner_cannot_award(ledger):
    ledger.call("create_student_profile", ALICE, "Alice")
    with pytest.raises(UnauthorizedError) as exc:
        ledger.call("award_achievement", ALICE, ALICE, "Self-made")
    assert exc.value.reason == "not_owner"
    assert get_student_profile(ledger.state, ALICE).achievements == []


def test_award_to_missing_student_not_found(ledger):
    with pytest.raises(ResourceNotFoundError):
        ledger.call("award_achievement", OWNER, ALICE, "Ghost")
