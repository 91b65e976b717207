"""Enrollment & Certification — tests for the per (student, course) lifecycle.

Tests cover:
    - enroll round-trip values and the order of enrollment preconditions
    - update_progress bounds and last_accessed refresh
    - complete_course / generate_certificate / rate_course state machine
    - rating running averages on course and instructor
"""

import pytest

from elearn.core.catalog import get_course
from elearn.core.domain_types import Account, CourseId, EnrollmentStatus
from elearn.core.enrollment import enrollment_status, get_enrollment, running_average
from elearn.core.errors import (
    AlreadyExistsError, ErrorCode, InvalidInputError, ResourceNotFoundError,
    UnauthorizedError,
)
from elearn.core.profiles import get_instructor_profile, get_student_profile

ALICE = Account("alice")
BOB = Account("bob")
PROF = Account("prof")
COURSE = CourseId(1)


def _complete(ledger, student=ALICE, course_id=COURSE):
    ledger.call("enroll_in_course", student, course_id)
    ledger.call("complete_course", student, course_id)


# ─── enroll_in_course ────────────────────────────────────────────

def test_enroll_round_trip(course_ledger):
    assert course_ledger.call("enroll_in_course", ALICE, COURSE) is True
    seq = course_ledger.sequence_number
    enrollment = get_enrollment(course_ledger.state, ALICE, COURSE)
    assert enrollment.enrolled_at == seq
    assert enrollment.last_accessed == seq
    assert enrollment.completed is False
    assert enrollment.progress == 0
    assert enrollment.rating is None
    assert enrollment.completion_certificate is None


def test_enroll_updates_counters(course_ledger):
    course_ledger.call("enroll_in_course", ALICE, COURSE)
    assert get_course(course_ledger.state, COURSE).total_students == 1
    assert get_instructor_profile(course_ledger.state, PROF).total_students == 1
    assert get_student_profile(course_ledger.state, ALICE).total_spent == 1000


def test_enroll_missing_course_not_found(course_ledger):
    with pytest.raises(ResourceNotFoundError) as exc:
        course_ledger.call("enroll_in_course", ALICE, CourseId(99))
    assert exc.value.reason == "course_not_found"


def test_enroll_without_student_profile_not_found(course_ledger):
    with pytest.raises(ResourceNotFoundError) as exc:
        course_ledger.call("enroll_in_course", BOB, COURSE)
    assert exc.value.code == ErrorCode.NOT_FOUND
    assert exc.value.reason == "student_profile_not_found"


def test_enroll_inactive_course_unauthorized(course_ledger):
    course_ledger.call("set_course_active", PROF, COURSE, False)
    with pytest.raises(UnauthorizedError) as exc:
        course_ledger.call("enroll_in_course", ALICE, COURSE)
    assert exc.value.reason == "course_inactive"


def test_enroll_twice_rejected_without_double_charge(course_ledger):
    course_ledger.call("enroll_in_course", ALICE, COURSE)
    with pytest.raises(AlreadyExistsError):
        course_ledger.call("enroll_in_course", ALICE, COURSE)
    assert get_student_profile(course_ledger.state, ALICE).total_spent == 1000
    assert get_course(course_ledger.state, COURSE).total_students == 1


def test_enroll_requires_completed_prerequisites(course_ledger):
    advanced = course_ledger.call(
        "create_course", PROF, "Advanced", 500, "QmAdv", "cs", "", [COURSE],
    )
    with pytest.raises(UnauthorizedError) as exc:
        course_ledger.call("enroll_in_course", ALICE, advanced)
    assert exc.value.reason == "prerequisites_incomplete"

    course_ledger.call("enroll_in_course", ALICE, COURSE)
    with pytest.raises(UnauthorizedError):
        course_ledger.call("enroll_in_course", ALICE, advanced)

    course_ledger.call("complete_course", ALICE, COURSE)
    assert course_ledger.call("enroll_in_course", ALICE, advanced) is True


def test_enrollment_status_transitions(course_ledger):
    state = course_ledger.state
    assert enrollment_status(state, ALICE, COURSE) == EnrollmentStatus.NOT_ENROLLED
    course_ledger.call("enroll_in_course", ALICE, COURSE)
    assert enrollment_status(state, ALICE, COURSE) == EnrollmentStatus.ENROLLED
    course_ledger.call("complete_course", ALICE, COURSE)
    assert enrollment_status(state, ALICE, COURSE) == EnrollmentStatus.COMPLETED


# ─── update_progress ─────────────────────────────────────────────

def test_update_progress_without_enrollment_not_found(course_ledger):
    with pytest.raises(ResourceNotFoundError):
        course_ledger.call("update_progress", ALICE, COURSE, 10)


def test_update_progress_sets_exact_value(course_ledger):
    course_ledger.call("enroll_in_course", ALICE, COURSE)
    course_ledger.call("update_progress", ALICE, COURSE, 40)
    course_ledger.call("update_progress", ALICE, COURSE, 25)
    enrollment = get_enrollment(course_ledger.state, ALICE, COURSE)
    assert enrollment.progress == 25
    assert enrollment.last_accessed == course_ledger.sequence_number
    assert enrollment.completed is False


@pytest.mark.parametrize("percent", [-1, 101])
def test_update_progress_out_of_range_rejected(course_ledger, percent):
    course_ledger.call("enroll_in_course", ALICE, COURSE)
    with pytest.raises(InvalidInputError) as exc:
        course_ledger.call("update_progress", ALICE, COURSE, percent)
    assert exc.value.code == ErrorCode.UNAUTHORIZED


def test_full_progress_does_not_complete(course_ledger):
    course_ledger.call("enroll_in_course", ALICE, COURSE)
    course_ledger.call("update_progress", ALICE, COURSE, 100)
    assert get_enrollment(course_ledger.state, ALICE, COURSE).completed is False


# ─── complete_course / generate_certificate ──────────────────────

def test_complete_course_increments_completed_courses(course_ledger):
    _complete(course_ledger)
    assert get_enrollment(course_ledger.state, ALICE, COURSE).completed is True
    assert get_student_profile(course_ledger.state, ALICE).completed_courses == 1


def test_complete_twice_rejected(course_ledger):
    _complete(course_ledger)
    with pytest.raises(AlreadyExistsError):
        course_ledger.call("complete_course", ALICE, COURSE)
    assert get_student_profile(course_ledger.state, ALICE).completed_courses == 1


def test_complete_without_enrollment_not_found(course_ledger):
    with pytest.raises(ResourceNotFoundError):
        course_ledger.call("complete_course", ALICE, COURSE)


def test_certificate_after_completion(course_ledger):
    _complete(course_ledger)
    course_ledger.call("generate_certificate", ALICE, COURSE, "QmCert")
    enrollment = get_enrollment(course_ledger.state, ALICE, COURSE)
    assert enrollment.completion_certificate == "QmCert"


def test_certificate_before_completion_unauthorized(course_ledger):
    course_ledger.call("enroll_in_course", ALICE, COURSE)
    with pytest.raises(UnauthorizedError) as exc:
        course_ledger.call("generate_certificate", ALICE, COURSE, "QmCert")
    assert exc.value.reason == "course_not_completed"


def test_certificate_without_enrollment_not_found(course_ledger):
    with pytest.raises(ResourceNotFoundError):
        course_ledger.call("generate_certificate", ALICE, COURSE, "QmCert")


def test_certificate_stored_once(course_ledger):
    _complete(course_ledger)
    course_ledger.call("generate_certificate", ALICE, COURSE, "QmCert")
    with pytest.raises(AlreadyExistsError):
        course_ledger.call("generate_certificate", ALICE, COURSE, "QmOther")
    enrollment = get_enrollment(course_ledger.state, ALICE, COURSE)
    assert enrollment.completion_certificate == "QmCert"


# ─── rate_course ─────────────────────────────────────────────────

def test_running_average_integer():
    assert running_average(0, 0, 5) == 5
    assert running_average(5, 1, 2) == 3
    assert running_average(3, 2, 4) == 3


def test_rate_course_updates_course_and_instructor(course_ledger):
    course_ledger.call("create_student_profile", BOB, "Bob")
    _complete(course_ledger, ALICE)
    _complete(course_ledger, BOB)
    course_ledger.call("rate_course", ALICE, COURSE, 5)
    course_ledger.call("rate_course", BOB, COURSE, 2)

    course = get_course(course_ledger.state, COURSE)
    assert (course.average_rating, course.total_ratings) == (3, 2)
    instructor = get_instructor_profile(course_ledger.state, PROF)
    assert (instructor.rating, instructor.total_reviews) == (3, 2)
    assert get_enrollment(course_ledger.state, ALICE, COURSE).rating == 5


def test_rate_before_completion_unauthorized(course_ledger):
    course_ledger.call("enroll_in_course", ALICE, COURSE)
    with pytest.raises(UnauthorizedError):
        course_ledger.call("rate_course", ALICE, COURSE, 4)


@pytest.mark.parametrize("rating", [0, 6])
def test_rating_out_of_range_rejected(course_ledger, rating):
    _complete(course_ledger)
    with pytest.raises(InvalidInputError) as exc:
        course_ledger.call("rate_course", ALICE, COURSE, rating)
    assert exc.value.reason == "invalid_rating"


def test_rate_twice_rejected(course_ledger):
    _complete(course_ledger)
    course_ledger.call("rate_course", ALICE, COURSE, 4)
    with pytest.raises(AlreadyExistsError):
        course_ledger.call("rate_course", ALICE, COURSE, 1)
    assert get_course(course_ledger.state, COURSE).total_ratings == 1
