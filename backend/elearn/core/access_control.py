"""Access Control — resolves the caller's roles and enforces per-operation requirements.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - check_* return an error on violation, None on success: callers chain with `or`,
      so the first error wins
    - An empty or missing caller is UNAUTHENTICATED and fails every requirement
    - The owner is whoever PlatformConfig names; there is no transfer of ownership

Design Decisions:
    - Return errors (not raise) from checks: operations decide when to raise, after
      every precondition of that operation has been evaluated in order
"""

from elearn.core.domain_types import Account, CourseId, EnrollmentKey, Role, Table
from elearn.core.errors import ElearnError, UnauthorizedError
from elearn.core.ledger_state import Course
from elearn.core.repository_protocols import LedgerReader


def roles_of(
    reader: LedgerReader, caller: Account | None, course_id: CourseId | None = None,
) -> frozenset[Role]:
    """Every role the caller currently holds (for the course, when given)."""
    if not caller:
        return frozenset({Role.UNAUTHENTICATED})
    roles = set()
    if reader.get_config().owner == caller:
        roles.add(Role.OWNER)
    if reader.get(Table.INSTRUCTOR_PROFILES, caller) is not None:
        roles.add(Role.INSTRUCTOR)
    if reader.get(Table.STUDENT_PROFILES, caller) is not None:
        roles.add(Role.STUDENT)
    if course_id is not None and reader.get(
        Table.ENROLLMENTS, EnrollmentKey(caller, course_id),
    ) is not None:
        roles.add(Role.ENROLLED_STUDENT)
    return frozenset(roles)


def check_authenticated(caller: Account | None) -> ElearnError | None:
    """Any-account requirement: the caller must be identified."""
    if not caller:
        return UnauthorizedError(
            "An authenticated account is required", reason="unauthenticated",
        )
    return None


def check_owner(reader: LedgerReader, caller: Account | None) -> ElearnError | None:
    """Owner-only requirement."""
    if not caller or reader.get_config().owner != caller:
        return UnauthorizedError(
            "Only the platform owner may perform this operation", reason="not_owner",
        )
    return None


def check_instructor(reader: LedgerReader, caller: Account | None) -> ElearnError | None:
    """Instructor-only requirement: caller holds an InstructorProfile."""
    if not caller or reader.get(Table.INSTRUCTOR_PROFILES, caller) is None:
        return UnauthorizedError(
            "Caller has no instructor profile", reason="not_instructor",
        )
    return None


def check_instructor_of_record(
    course: Course, caller: Account | None,
) -> ElearnError | None:
    """Only the course's own instructor may edit it."""
    if not caller or course.instructor != caller:
        return UnauthorizedError(
            "Only the course instructor may modify this course",
            reason="not_course_instructor",
        )
    return None


def check_enrolled(
    reader: LedgerReader, caller: Account | None, course_id: CourseId,
) -> ElearnError | None:
    """Enrolled-student requirement for the given course."""
    if not caller or reader.get(
        Table.ENROLLMENTS, EnrollmentKey(caller, course_id),
    ) is None:
        return UnauthorizedError(
            f"Caller is not enrolled in course {course_id}", reason="not_enrolled",
        )
    return None
