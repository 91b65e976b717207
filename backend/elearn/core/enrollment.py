"""Enrollment & Certification — per (student, course) lifecycle.

Invariants:
    - NOT_ENROLLED -> ENROLLED -> COMPLETED; nothing moves backwards
    - At most one Enrollment per (student, course)
    - progress is any value in 0..100 and does not itself complete the course
    - completed is one-way; a certificate needs completed and is stored once
    - A rating needs completed, is 1..5 and is stored once

Design Decisions:
    - Enrollment checks run in the order course -> profile -> active -> duplicate ->
      prerequisites -> balance capacity, so the first failing precondition decides
      the error code
    - Repeating complete/certify/rate is rejected with AlreadyExists instead of
      being a silent no-op
    - Ratings use an integer running average, (avg * n + r) // (n + 1), matching the
      integer fields of the records
"""

from elearn.core.access_control import check_authenticated
from elearn.core.catalog import check_course_exists
from elearn.core.domain_types import (
    Account, CourseId, EnrollmentKey, EnrollmentStatus, Table,
    MAX_PROGRESS, MIN_RATING, MAX_RATING,
)
from elearn.core.errors import (
    AlreadyExistsError, ElearnError, InvalidInputError, ResourceNotFoundError,
    UnauthorizedError,
)
from elearn.core.ledger_state import Course, Enrollment
from elearn.core.ledger_transaction import LedgerTransaction
from elearn.core.profiles import check_student_exists
from elearn.core.repository_protocols import LedgerReader
from elearn.core.settlement import check_accrual_capacity, settle_enrollment


def enrollment_status(
    reader: LedgerReader, student: Account, course_id: CourseId,
) -> EnrollmentStatus:
    enrollment = reader.get(Table.ENROLLMENTS, EnrollmentKey(student, course_id))
    if enrollment is None:
        return EnrollmentStatus.NOT_ENROLLED
    if enrollment.completed:
        return EnrollmentStatus.COMPLETED
    return EnrollmentStatus.ENROLLED


def running_average(average: int, count: int, rating: int) -> int:
    return (average * count + rating) // (count + 1)


# ─── Checks ──────────────────────────────────────────────────────

def check_course_active(course: Course, course_id: CourseId) -> ElearnError | None:
    if not course.is_active:
        return UnauthorizedError(
            f"Course {course_id} is not accepting enrollments", reason="course_inactive",
        )
    return None


def check_not_enrolled(
    reader: LedgerReader, student: Account, course_id: CourseId,
) -> ElearnError | None:
    if reader.get(Table.ENROLLMENTS, EnrollmentKey(student, course_id)) is not None:
        return AlreadyExistsError("Enrollment", f"{student}/{course_id}")
    return None


def check_prerequisites_completed(
    reader: LedgerReader, student: Account, course: Course,
) -> ElearnError | None:
    missing = [
        prerequisite for prerequisite in course.prerequisites
        if enrollment_status(reader, student, prerequisite) != EnrollmentStatus.COMPLETED
    ]
    if missing:
        return UnauthorizedError(
            f"Prerequisite courses not completed: {missing}",
            reason="prerequisites_incomplete",
        )
    return None


def check_enrollment_exists(
    reader: LedgerReader, student: Account | None, course_id: CourseId,
) -> ElearnError | None:
    if not student or reader.get(Table.ENROLLMENTS, EnrollmentKey(student, course_id)) is None:
        return ResourceNotFoundError("Enrollment", f"{student}/{course_id}")
    return None


def check_completed(enrollment: Enrollment, course_id: CourseId) -> ElearnError | None:
    if not enrollment.completed:
        return UnauthorizedError(
            f"Course {course_id} has not been completed", reason="course_not_completed",
        )
    return None


def check_progress(percent: int) -> ElearnError | None:
    if not 0 <= percent <= MAX_PROGRESS:
        return InvalidInputError(
            f"Progress must be between 0 and {MAX_PROGRESS}, got {percent}", "progress",
        )
    return None


def check_rating(rating: int) -> ElearnError | None:
    if not MIN_RATING <= rating <= MAX_RATING:
        return InvalidInputError(
            f"Rating must be between {MIN_RATING} and {MAX_RATING}, got {rating}", "rating",
        )
    return None


def _require_enrollment(
    tx: LedgerTransaction, caller: Account | None, course_id: CourseId,
) -> tuple[EnrollmentKey, Enrollment]:
    error = check_authenticated(caller) or check_enrollment_exists(tx, caller, course_id)
    if error:
        raise error
    key = EnrollmentKey(caller, course_id)
    return key, tx.get(Table.ENROLLMENTS, key)


# ─── Operations ──────────────────────────────────────────────────

def enroll_in_course(tx: LedgerTransaction, caller: Account | None, course_id: CourseId) -> bool:
    error = (
        check_authenticated(caller)
        or check_course_exists(tx, course_id)
        or check_student_exists(tx, caller)
    )
    if error:
        raise error
    course = tx.get(Table.COURSES, course_id)
    error = (
        check_course_active(course, course_id)
        or check_not_enrolled(tx, caller, course_id)
        or check_prerequisites_completed(tx, caller, course)
        or check_accrual_capacity(tx, tx.get(Table.STUDENT_PROFILES, caller), course)
    )
    if error:
        raise error

    seq = tx.sequence_number
    tx.put(
        Table.ENROLLMENTS, EnrollmentKey(caller, course_id),
        Enrollment(enrolled_at=seq, last_accessed=seq),
    )
    course.total_students += 1
    tx.put(Table.COURSES, course_id, course)

    student = tx.get(Table.STUDENT_PROFILES, caller)
    student.total_spent += course.price
    tx.put(Table.STUDENT_PROFILES, caller, student)

    settle_enrollment(tx, caller, course)
    return True


def update_progress(
    tx: LedgerTransaction, caller: Account | None, course_id: CourseId, percent: int,
) -> bool:
    key, enrollment = _require_enrollment(tx, caller, course_id)
    error = check_progress(percent)
    if error:
        raise error
    enrollment.progress = percent
    enrollment.last_accessed = tx.sequence_number
    tx.put(Table.ENROLLMENTS, key, enrollment)
    return True


def complete_course(tx: LedgerTransaction, caller: Account | None, course_id: CourseId) -> bool:
    key, enrollment = _require_enrollment(tx, caller, course_id)
    if enrollment.completed:
        raise AlreadyExistsError("Course completion", f"{caller}/{course_id}")
    enrollment.completed = True
    tx.put(Table.ENROLLMENTS, key, enrollment)

    # enrolling required a profile, and profiles are never deleted
    student = tx.get(Table.STUDENT_PROFILES, caller)
    student.completed_courses += 1
    tx.put(Table.STUDENT_PROFILES, caller, student)
    return True


def generate_certificate(
    tx: LedgerTransaction, caller: Account | None, course_id: CourseId, certificate_hash: str,
) -> bool:
    key, enrollment = _require_enrollment(tx, caller, course_id)
    error = check_completed(enrollment, course_id)
    if error:
        raise error
    if enrollment.completion_certificate is not None:
        raise AlreadyExistsError("Certificate", f"{caller}/{course_id}")
    enrollment.completion_certificate = certificate_hash
    tx.put(Table.ENROLLMENTS, key, enrollment)
    return True


def rate_course(
    tx: LedgerTransaction, caller: Account | None, course_id: CourseId, rating: int,
) -> bool:
    key, enrollment = _require_enrollment(tx, caller, course_id)
    error = check_completed(enrollment, course_id) or check_rating(rating)
    if error:
        raise error
    if enrollment.rating is not None:
        raise AlreadyExistsError("Rating", f"{caller}/{course_id}")

    enrollment.rating = rating
    tx.put(Table.ENROLLMENTS, key, enrollment)

    course = tx.get(Table.COURSES, course_id)
    course.average_rating = running_average(course.average_rating, course.total_ratings, rating)
    course.total_ratings += 1
    tx.put(Table.COURSES, course_id, course)

    instructor = tx.get(Table.INSTRUCTOR_PROFILES, course.instructor)
    instructor.rating = running_average(instructor.rating, instructor.total_reviews, rating)
    instructor.total_reviews += 1
    tx.put(Table.INSTRUCTOR_PROFILES, course.instructor, instructor)
    return True


def get_enrollment(
    reader: LedgerReader, student: Account, course_id: CourseId,
) -> Enrollment | None:
    return reader.get(Table.ENROLLMENTS, EnrollmentKey(student, course_id))
