"""Course Catalog — course creation, editing, activation and lookup.

Invariants:
    - Course ids come from PlatformConfig.next_course_id, start at 1, are never reused
    - The creator must hold an InstructorProfile; only that instructor edits the course
    - id, instructor, created_at and the enrollment/rating counters never change on edit
    - 0 <= price <= MAX_PRICE; every prerequisite references an existing course
"""

from dataclasses import replace

from elearn.core.access_control import (
    check_authenticated, check_instructor, check_instructor_of_record,
)
from elearn.core.domain_types import Account, CourseId, MAX_PRICE, Table
from elearn.core.errors import ElearnError, InvalidInputError, ResourceNotFoundError
from elearn.core.ledger_state import Course
from elearn.core.ledger_transaction import LedgerTransaction
from elearn.core.repository_protocols import LedgerReader

_EDITABLE_FIELDS = ("title", "price", "content_hash", "category", "description")


def check_course_exists(reader: LedgerReader, course_id: CourseId) -> ElearnError | None:
    if reader.get(Table.COURSES, course_id) is None:
        return ResourceNotFoundError("Course", course_id)
    return None


def check_price(price: int) -> ElearnError | None:
    if price < 0 or price > MAX_PRICE:
        return InvalidInputError(f"Price must be in [0, {MAX_PRICE}], got {price}", "price")
    return None


def check_prerequisites_exist(
    reader: LedgerReader, prerequisites: list[CourseId],
) -> ElearnError | None:
    for course_id in prerequisites:
        if reader.get(Table.COURSES, course_id) is None:
            return ResourceNotFoundError("Prerequisite course", course_id)
    return None


def create_course(
    tx: LedgerTransaction,
    caller: Account | None,
    title: str,
    price: int,
    content_hash: str,
    category: str,
    description: str,
    prerequisites: list[CourseId],
) -> CourseId:
    """Register a new course and return its id."""
    error = (
        check_authenticated(caller)
        or check_instructor(tx, caller)
        or check_price(price)
        or check_prerequisites_exist(tx, prerequisites)
    )
    if error:
        raise error
    config = tx.get_config()
    course_id = config.next_course_id
    tx.put(
        Table.COURSES, course_id,
        Course(
            title=title, instructor=caller, price=price,
            content_hash=content_hash, category=category,
            description=description, created_at=tx.sequence_number,
            prerequisites=list(prerequisites),
        ),
    )
    config.next_course_id = CourseId(course_id + 1)
    tx.put_config(config)
    return course_id


def update_course(
    tx: LedgerTransaction, caller: Account | None, course_id: CourseId, **changes: object,
) -> bool:
    """Edit descriptive fields and price. Unknown field names are a programming error."""
    unknown = set(changes) - set(_EDITABLE_FIELDS)
    if unknown:
        raise TypeError(f"Not editable: {sorted(unknown)}")
    error = check_authenticated(caller) or check_course_exists(tx, course_id)
    if error:
        raise error
    course = tx.get(Table.COURSES, course_id)
    error = check_instructor_of_record(course, caller)
    if error is None and changes.get("price") is not None:
        error = check_price(changes["price"])
    if error:
        raise error
    updates = {k: v for k, v in changes.items() if v is not None}
    tx.put(Table.COURSES, course_id, replace(course, **updates))
    return True


def set_course_active(
    tx: LedgerTransaction, caller: Account | None, course_id: CourseId, is_active: bool,
) -> bool:
    error = check_authenticated(caller) or check_course_exists(tx, course_id)
    if error:
        raise error
    course = tx.get(Table.COURSES, course_id)
    error = check_instructor_of_record(course, caller)
    if error:
        raise error
    course.is_active = is_active
    tx.put(Table.COURSES, course_id, course)
    return True


def get_course(reader: LedgerReader, course_id: CourseId) -> Course | None:
    return reader.get(Table.COURSES, course_id)
