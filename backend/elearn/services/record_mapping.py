"""Record Mapping — conversion between core records and ORM rows.

Invariants:
    - Record fields and row columns share names; keys map through TABLE_MAPPINGS
    - Conversions copy list/JSON values, so a record never aliases a row

Design Decisions:
    - One explicit mapping per table over reflection on class names
      (ADR: ExMA no convention-over-config)
"""

import copy
from dataclasses import asdict, dataclass, fields
from typing import Callable

from elearn.core.domain_types import (
    Account, CourseId, PostId, SequenceNumber, Table,
)
from elearn.core.ledger_state import (
    Course, DiscussionPost, Enrollment, InstructorProfile, PlatformConfig, StudentProfile,
)
from elearn.db.base import Base
from elearn.models import (
    CourseRow, DiscussionPostRow, EnrollmentRow, InstructorProfileRow,
    PlatformConfigRow, StudentProfileRow,
)


@dataclass(frozen=True)
class TableMapping:
    row_type: type[Base]
    record_type: type
    key_columns: Callable[[object], dict]
    # SQLAlchemy identity for session.get(): scalar or tuple in PK column order
    identity: Callable[[object], object]


TABLE_MAPPINGS: dict[Table, TableMapping] = {
    Table.STUDENT_PROFILES: TableMapping(
        StudentProfileRow, StudentProfile,
        key_columns=lambda key: {"account": key},
        identity=lambda key: key,
    ),
    Table.INSTRUCTOR_PROFILES: TableMapping(
        InstructorProfileRow, InstructorProfile,
        key_columns=lambda key: {"account": key},
        identity=lambda key: key,
    ),
    Table.COURSES: TableMapping(
        CourseRow, Course,
        key_columns=lambda key: {"id": key},
        identity=lambda key: key,
    ),
    Table.ENROLLMENTS: TableMapping(
        EnrollmentRow, Enrollment,
        key_columns=lambda key: {"student": key.student, "course_id": key.course_id},
        identity=lambda key: (key.student, key.course_id),
    ),
    Table.DISCUSSION_POSTS: TableMapping(
        DiscussionPostRow, DiscussionPost,
        key_columns=lambda key: {"course_id": key.course_id, "post_id": key.post_id},
        identity=lambda key: (key.course_id, key.post_id),
    ),
}


def record_from_row(table: Table, row: Base):
    mapping = TABLE_MAPPINGS[table]
    return mapping.record_type(**{
        f.name: copy.deepcopy(getattr(row, f.name))
        for f in fields(mapping.record_type)
    })


def row_from_record(table: Table, key: object, record: object) -> Base:
    mapping = TABLE_MAPPINGS[table]
    return mapping.row_type(**mapping.key_columns(key), **asdict(record))


def config_from_row(row: PlatformConfigRow) -> PlatformConfig:
    return PlatformConfig(
        owner=Account(row.owner),
        fee_percentage=row.fee_percentage,
        next_course_id=CourseId(row.next_course_id),
        next_post_id=PostId(row.next_post_id),
        total_fees_collected=row.total_fees_collected,
    )


def copy_config_to_row(
    config: PlatformConfig, row: PlatformConfigRow, sequence_number: SequenceNumber,
) -> None:
    """Write the mutable config fields and the committed sequence number onto the row."""
    row.fee_percentage = config.fee_percentage
    row.next_course_id = config.next_course_id
    row.next_post_id = config.next_post_id
    row.total_fees_collected = config.total_fees_collected
    row.sequence_number = sequence_number
