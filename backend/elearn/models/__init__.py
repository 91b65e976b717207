"""ORM Models — SQLAlchemy declarative models for the ledger tables.

Invariants:
    - All models inherit from Base (db/base.py)
    - One table per logical ledger table; composite keys become composite primary keys
    - PlatformConfig is a single row (id = 1)

Design Decisions:
    - One file per entity for locality (ADR: ExMA max 3-4 files to understand a feature)
    - All models imported here so Base.metadata is complete before create_all / alembic
"""

from elearn.models.student_profile import StudentProfileRow  # noqa: F401
from elearn.models.instructor_profile import InstructorProfileRow  # noqa: F401
from elearn.models.course import CourseRow  # noqa: F401
from elearn.models.enrollment import EnrollmentRow  # noqa: F401
from elearn.models.discussion_post import DiscussionPostRow  # noqa: F401
from elearn.models.platform_config import PlatformConfigRow  # noqa: F401
from elearn.models.ledger_transfer import LedgerTransferRow  # noqa: F401
