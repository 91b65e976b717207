"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - Account is an opaque, pre-authenticated caller identity (equality only)
    - CourseId and PostId are allocated from platform counters starting at 1, never reused
    - SequenceNumber is supplied by the host ledger, one per committed operation
    - Composite keys (EnrollmentKey, PostKey) are named tuples: hashable, ordered, collision-free
    - All valid states encoded as Enums: no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NamedTuple, NewType


# ─── Identity Types ──────────────────────────────────────────────

Account = NewType("Account", str)
CourseId = NewType("CourseId", int)
PostId = NewType("PostId", int)
SequenceNumber = NewType("SequenceNumber", int)

# Escrow account that receives enrollment payments and pays out withdrawals
PLATFORM_ACCOUNT = Account("platform")


class EnrollmentKey(NamedTuple):
    """Key of the enrollments table: one row per (student, course)."""
    student: Account
    course_id: CourseId


class PostKey(NamedTuple):
    """Key of the discussion_posts table."""
    course_id: CourseId
    post_id: PostId


# ─── Value Bounds ────────────────────────────────────────────────

DEFAULT_PLATFORM_FEE = 5
MAX_FEE_PERCENTAGE = 100
MAX_PROGRESS = 100
MIN_RATING = 1
MAX_RATING = 5
FIRST_ID = 1
MAX_ACCOUNT_LENGTH = 128
# Money columns are BIGINT; prices and every running balance stay within it
MAX_BALANCE = 2**63 - 1
MAX_PRICE = MAX_BALANCE


# ─── Enums ───────────────────────────────────────────────────────

class Role(str, Enum):
    """Roles an account can hold; one account may hold several."""
    OWNER = "owner"
    INSTRUCTOR = "instructor"
    STUDENT = "student"
    ENROLLED_STUDENT = "enrolled_student"
    UNAUTHENTICATED = "unauthenticated"


class EnrollmentStatus(str, Enum):
    """Per (student, course) lifecycle. No transition back to NOT_ENROLLED."""
    NOT_ENROLLED = "not_enrolled"
    ENROLLED = "enrolled"
    COMPLETED = "completed"


class Table(str, Enum):
    """Logical tables of the persisted ledger state."""
    STUDENT_PROFILES = "student_profiles"
    INSTRUCTOR_PROFILES = "instructor_profiles"
    COURSES = "courses"
    ENROLLMENTS = "enrollments"
    DISCUSSION_POSTS = "discussion_posts"


class TransferKind(str, Enum):
    """Transfer intents handed to the host ledger."""
    ENROLLMENT_PAYMENT = "enrollment_payment"
    WITHDRAWAL = "withdrawal"
