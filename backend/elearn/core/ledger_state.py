"""Ledger State — records and the in-memory table layout of the marketplace.

Invariants:
    - One dict per logical table, keyed exactly as documented on Table
    - PlatformConfig is a singleton; counters start at 1 and only grow
    - Records are plain mutable dataclasses; nothing outside a LedgerTransaction
      commit may change a stored record
    - get() always returns a deep copy: readers can never mutate stored state

Design Decisions:
    - Dataclasses, not ORM rows: the core stays pure and testable without a DB
      (ADR: ExMA functional core, same split as the ORM models in models/)
    - Transfers are an append-only journal of intents; moving funds is the host's job
"""

import copy
from dataclasses import dataclass, field

from elearn.core.domain_types import (
    Account, CourseId, PostId, SequenceNumber, EnrollmentKey, PostKey,
    Table, TransferKind, DEFAULT_PLATFORM_FEE, FIRST_ID,
)


@dataclass
class StudentProfile:
    name: str
    joined_at: SequenceNumber
    completed_courses: int = 0
    total_spent: int = 0
    achievements: list[str] = field(default_factory=list)
    preferences: list[str] = field(default_factory=list)


@dataclass
class InstructorProfile:
    name: str
    credentials: str
    bio: str
    social_links: list[str] = field(default_factory=list)
    rating: int = 0
    total_reviews: int = 0
    total_students: int = 0
    total_earnings: int = 0


@dataclass
class Course:
    title: str
    instructor: Account
    price: int
    content_hash: str
    category: str
    description: str
    created_at: SequenceNumber
    prerequisites: list[CourseId] = field(default_factory=list)
    is_active: bool = True
    total_students: int = 0
    average_rating: int = 0
    total_ratings: int = 0


@dataclass
class Enrollment:
    enrolled_at: SequenceNumber
    last_accessed: SequenceNumber
    completed: bool = False
    progress: int = 0
    rating: int | None = None
    completion_certificate: str | None = None


@dataclass
class DiscussionPost:
    author: Account
    content: str
    created_at: SequenceNumber
    upvotes: int = 0


@dataclass
class PlatformConfig:
    """Singleton configuration record."""
    owner: Account
    fee_percentage: int = DEFAULT_PLATFORM_FEE
    next_course_id: CourseId = CourseId(FIRST_ID)
    next_post_id: PostId = PostId(FIRST_ID)
    total_fees_collected: int = 0


@dataclass(frozen=True)
class Transfer:
    """Intent to move `amount` currency units; executed by the host ledger."""
    kind: TransferKind
    sender: Account
    recipient: Account
    amount: int
    sequence_number: SequenceNumber


@dataclass
class ChangeSet:
    """Everything one committed operation wrote."""
    sequence_number: SequenceNumber
    writes: dict[Table, dict] = field(default_factory=dict)
    config: PlatformConfig | None = None
    transfers: list[Transfer] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.writes and self.config is None and not self.transfers


@dataclass
class LedgerState:
    """All persistent state of one deployed marketplace instance."""

    config: PlatformConfig
    sequence_number: SequenceNumber = SequenceNumber(0)
    student_profiles: dict[Account, StudentProfile] = field(default_factory=dict)
    instructor_profiles: dict[Account, InstructorProfile] = field(default_factory=dict)
    courses: dict[CourseId, Course] = field(default_factory=dict)
    enrollments: dict[EnrollmentKey, Enrollment] = field(default_factory=dict)
    discussion_posts: dict[PostKey, DiscussionPost] = field(default_factory=dict)
    transfers: list[Transfer] = field(default_factory=list)

    @classmethod
    def genesis(
        cls, owner: Account, fee_percentage: int = DEFAULT_PLATFORM_FEE,
    ) -> "LedgerState":
        """Fresh deployment: counters at 1, no records."""
        return cls(config=PlatformConfig(owner=owner, fee_percentage=fee_percentage))

    def table(self, name: Table) -> dict:
        return getattr(self, name.value)

    def get(self, name: Table, key: object) -> object | None:
        record = self.table(name).get(key)
        return copy.deepcopy(record) if record is not None else None

    def get_config(self) -> PlatformConfig:
        return copy.deepcopy(self.config)

    def apply(self, changes: ChangeSet) -> None:
        """Apply a committed change set. Only LedgerTransaction produces these."""
        for name, rows in changes.writes.items():
            self.table(name).update(rows)
        if changes.config is not None:
            self.config = changes.config
        self.transfers.extend(changes.transfers)
        self.sequence_number = changes.sequence_number
