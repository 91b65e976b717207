"""SQL Ledger Repository — loads operation scopes into a LedgerState and persists ChangeSets.

Invariants:
    - load() returns a LedgerState containing every record the scope can reach;
      anything absent from it is absent from the database
    - apply() writes records, config, sequence number and transfers in the caller's
      session; the caller commits once (all-or-nothing)
    - The platform_config row is created lazily on the first write, from settings

Design Decisions:
    - Scope pre-loading keeps core operations synchronous and pure
      (ADR: ExMA impureim sandwich: load -> decide -> persist)
    - load(lock=True) takes a row lock on platform_config: every operation touches
      it (sequence number), so writers serialize on one row in PostgreSQL
    - merge() over hand-written upserts: rows loaded by load() are already in the
      identity map, so merge updates them without another round-trip
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from elearn.core.domain_types import (
    Account, CourseId, EnrollmentKey, SequenceNumber, Table,
)
from elearn.core.ledger_state import ChangeSet, LedgerState, PlatformConfig
from elearn.core.repository_protocols import LedgerScope
from elearn.models import (
    CourseRow, EnrollmentRow, InstructorProfileRow, LedgerTransferRow,
    PlatformConfigRow, StudentProfileRow,
)
from elearn.models.platform_config import SINGLETON_ID
from elearn.services.record_mapping import (
    TABLE_MAPPINGS, config_from_row, copy_config_to_row, record_from_row, row_from_record,
)

logger = logging.getLogger(__name__)


class SqlLedgerRepository:
    """LedgerRepository backed by one AsyncSession."""

    def __init__(self, db: AsyncSession, owner: str, default_fee: int):
        self.db = db
        self._owner = owner
        self._default_fee = default_fee
        self._config_row: PlatformConfigRow | None = None

    # ─── Config ──────────────────────────────────────────────────

    async def _fetch_config_row(self, lock: bool) -> PlatformConfigRow | None:
        query = select(PlatformConfigRow).where(PlatformConfigRow.id == SINGLETON_ID)
        if lock:
            query = query.with_for_update()
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def _config_row_for_write(self) -> PlatformConfigRow:
        if self._config_row is None:
            self._config_row = await self._fetch_config_row(lock=True)
        if self._config_row is None:
            logger.info(
                "Creating platform configuration",
                extra={"account": self._owner},
            )
            self._config_row = PlatformConfigRow(
                id=SINGLETON_ID, owner=self._owner,
                fee_percentage=self._default_fee,
                next_course_id=1, next_post_id=1,
                total_fees_collected=0, sequence_number=0,
            )
            self.db.add(self._config_row)
        return self._config_row

    async def get_config(self) -> PlatformConfig:
        """Current config; the deployment defaults when nothing was written yet."""
        row = await self._fetch_config_row(lock=False)
        if row is None:
            return PlatformConfig(owner=Account(self._owner), fee_percentage=self._default_fee)
        return config_from_row(row)

    # ─── Load ────────────────────────────────────────────────────

    async def load(self, scope: LedgerScope, lock: bool = False) -> LedgerState:
        """Materialize every record the scope can reach."""
        if lock:
            row = await self._config_row_for_write()
        else:
            row = await self._fetch_config_row(lock=False)
        if row is None:
            state = LedgerState.genesis(Account(self._owner), self._default_fee)
        else:
            state = LedgerState(
                config=config_from_row(row),
                sequence_number=SequenceNumber(row.sequence_number),
            )

        courses = await self._load_courses(scope.course_ids)
        state.courses.update(courses)

        accounts = set(scope.accounts)
        accounts.update(course.instructor for course in courses.values())
        state.student_profiles.update(
            await self._load_by_account(Table.STUDENT_PROFILES, StudentProfileRow, accounts),
        )
        state.instructor_profiles.update(
            await self._load_by_account(Table.INSTRUCTOR_PROFILES, InstructorProfileRow, accounts),
        )

        course_ids = set(scope.course_ids)
        for course in courses.values():
            course_ids.update(course.prerequisites)
        state.enrollments.update(await self._load_enrollments(scope.accounts, course_ids))

        for key in scope.post_keys:
            post = await self._get_record(Table.DISCUSSION_POSTS, key)
            if post is not None:
                state.discussion_posts[key] = post
        return state

    async def _load_courses(self, course_ids: set[CourseId]) -> dict:
        if not course_ids:
            return {}
        result = await self.db.execute(
            select(CourseRow).where(CourseRow.id.in_(course_ids)),
        )
        return {
            CourseId(row.id): record_from_row(Table.COURSES, row)
            for row in result.scalars().all()
        }

    async def _load_by_account(self, table: Table, row_type, accounts: set[Account]) -> dict:
        if not accounts:
            return {}
        result = await self.db.execute(
            select(row_type).where(row_type.account.in_(accounts)),
        )
        return {
            Account(row.account): record_from_row(table, row)
            for row in result.scalars().all()
        }

    async def _load_enrollments(
        self, accounts: set[Account], course_ids: set[CourseId],
    ) -> dict:
        if not accounts or not course_ids:
            return {}
        result = await self.db.execute(
            select(EnrollmentRow)
            .where(EnrollmentRow.student.in_(accounts))
            .where(EnrollmentRow.course_id.in_(course_ids)),
        )
        return {
            EnrollmentKey(Account(row.student), CourseId(row.course_id)):
                record_from_row(Table.ENROLLMENTS, row)
            for row in result.scalars().all()
        }

    # ─── Reads ───────────────────────────────────────────────────

    async def _get_record(self, table: Table, key: object):
        mapping = TABLE_MAPPINGS[table]
        row = await self.db.get(mapping.row_type, mapping.identity(key))
        return record_from_row(table, row) if row is not None else None

    async def get(self, table: Table, key: object):
        return await self._get_record(table, key)

    # ─── Apply ───────────────────────────────────────────────────

    async def apply(self, changes: ChangeSet) -> None:
        """Stage a committed ChangeSet in the session. Caller commits."""
        config_row = await self._config_row_for_write()
        config = changes.config or config_from_row(config_row)
        copy_config_to_row(config, config_row, changes.sequence_number)

        for table, rows in changes.writes.items():
            for key, record in rows.items():
                await self.db.merge(row_from_record(table, key, record))

        for transfer in changes.transfers:
            self.db.add(LedgerTransferRow(
                kind=transfer.kind.value,
                sender=transfer.sender,
                recipient=transfer.recipient,
                amount=transfer.amount,
                sequence_number=transfer.sequence_number,
            ))
        await self.db.flush()
