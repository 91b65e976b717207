"""Enrollment Handlers — enroll, progress, completion, certificate, rating.

Invariants:
    - Every scope includes the course, so the repository also loads its instructor
      profile (settlement, ratings) and the caller's prerequisite enrollments
"""

from elearn.core import enrollment
from elearn.core.domain_types import Account, CourseId
from elearn.services.ledger_runner import LedgerRunner, OperationOutcome
from elearn.services.scopes import course_scope


class EnrollmentHandlers:
    """Enrollment & certification handlers."""

    def __init__(self, runner: LedgerRunner):
        self.runner = runner

    async def _execute(
        self, operation: str, caller: Account | None, course_id: CourseId, *args: object,
    ) -> OperationOutcome:
        return await self.runner.execute(
            operation, course_scope([course_id], caller), caller, course_id, *args,
        )

    async def enroll_in_course(self, caller: Account | None, course_id: CourseId) -> OperationOutcome:
        return await self._execute("enroll_in_course", caller, course_id)

    async def update_progress(
        self, caller: Account | None, course_id: CourseId, percent: int,
    ) -> OperationOutcome:
        return await self._execute("update_progress", caller, course_id, percent)

    async def complete_course(self, caller: Account | None, course_id: CourseId) -> OperationOutcome:
        return await self._execute("complete_course", caller, course_id)

    async def generate_certificate(
        self, caller: Account | None, course_id: CourseId, certificate_hash: str,
    ) -> OperationOutcome:
        return await self._execute("generate_certificate", caller, course_id, certificate_hash)

    async def rate_course(
        self, caller: Account | None, course_id: CourseId, rating: int,
    ) -> OperationOutcome:
        return await self._execute("rate_course", caller, course_id, rating)

    async def get_enrollment(self, student: Account, course_id: CourseId):
        state = await self.runner.snapshot(course_scope([course_id], student))
        return enrollment.get_enrollment(state, student, course_id)
