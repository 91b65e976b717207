"""Catalog Handlers — create, edit, activate and read courses."""

from elearn.core import catalog
from elearn.core.domain_types import Account, CourseId
from elearn.services.ledger_runner import LedgerRunner, OperationOutcome
from elearn.services.scopes import course_scope


class CatalogHandlers:
    """Course catalog handlers."""

    def __init__(self, runner: LedgerRunner):
        self.runner = runner

    async def create_course(
        self, caller: Account | None, title: str, price: int, content_hash: str,
        category: str, description: str, prerequisites: list[CourseId],
    ) -> OperationOutcome:
        # prerequisites are loaded so their existence can be checked
        return await self.runner.execute(
            "create_course", course_scope(prerequisites, caller), caller,
            title, price, content_hash, category, description, prerequisites,
        )

    async def update_course(
        self, caller: Account | None, course_id: CourseId, changes: dict,
    ) -> OperationOutcome:
        return await self.runner.execute(
            "update_course", course_scope([course_id], caller), caller,
            course_id, **changes,
        )

    async def set_course_active(
        self, caller: Account | None, course_id: CourseId, is_active: bool,
    ) -> OperationOutcome:
        return await self.runner.execute(
            "set_course_active", course_scope([course_id], caller), caller,
            course_id, is_active,
        )

    async def get_course(self, course_id: CourseId):
        state = await self.runner.snapshot(course_scope([course_id]))
        return catalog.get_course(state, course_id)
