"""Forum Handlers — discussion posts and upvotes."""

from elearn.core import forum
from elearn.core.domain_types import Account, CourseId, PostId
from elearn.services.ledger_runner import LedgerRunner, OperationOutcome
from elearn.services.scopes import course_scope, post_scope


class ForumHandlers:
    """Discussion forum handlers."""

    def __init__(self, runner: LedgerRunner):
        self.runner = runner

    async def create_discussion_post(
        self, caller: Account | None, course_id: CourseId, content: str,
    ) -> OperationOutcome:
        return await self.runner.execute(
            "create_discussion_post", course_scope([course_id], caller), caller,
            course_id, content,
        )

    async def upvote_post(
        self, caller: Account | None, course_id: CourseId, post_id: PostId,
    ) -> OperationOutcome:
        return await self.runner.execute(
            "upvote_post", post_scope(course_id, post_id), caller, course_id, post_id,
        )

    async def get_discussion_post(self, course_id: CourseId, post_id: PostId):
        state = await self.runner.snapshot(post_scope(course_id, post_id))
        return forum.get_discussion_post(state, course_id, post_id)
