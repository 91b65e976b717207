"""Operation Scopes — which keys each handler asks the repository to pre-load."""

from elearn.core.domain_types import Account, CourseId, PostId, PostKey
from elearn.core.repository_protocols import LedgerScope


def accounts_scope(*accounts: Account | None) -> LedgerScope:
    return LedgerScope(accounts={a for a in accounts if a})


def course_scope(course_ids, *accounts: Account | None) -> LedgerScope:
    scope = accounts_scope(*accounts)
    scope.course_ids = {CourseId(c) for c in course_ids}
    return scope


def post_scope(course_id: CourseId, post_id: PostId, *accounts: Account | None) -> LedgerScope:
    scope = course_scope([course_id], *accounts)
    scope.post_keys = {PostKey(course_id, post_id)}
    return scope
