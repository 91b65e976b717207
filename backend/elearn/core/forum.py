"""Discussion Forum — per-course posts and upvotes.

Invariants:
    - Only an account enrolled in the course may post to it
    - Post ids come from the global PlatformConfig.next_post_id, shared by all courses
    - Upvotes only increase; the same account may upvote repeatedly
"""

from elearn.core.access_control import check_authenticated, check_enrolled
from elearn.core.domain_types import Account, CourseId, PostId, PostKey, Table
from elearn.core.errors import ElearnError, ResourceNotFoundError
from elearn.core.ledger_state import DiscussionPost
from elearn.core.ledger_transaction import LedgerTransaction
from elearn.core.repository_protocols import LedgerReader


def check_post_exists(reader: LedgerReader, key: PostKey) -> ElearnError | None:
    if reader.get(Table.DISCUSSION_POSTS, key) is None:
        return ResourceNotFoundError("Discussion post", f"{key.course_id}/{key.post_id}")
    return None


def create_discussion_post(
    tx: LedgerTransaction, caller: Account | None, course_id: CourseId, content: str,
) -> PostId:
    error = check_authenticated(caller) or check_enrolled(tx, caller, course_id)
    if error:
        raise error
    config = tx.get_config()
    post_id = config.next_post_id
    tx.put(
        Table.DISCUSSION_POSTS, PostKey(course_id, post_id),
        DiscussionPost(author=caller, content=content, created_at=tx.sequence_number),
    )
    config.next_post_id = PostId(post_id + 1)
    tx.put_config(config)
    return post_id


def upvote_post(
    tx: LedgerTransaction, caller: Account | None, course_id: CourseId, post_id: PostId,
) -> bool:
    key = PostKey(course_id, post_id)
    error = check_authenticated(caller) or check_post_exists(tx, key)
    if error:
        raise error
    post = tx.get(Table.DISCUSSION_POSTS, key)
    post.upvotes += 1
    tx.put(Table.DISCUSSION_POSTS, key, post)
    return True


def get_discussion_post(
    reader: LedgerReader, course_id: CourseId, post_id: PostId,
) -> DiscussionPost | None:
    return reader.get(Table.DISCUSSION_POSTS, PostKey(course_id, post_id))
