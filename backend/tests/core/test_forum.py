"""Discussion Forum — tests for posting and upvoting.

Tests cover:
    - only enrolled accounts post; post ids come from one global counter
    - upvotes accumulate, including repeats by the same account
    - missing posts are NotFound
"""

import pytest

from elearn.core.domain_types import Account, CourseId, PostId
from elearn.core.errors import ResourceNotFoundError, UnauthorizedError
from elearn.core.forum import get_discussion_post

ALICE = Account("alice")
BOB = Account("bob")
PROF = Account("prof")
COURSE = CourseId(1)


@pytest.fixture
def forum_ledger(course_ledger):
    course_ledger.call("enroll_in_course", ALICE, COURSE)
    return course_ledger


def test_enrolled_student_posts(forum_ledger):
    post_id = forum_ledger.call("create_discussion_post", ALICE, COURSE, "Hello")
    assert post_id == 1
    post = get_discussion_post(forum_ledger.state, COURSE, post_id)
    assert post.author == ALICE
    assert post.content == "Hello"
    assert post.upvotes == 0
    assert post.created_at == forum_ledger.sequence_number


def test_non_enrolled_cannot_post(forum_ledger):
    with pytest.raises(UnauthorizedError) as exc:
        forum_ledger.call("create_discussion_post", BOB, COURSE, "Hi")
    assert exc.value.reason == "not_enrolled"
    assert forum_ledger.state.config.next_post_id == 1


def test_post_ids_are_global_across_courses(forum_ledger):
    other = forum_ledger.call("create_course", PROF, "Other", 0, "QmO", "cs", "", [])
    forum_ledger.call("enroll_in_course", ALICE, other)
    assert forum_ledger.call("create_discussion_post", ALICE, COURSE, "a") == 1
    assert forum_ledger.call("create_discussion_post", ALICE, other, "b") == 2
    assert get_discussion_post(forum_ledger.state, COURSE, PostId(2)) is None


def test_upvotes_accumulate(forum_ledger):
    post_id = forum_ledger.call("create_discussion_post", ALICE, COURSE, "Hello")
    forum_ledger.call("upvote_post", BOB, COURSE, post_id)
    forum_ledger.call("upvote_post", BOB, COURSE, post_id)
    assert get_discussion_post(forum_ledger.state, COURSE, post_id).upvotes == 2


def test_upvote_missing_post_not_found(forum_ledger):
    with pytest.raises(ResourceNotFoundError):
        forum_ledger.call("upvote_post", BOB, COURSE, PostId(7))


def test_upvote_requires_caller(forum_ledger):
    post_id = forum_ledger.call("create_discussion_post", ALICE, COURSE, "Hello")
    with pytest.raises(UnauthorizedError):
        forum_ledger.call("upvote_post", "", COURSE, post_id)
