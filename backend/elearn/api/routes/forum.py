"""Forum Routes — per-course discussion posts and upvotes."""

import logging

from fastapi import APIRouter, Depends, status

from elearn.api.dependencies import get_caller, get_runner
from elearn.core.domain_types import Account, CourseId, PostId
from elearn.schemas.forum import DiscussionPostResponse, PostCreate
from elearn.schemas.operation import OperationResponse
from elearn.services.handle_forum import ForumHandlers
from elearn.services.ledger_runner import LedgerRunner

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/courses/{course_id}/posts", tags=["forum"])


@router.post(
    "", response_model=OperationResponse, status_code=status.HTTP_201_CREATED,
)
async def create_discussion_post(
    course_id: int,
    body: PostCreate,
    caller: Account | None = Depends(get_caller),
    runner: LedgerRunner = Depends(get_runner),
):
    """Post to a course the caller is enrolled in; `result` is the post id."""
    outcome = await ForumHandlers(runner).create_discussion_post(
        caller, CourseId(course_id), body.content,
    )
    return OperationResponse.from_outcome(outcome)


@router.get("/{post_id}", response_model=DiscussionPostResponse | None)
async def get_discussion_post(
    course_id: int, post_id: int, runner: LedgerRunner = Depends(get_runner),
):
    post = await ForumHandlers(runner).get_discussion_post(CourseId(course_id), PostId(post_id))
    if post is None:
        return None
    return DiscussionPostResponse.model_validate(post)


@router.post("/{post_id}/upvotes", response_model=OperationResponse)
async def upvote_post(
    course_id: int,
    post_id: int,
    caller: Account | None = Depends(get_caller),
    runner: LedgerRunner = Depends(get_runner),
):
    outcome = await ForumHandlers(runner).upvote_post(
        caller, CourseId(course_id), PostId(post_id),
    )
    return OperationResponse.from_outcome(outcome)
