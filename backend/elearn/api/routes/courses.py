"""Course Routes — catalog management and the enrollment lifecycle.

Invariants:
    - Course ids are path parameters; the core decides NotFound vs Unauthorized
    - Enrollment mutations always act on the caller's own enrollment
    - GET endpoints return the record or JSON null
"""

import logging

from fastapi import APIRouter, Depends, status

from elearn.api.dependencies import get_caller, get_runner
from elearn.core.domain_types import Account, CourseId
from elearn.schemas.courses import (
    CertificateRequest, CourseActivation, CourseCreate, CourseResponse, CourseUpdate,
    EnrollmentResponse, ProgressUpdate, RatingRequest,
)
from elearn.schemas.operation import OperationResponse
from elearn.services.handle_catalog import CatalogHandlers
from elearn.services.handle_enrollment import EnrollmentHandlers
from elearn.services.ledger_runner import LedgerRunner

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/courses", tags=["courses"])


# ─── Catalog ─────────────────────────────────────────────────────

@router.post(
    "", response_model=OperationResponse, status_code=status.HTTP_201_CREATED,
)
async def create_course(
    body: CourseCreate,
    caller: Account | None = Depends(get_caller),
    runner: LedgerRunner = Depends(get_runner),
):
    """Create a course; `result` is the new course id."""
    outcome = await CatalogHandlers(runner).create_course(
        caller, body.title, body.price, body.content_hash, body.category,
        body.description, [CourseId(c) for c in body.prerequisites],
    )
    return OperationResponse.from_outcome(outcome)


@router.get("/{course_id}", response_model=CourseResponse | None)
async def get_course(course_id: int, runner: LedgerRunner = Depends(get_runner)):
    course = await CatalogHandlers(runner).get_course(CourseId(course_id))
    if course is None:
        return None
    return CourseResponse.model_validate(course)


@router.patch("/{course_id}", response_model=OperationResponse)
async def update_course(
    course_id: int,
    body: CourseUpdate,
    caller: Account | None = Depends(get_caller),
    runner: LedgerRunner = Depends(get_runner),
):
    outcome = await CatalogHandlers(runner).update_course(
        caller, CourseId(course_id), body.model_dump(exclude_none=True),
    )
    return OperationResponse.from_outcome(outcome)


@router.put("/{course_id}/active", response_model=OperationResponse)
async def set_course_active(
    course_id: int,
    body: CourseActivation,
    caller: Account | None = Depends(get_caller),
    runner: LedgerRunner = Depends(get_runner),
):
    outcome = await CatalogHandlers(runner).set_course_active(
        caller, CourseId(course_id), body.is_active,
    )
    return OperationResponse.from_outcome(outcome)


# ─── Enrollment ──────────────────────────────────────────────────

@router.post(
    "/{course_id}/enrollments", response_model=OperationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def enroll_in_course(
    course_id: int,
    caller: Account | None = Depends(get_caller),
    runner: LedgerRunner = Depends(get_runner),
):
    outcome = await EnrollmentHandlers(runner).enroll_in_course(caller, CourseId(course_id))
    return OperationResponse.from_outcome(outcome)


@router.get(
    "/{course_id}/enrollments/{account}", response_model=EnrollmentResponse | None,
)
async def get_enrollment(
    course_id: int, account: str, runner: LedgerRunner = Depends(get_runner),
):
    enrollment = await EnrollmentHandlers(runner).get_enrollment(
        Account(account), CourseId(course_id),
    )
    if enrollment is None:
        return None
    return EnrollmentResponse.model_validate(enrollment)


@router.put("/{course_id}/progress", response_model=OperationResponse)
async def update_progress(
    course_id: int,
    body: ProgressUpdate,
    caller: Account | None = Depends(get_caller),
    runner: LedgerRunner = Depends(get_runner),
):
    outcome = await EnrollmentHandlers(runner).update_progress(
        caller, CourseId(course_id), body.progress,
    )
    return OperationResponse.from_outcome(outcome)


@router.post("/{course_id}/completion", response_model=OperationResponse)
async def complete_course(
    course_id: int,
    caller: Account | None = Depends(get_caller),
    runner: LedgerRunner = Depends(get_runner),
):
    outcome = await EnrollmentHandlers(runner).complete_course(caller, CourseId(course_id))
    return OperationResponse.from_outcome(outcome)


@router.post("/{course_id}/certificate", response_model=OperationResponse)
async def generate_certificate(
    course_id: int,
    body: CertificateRequest,
    caller: Account | None = Depends(get_caller),
    runner: LedgerRunner = Depends(get_runner),
):
    outcome = await EnrollmentHandlers(runner).generate_certificate(
        caller, CourseId(course_id), body.certificate_hash,
    )
    return OperationResponse.from_outcome(outcome)


@router.post("/{course_id}/rating", response_model=OperationResponse)
async def rate_course(
    course_id: int,
    body: RatingRequest,
    caller: Account | None = Depends(get_caller),
    runner: LedgerRunner = Depends(get_runner),
):
    outcome = await EnrollmentHandlers(runner).rate_course(
        caller, CourseId(course_id), body.rating,
    )
    return OperationResponse.from_outcome(outcome)
