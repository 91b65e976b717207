"""Student Routes — profile creation, preferences, lookup and achievements.

Invariants:
    - Caller comes from X-Account (get_caller); routes never resolve roles themselves
    - GET returns the profile or JSON null (explicit absent), never 404
"""

import logging

from fastapi import APIRouter, Depends, status

from elearn.api.dependencies import get_caller, get_runner
from elearn.core.domain_types import Account
from elearn.schemas.operation import OperationResponse
from elearn.schemas.profiles import (
    AchievementAward, PreferencesUpdate, StudentProfileCreate, StudentProfileResponse,
)
from elearn.services.handle_profiles import ProfileHandlers
from elearn.services.ledger_runner import LedgerRunner

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/students", tags=["students"])


@router.post(
    "", response_model=OperationResponse, status_code=status.HTTP_201_CREATED,
)
async def create_student_profile(
    body: StudentProfileCreate,
    caller: Account | None = Depends(get_caller),
    runner: LedgerRunner = Depends(get_runner),
):
    """Create the caller's student profile."""
    outcome = await ProfileHandlers(runner).create_student_profile(caller, body.name)
    return OperationResponse.from_outcome(outcome)


@router.put("/me/preferences", response_model=OperationResponse)
async def update_student_preferences(
    body: PreferencesUpdate,
    caller: Account | None = Depends(get_caller),
    runner: LedgerRunner = Depends(get_runner),
):
    """Replace the caller's learning preferences."""
    outcome = await ProfileHandlers(runner).update_student_preferences(
        caller, body.preferences,
    )
    return OperationResponse.from_outcome(outcome)


@router.get("/{account}", response_model=StudentProfileResponse | None)
async def get_student_profile(
    account: str, runner: LedgerRunner = Depends(get_runner),
):
    profile = await ProfileHandlers(runner).get_student_profile(Account(account))
    if profile is None:
        return None
    return StudentProfileResponse.model_validate(profile)


@router.post("/{account}/achievements", response_model=OperationResponse)
async def award_achievement(
    account: str,
    body: AchievementAward,
    caller: Account | None = Depends(get_caller),
    runner: LedgerRunner = Depends(get_runner),
):
    """Owner-only: append an achievement to a student's profile."""
    outcome = await ProfileHandlers(runner).award_achievement(
        caller, Account(account), body.achievement,
    )
    return OperationResponse.from_outcome(outcome)
