"""Instructor Routes — profile creation, lookup and earnings withdrawal."""

import logging

from fastapi import APIRouter, Depends, status

from elearn.api.dependencies import get_caller, get_runner
from elearn.core.domain_types import Account
from elearn.schemas.operation import OperationResponse
from elearn.schemas.profiles import (
    InstructorProfileCreate, InstructorProfileResponse, WithdrawalRequest,
)
from elearn.services.handle_profiles import ProfileHandlers
from elearn.services.handle_settlement import SettlementHandlers
from elearn.services.ledger_runner import LedgerRunner

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/instructors", tags=["instructors"])


@router.post(
    "", response_model=OperationResponse, status_code=status.HTTP_201_CREATED,
)
async def create_instructor_profile(
    body: InstructorProfileCreate,
    caller: Account | None = Depends(get_caller),
    runner: LedgerRunner = Depends(get_runner),
):
    outcome = await ProfileHandlers(runner).create_instructor_profile(
        caller, body.name, body.credentials, body.bio, body.social_links,
    )
    return OperationResponse.from_outcome(outcome)


@router.get("/{account}", response_model=InstructorProfileResponse | None)
async def get_instructor_profile(
    account: str, runner: LedgerRunner = Depends(get_runner),
):
    profile = await ProfileHandlers(runner).get_instructor_profile(Account(account))
    if profile is None:
        return None
    return InstructorProfileResponse.model_validate(profile)


@router.post("/me/withdrawals", response_model=OperationResponse)
async def withdraw_earnings(
    body: WithdrawalRequest,
    caller: Account | None = Depends(get_caller),
    runner: LedgerRunner = Depends(get_runner),
):
    """Withdraw from the caller's accrued earnings; the transfer is journaled."""
    outcome = await SettlementHandlers(runner).withdraw_earnings(caller, body.amount)
    return OperationResponse.from_outcome(outcome)
