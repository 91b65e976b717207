"""Platform Routes — configuration read and fee update (owner-only)."""

import logging

from fastapi import APIRouter, Depends

from elearn.api.dependencies import get_caller, get_runner
from elearn.core.domain_types import Account
from elearn.schemas.operation import OperationResponse
from elearn.schemas.platform import FeeUpdate, PlatformConfigResponse
from elearn.services.handle_platform import PlatformHandlers
from elearn.services.ledger_runner import LedgerRunner

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/platform", tags=["platform"])


@router.get("", response_model=PlatformConfigResponse)
async def get_platform_config(runner: LedgerRunner = Depends(get_runner)):
    config, sequence_number = await PlatformHandlers(runner).get_platform_config()
    response = PlatformConfigResponse.model_validate(config)
    response.sequence_number = sequence_number
    return response


@router.put("/fee", response_model=OperationResponse)
async def set_platform_fee(
    body: FeeUpdate,
    caller: Account | None = Depends(get_caller),
    runner: LedgerRunner = Depends(get_runner),
):
    outcome = await PlatformHandlers(runner).set_platform_fee(caller, body.fee_percentage)
    return OperationResponse.from_outcome(outcome)
