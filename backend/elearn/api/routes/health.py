"""Health & Readiness Probes — liveness, database readiness and ledger position.

Invariants:
    - GET /health/ returns 200 whenever the process is up
    - GET /health/ready returns 503 until the database answers; when ready it also
      reports the last committed ledger sequence number (0 before the first write)
"""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from sqlalchemy import select

from elearn.infrastructure import database
from elearn.models import PlatformConfigRow

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])

SERVICE_NAME = "elearn-ledger"


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    return {"status": "healthy", "service": SERVICE_NAME, "version": "1.0.0"}


@router.get("/ready")
async def readiness_check():
    manager = database.db_manager
    if manager is None or not await manager.health_check():
        logger.warning("Readiness check failed: database unavailable")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "database_unavailable"},
        )
    async with manager.session() as db:
        sequence_number = (await db.execute(
            select(PlatformConfigRow.sequence_number),
        )).scalar_one_or_none()
    return {
        "status": "ready",
        "checks": {"database": "healthy"},
        "sequence_number": sequence_number or 0,
    }
