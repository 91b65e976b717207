"""Ledger Runner — executes one core operation as a database transaction.

Invariants:
    - Operations are serialized: one asyncio.Lock per event loop plus a row lock
      on platform_config, so no two operations interleave
    - load -> run (pure) -> apply -> commit; any ElearnError rolls back and re-raises
      with account/operation filled into its ErrorContext
    - A committed operation advances the sequence number by exactly one

Design Decisions:
    - Locks are keyed weakly by the running loop: an asyncio.Lock binds to the
      first loop that contends on it, and a process may run several loops in turn
      (restarted app, per-test loops)
    - Single-process uvicorn; multi-process deployments still serialize on the
      platform_config row lock (ADR: correctness first, throughput later)
"""

import asyncio
import logging
import weakref
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from elearn.core.domain_types import Account, SequenceNumber
from elearn.core.errors import ElearnError
from elearn.core.ledger_transaction import run_operation
from elearn.core.operations import get_operation
from elearn.core.repository_protocols import LedgerScope
from elearn.services.sql_repository import SqlLedgerRepository

logger = logging.getLogger(__name__)

_operation_locks: weakref.WeakKeyDictionary = weakref.WeakKeyDictionary()


def operation_lock() -> asyncio.Lock:
    """The lock serializing ledger operations on the running event loop."""
    loop = asyncio.get_running_loop()
    lock = _operation_locks.get(loop)
    if lock is None:
        lock = _operation_locks[loop] = asyncio.Lock()
    return lock


@dataclass(frozen=True)
class OperationOutcome:
    result: object
    sequence_number: SequenceNumber


class LedgerRunner:
    """Runs named core operations against the SQL-backed ledger."""

    def __init__(self, db: AsyncSession, owner: str, default_fee: int):
        self.db = db
        self.repository = SqlLedgerRepository(db, owner, default_fee)

    async def execute(
        self,
        operation: str,
        scope: LedgerScope,
        caller: Account | None,
        *args: object,
        **kwargs: object,
    ) -> OperationOutcome:
        """Run `operation` for `caller`; the scope must cover every key it reads."""
        function = get_operation(operation)
        async with operation_lock():
            state = await self.repository.load(scope, lock=True)
            sequence_number = SequenceNumber(state.sequence_number + 1)
            try:
                result, changes = run_operation(
                    state, sequence_number, function, caller, *args, **kwargs,
                )
            except ElearnError as e:
                await self.db.rollback()
                e.context.account = caller
                e.context.operation = operation
                logger.warning(
                    f"Operation {operation} rejected: {e.message}",
                    extra={
                        "account": caller, "operation": operation,
                        "error_code": int(e.code), "reason": e.reason,
                    },
                )
                raise
            await self.repository.apply(changes)
            await self.db.commit()

        logger.info(
            f"Operation {operation} committed",
            extra={
                "account": caller, "operation": operation,
                "sequence_number": changes.sequence_number,
            },
        )
        return OperationOutcome(result=result, sequence_number=changes.sequence_number)

    async def snapshot(self, scope: LedgerScope):
        """Read-only LedgerState for the scope (no lock, no writes)."""
        return await self.repository.load(scope, lock=False)
