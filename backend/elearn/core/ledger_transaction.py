"""Ledger Transaction — staged, all-or-nothing application of one operation.

Invariants:
    - Reads see the transaction's own staged writes first, then the base state
    - Writes go to a local buffer; the base state is never touched by a transaction
    - commit() hands back a ChangeSet exactly once; a failed operation produces none
    - Every staged record is a private copy (no aliasing between buffer, base and caller)

Design Decisions:
    - Overlay buffer over deep-copying the whole state: cost proportional to what an
      operation touches, and the same ChangeSet feeds both the in-memory host and the
      SQL repository (ADR: one commit format, two hosts)
    - Operations raise ElearnError after validating and before writing, so discarding
      the buffer is all a rollback needs
"""

import copy
from typing import Callable, TypeVar

from elearn.core.domain_types import Account, SequenceNumber, Table
from elearn.core.ledger_state import ChangeSet, PlatformConfig, Transfer
from elearn.core.repository_protocols import LedgerReader

T = TypeVar("T")


class TransactionClosedError(RuntimeError):
    """Raised when a committed transaction is used again."""


class LedgerTransaction:
    """Write buffer over a read-only ledger view."""

    def __init__(self, base: LedgerReader, sequence_number: SequenceNumber):
        self._base = base
        self.sequence_number = sequence_number
        self._writes: dict[Table, dict] = {}
        self._config: PlatformConfig | None = None
        self._transfers: list[Transfer] = []
        self._closed = False

    def get(self, table: Table, key: object) -> object | None:
        self._ensure_open()
        staged = self._writes.get(table, {})
        if key in staged:
            return copy.deepcopy(staged[key])
        return self._base.get(table, key)

    def put(self, table: Table, key: object, record: object) -> None:
        self._ensure_open()
        self._writes.setdefault(table, {})[key] = copy.deepcopy(record)

    def get_config(self) -> PlatformConfig:
        self._ensure_open()
        if self._config is not None:
            return copy.deepcopy(self._config)
        return self._base.get_config()

    def put_config(self, config: PlatformConfig) -> None:
        self._ensure_open()
        self._config = copy.deepcopy(config)

    def emit_transfer(self, transfer: Transfer) -> None:
        self._ensure_open()
        self._transfers.append(transfer)

    def commit(self) -> ChangeSet:
        """Close the transaction and return everything it staged."""
        self._ensure_open()
        self._closed = True
        return ChangeSet(
            sequence_number=self.sequence_number,
            writes=self._writes,
            config=self._config,
            transfers=self._transfers,
        )

    def _ensure_open(self) -> None:
        if self._closed:
            raise TransactionClosedError("transaction already committed")


def run_operation(
    base: LedgerReader,
    sequence_number: SequenceNumber,
    operation: Callable[..., T],
    caller: Account | None,
    *args: object,
    **kwargs: object,
) -> tuple[T, ChangeSet]:
    """Run one operation in a fresh transaction. Pure: the base is never written.

    Any ElearnError raised by the operation propagates and the staged writes
    are dropped with the transaction object.
    """
    tx = LedgerTransaction(base, sequence_number)
    result = operation(tx, caller, *args, **kwargs)
    return result, tx.commit()
