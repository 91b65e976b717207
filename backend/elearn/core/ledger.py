"""In-Memory Ledger — the host ledger for a single process, used by tests and scripts.

Invariants:
    - Operations run strictly one at a time, each in its own LedgerTransaction
    - A committed operation advances sequence_number by exactly one
    - A failed operation leaves state (sequence number included) exactly as before
"""

from elearn.core.domain_types import Account, DEFAULT_PLATFORM_FEE, SequenceNumber
from elearn.core.ledger_state import LedgerState
from elearn.core.ledger_transaction import run_operation
from elearn.core.operations import get_operation


class Ledger:
    """Holds one LedgerState and commits operations against it."""

    def __init__(self, owner: Account, fee_percentage: int = DEFAULT_PLATFORM_FEE):
        self.state = LedgerState.genesis(owner, fee_percentage)

    @property
    def sequence_number(self) -> SequenceNumber:
        return self.state.sequence_number

    def call(self, operation: str, caller: Account | None, *args: object, **kwargs: object):
        """Run a named operation for `caller`; raises ElearnError on rejection."""
        result, changes = run_operation(
            self.state, SequenceNumber(self.state.sequence_number + 1),
            get_operation(operation), caller, *args, **kwargs,
        )
        self.state.apply(changes)
        return result
