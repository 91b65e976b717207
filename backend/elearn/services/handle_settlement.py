"""Settlement Handlers — instructor withdrawals."""

from elearn.core.domain_types import Account
from elearn.services.ledger_runner import LedgerRunner, OperationOutcome
from elearn.services.scopes import accounts_scope


class SettlementHandlers:
    """Financial settlement handlers. Enrollment settlement runs inside enroll_in_course."""

    def __init__(self, runner: LedgerRunner):
        self.runner = runner

    async def withdraw_earnings(self, caller: Account | None, amount: int) -> OperationOutcome:
        return await self.runner.execute(
            "withdraw_earnings", accounts_scope(caller), caller, amount,
        )
