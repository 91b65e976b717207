"""Platform Handlers — fee configuration and config read."""

from elearn.core import platform
from elearn.core.domain_types import Account
from elearn.core.repository_protocols import LedgerScope
from elearn.services.ledger_runner import LedgerRunner, OperationOutcome


class PlatformHandlers:
    """Platform configuration handlers."""

    def __init__(self, runner: LedgerRunner):
        self.runner = runner

    async def set_platform_fee(self, caller: Account | None, percent: int) -> OperationOutcome:
        return await self.runner.execute("set_platform_fee", LedgerScope(), caller, percent)

    async def get_platform_config(self):
        state = await self.runner.snapshot(LedgerScope())
        return platform.get_platform_config(state), state.sequence_number
