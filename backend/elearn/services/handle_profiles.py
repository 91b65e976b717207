"""Profile Handlers — student/instructor profiles and achievements (5 methods).

Invariants:
    - Mutations go through LedgerRunner (serialized, all-or-nothing)
    - Reads return the record or None, never raise for a missing key
"""

from elearn.core import profiles
from elearn.core.domain_types import Account
from elearn.services.ledger_runner import LedgerRunner, OperationOutcome
from elearn.services.scopes import accounts_scope


class ProfileHandlers:
    """Identity & profile registry handlers."""

    def __init__(self, runner: LedgerRunner):
        self.runner = runner

    async def create_student_profile(self, caller: Account | None, name: str) -> OperationOutcome:
        return await self.runner.execute(
            "create_student_profile", accounts_scope(caller), caller, name,
        )

    async def update_student_preferences(
        self, caller: Account | None, preferences: list[str],
    ) -> OperationOutcome:
        return await self.runner.execute(
            "update_student_preferences", accounts_scope(caller), caller, preferences,
        )

    async def create_instructor_profile(
        self, caller: Account | None, name: str, credentials: str,
        bio: str, social_links: list[str],
    ) -> OperationOutcome:
        return await self.runner.execute(
            "create_instructor_profile", accounts_scope(caller), caller,
            name, credentials, bio, social_links,
        )

    async def award_achievement(
        self, caller: Account | None, account: Account, achievement: str,
    ) -> OperationOutcome:
        return await self.runner.execute(
            "award_achievement", accounts_scope(caller, account), caller,
            account, achievement,
        )

    async def get_student_profile(self, account: Account):
        state = await self.runner.snapshot(accounts_scope(account))
        return profiles.get_student_profile(state, account)

    async def get_instructor_profile(self, account: Account):
        state = await self.runner.snapshot(accounts_scope(account))
        return profiles.get_instructor_profile(state, account)
