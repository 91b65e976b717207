"""Platform Configuration — fee percentage and the singleton config read."""

from elearn.core.access_control import check_owner
from elearn.core.domain_types import Account, MAX_FEE_PERCENTAGE
from elearn.core.errors import ElearnError, InvalidInputError
from elearn.core.ledger_state import PlatformConfig
from elearn.core.ledger_transaction import LedgerTransaction
from elearn.core.repository_protocols import LedgerReader


def check_fee_percentage(percent: int) -> ElearnError | None:
    if not 0 <= percent <= MAX_FEE_PERCENTAGE:
        return InvalidInputError(
            f"Fee percentage must be between 0 and {MAX_FEE_PERCENTAGE}, got {percent}",
            "fee_percentage",
        )
    return None


def set_platform_fee(tx: LedgerTransaction, caller: Account | None, percent: int) -> bool:
    error = check_owner(tx, caller) or check_fee_percentage(percent)
    if error:
        raise error
    config = tx.get_config()
    config.fee_percentage = percent
    tx.put_config(config)
    return True


def get_platform_config(reader: LedgerReader) -> PlatformConfig:
    return reader.get_config()
