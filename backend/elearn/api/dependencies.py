"""API Dependencies — caller identity and ledger runner injection.

Invariants:
    - The caller is whatever X-Account carries; identity is verified upstream
    - A missing, blank or over-long (> MAX_ACCOUNT_LENGTH) header yields None
      (unauthenticated), never a 4xx here; the core decides per operation

Design Decisions:
    - Owner/fee defaults come from settings at request time, so tests can override
      get_settings like any other dependency
"""

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from elearn.config import Settings, get_settings
from elearn.core.domain_types import Account, MAX_ACCOUNT_LENGTH
from elearn.infrastructure.database import get_db
from elearn.services.ledger_runner import LedgerRunner


def get_caller(
    x_account: str | None = Header(None, alias="X-Account"),
) -> Account | None:
    if x_account is None:
        return None
    account = x_account.strip()
    if not account or len(account) > MAX_ACCOUNT_LENGTH:
        return None
    return Account(account)


def get_runner(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> LedgerRunner:
    return LedgerRunner(db, settings.platform_owner, settings.default_platform_fee)
