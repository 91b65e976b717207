"""Root conftest — shared test configuration."""

import os

os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("PLATFORM_OWNER", "deployer")
os.environ.setdefault("LOG_FORMAT", "text")
