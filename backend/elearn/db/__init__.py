"""Database Package — declarative Base shared by models and migrations.

Invariants:
    - Single async engine per process in the app (infrastructure/database.py)
    - All sessions are async (AsyncSession)

Design Decisions:
    - asyncpg driver for PostgreSQL, aiosqlite for tests (ADR: native async, no thread pool)
"""
