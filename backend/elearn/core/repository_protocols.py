"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell: dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - LedgerReader is synchronous: the shell pre-loads the records an operation can
      touch into a LedgerState, so pure operations never await anything
    - LedgerRepository is async because its implementation does IO; the shell
      orchestrates it around the pure operation (load -> run -> apply)
"""

from dataclasses import dataclass, field
from typing import Protocol

from elearn.core.domain_types import Account, CourseId, PostKey, Table


class LedgerReader(Protocol):
    """Read-only view an operation runs against (LedgerState or LedgerTransaction)."""
    def get(self, table: Table, key: object) -> object | None: ...
    def get_config(self): ...


@dataclass
class LedgerScope:
    """Keys an operation may read; the repository loads exactly these.

    Course instructors and the scope accounts' enrollments in prerequisite
    courses are followed automatically when a course is loaded.
    """
    accounts: set[Account] = field(default_factory=set)
    course_ids: set[CourseId] = field(default_factory=set)
    post_keys: set[PostKey] = field(default_factory=set)


class LedgerRepository(Protocol):
    """Contract for ledger persistence, implemented by the shell."""
    async def load(self, scope: LedgerScope, lock: bool = False): ...
    async def apply(self, changes) -> None: ...
    async def get(self, table: Table, key: object) -> object | None: ...
    async def get_config(self): ...
