"""Infrastructure Layer — database session management and cross-cutting concerns.

Invariants:
    - Infrastructure never imports core operations, only core error types
    - All database failures surface as DatabaseError

Design Decisions:
    - Resilient wrappers over raw clients (ADR: ExMA single responsibility)
"""
