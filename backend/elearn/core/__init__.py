"""Core Layer — pure ledger logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, models/ or db/
    - Operations are deterministic given the base state, caller and sequence number

Design Decisions:
    - Functional core separated from imperative shell (ADR: ExMA impureim sandwich)
"""
