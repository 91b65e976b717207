"""Services Layer — imperative shell around the pure ledger core.

Invariants:
    - Handlers split by component (max ~6 methods each)
    - Every mutation goes through LedgerRunner; handlers only pick the load scope

Design Decisions:
    - One handler file per component for locality (ADR: ExMA no god objects)
"""
