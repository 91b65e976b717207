"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate shape at the system boundary (types, lengths, required fields)
    - Ledger rules (price, progress, rating, fee, amount bounds) stay in the core, so
      every caller sees the same numeric error codes
    - Response models read core records via from_attributes

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence (ADR: DDD boundary)
"""
