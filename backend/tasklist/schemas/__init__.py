"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - Core Task records are converted here, never serialized directly

Design Decisions:
    - Separate from core.task: schemas are API contracts, Task is the domain record
"""
