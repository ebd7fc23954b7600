"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All error responses share the structured JSON envelope

Design Decisions:
    - Thin routes delegate to services
"""
