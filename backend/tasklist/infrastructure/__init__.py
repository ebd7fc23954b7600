"""Infrastructure Layer — storage and cross-cutting concerns.

Invariants:
    - Infrastructure imports core/ types and errors, never services/ or api/
"""
