"""Infrastructure Layer — database session management and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All database failures mapped to DatabaseError before leaving this layer
"""
