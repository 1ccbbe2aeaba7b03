"""Services Layer — artwork and favorite services plus the SQL store handle.

Invariants:
    - Services own transaction boundaries (one commit per mutation)
    - Services depend on the ArtStore protocol, never on SQLAlchemy directly

Design Decisions:
    - One service per resource for locality
"""
