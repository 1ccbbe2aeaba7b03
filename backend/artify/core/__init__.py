"""Core Layer — pure domain logic: identifiers, field normalization, documents, errors.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure and deterministic (timestamps are passed in)

Design Decisions:
    - Functional core separated from the imperative shell: services do the IO around it
"""
