"""API Layer — FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return {success, ...} envelopes except the legacy /arts list

Design Decisions:
    - Thin routes delegate to services
"""
