"""API Layer — FastAPI routes, response helpers and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Header values always come from core.content_type, never assembled here
"""
