"""Core Layer — pure format negotiation logic, no IO, no async.

Invariants:
    - No module in core/ imports from api/, schemas/ or infrastructure/
    - All functions are pure and deterministic
    - Lookup tables are built once at import time and never mutated

Design Decisions:
    - Functional core separated from the FastAPI shell: routes decide nothing
      about profiles or versions, they only delegate here
"""
