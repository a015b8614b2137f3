"""Core Layer — stage catalog, prompt catalog, loopback rules and the transition engine.

Invariants:
    - No module in core/ imports from services/, api/, transport/ or infrastructure/
    - Decisions are deterministic; the only side effect is diagnostic logging

Design Decisions:
    - Functional core separated from the transports (stdio, HTTP) that wrap it
"""
