"""Pydantic Schemas — request validation at the transport boundary.

Invariants:
    - Schemas validate at system boundary (tool arguments from the calling agent)
    - Domain types from core/ used for enum fields

Design Decisions:
    - Separate from core step types: schemas are wire contracts, step types are engine values
"""
