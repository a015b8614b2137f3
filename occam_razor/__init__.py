"""Occam's Razor Thinking Guide — stateless stage-transition engine for LLM agents.

Invariants:
    - Package root holds only the version string (import side-effects prohibited)

Design Decisions:
    - Explicit imports from submodules, no star exports
"""

__version__ = "0.1.0"
