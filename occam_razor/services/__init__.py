"""Services Layer — tool schema and tool dispatch around the core engine.

Invariants:
    - Services never hold per-conversation state
    - Tool definitions live in define_*_tools.py, routing in tool_dispatch.py

Design Decisions:
    - Explicit imports, no auto-discovery of tools
"""
