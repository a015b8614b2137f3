"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Routes never contain stage logic (delegate to the tool dispatcher)

Design Decisions:
    - Explicit registration in main.py over auto-discovery
"""
