"""Transport Layer — process framing around the tool dispatcher.

Invariants:
    - Transports never make stage decisions; they frame, dispatch and serialize
"""
