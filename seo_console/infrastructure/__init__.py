"""Infrastructure Layer: disk loading and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from api/
    - Startup failures (unreadable or malformed fixture) propagate unhandled
"""
