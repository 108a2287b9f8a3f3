"""Core Layer: pure site resolution and fixture shaping, no IO, no async.

Invariants:
    - No module in core/ imports from api/, infrastructure/, or schemas/
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from the FastAPI shell: handlers stay thin
      and every rule is testable without an HTTP client
"""
