"""Core Layer - pure domain logic, no IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Validation and age calculation are pure and deterministic given "today"

Design Decisions:
    - Functional core separated from imperative shell: the service awaits the
      repository around these pure functions
"""
