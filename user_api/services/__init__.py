"""Services Layer - orchestration around the pure core.

Invariants:
    - Services await repositories; core functions are called synchronously in between
    - Services hold no mutable state across calls
"""
