"""Infrastructure Layer - database, persistence adapters, observability.

Invariants:
    - Implements the Protocols declared in core/repository_protocols.py
    - The only layer that imports SQLAlchemy sessions or configures logging handlers
"""
