"""Pydantic Schemas - request/response shapes for API endpoints.

Invariants:
    - Request schemas only check JSON types; field rules live in core/validation.py
    - Response schemas are built by the service, never by routes

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
