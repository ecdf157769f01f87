"""Pydantic Schemas — request validation for API endpoints.

Invariants:
    - Schemas parse wire JSON at the system boundary; field rules live in core/validation.py

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
