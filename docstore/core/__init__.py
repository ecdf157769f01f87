"""Core Layer — pure domain logic, no IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, models/ or db/
    - All functions are pure and deterministic; the store contract is the only async surface

Design Decisions:
    - Functional core separated from imperative shell: validation, conflict
      reconciliation and pagination are decided here, store calls happen in services/
"""
