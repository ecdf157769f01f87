"""Services Layer — the imperative shell around core.

Invariants:
    - Services await store calls; every decision is delegated to core pure functions
    - Services depend on the DocumentStore Protocol, never on a concrete store
"""
