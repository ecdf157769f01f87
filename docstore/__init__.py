"""docstore — versioned document service with optimistic concurrency.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
