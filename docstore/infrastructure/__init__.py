"""Infrastructure Layer — database access, the SQL store, and logging setup.

Invariants:
    - Infrastructure implements core contracts (DocumentStore) and raises only core errors
    - Driver exceptions never escape a store call; they become StoreFailure
"""
