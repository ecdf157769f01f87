"""Database Infrastructure — SQLAlchemy declarative Base.

Invariants:
    - One Base / MetaData for every ORM model and for alembic autogenerate

Design Decisions:
    - asyncpg driver for PostgreSQL, aiosqlite for tests
"""
