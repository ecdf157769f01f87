"""Document ORM — one row per live document, keyed by caller-chosen id.

Invariants:
    - id is the primary key; a second insert with the same id violates it
    - revision is the compare-and-swap column for conditional updates
    - (creation_timestamp, id) index backs ordered forward scans

Design Decisions:
    - Timestamps as BIGINT Unix seconds: they round-trip exactly into Document
      and compare cheaply in the scan predicate
    - documents_table() re-targets the mapped table to a configured name without
      declaring a second ORM class
"""

from functools import lru_cache

from sqlalchemy import BigInteger, Index, MetaData, String, Table, Text
from sqlalchemy.orm import Mapped, mapped_column

from docstore.db.base import Base

DEFAULT_TABLE_NAME = "documents"


class DocumentRecord(Base):
    """Persisted document row."""
    __tablename__ = DEFAULT_TABLE_NAME

    id: Mapped[str] = mapped_column(String(250), primary_key=True)
    title: Mapped[str] = mapped_column(String(250), nullable=False)
    description: Mapped[str] = mapped_column(String(250), nullable=False)
    body: Mapped[str] = mapped_column(Text, nullable=False)
    revision: Mapped[int] = mapped_column(BigInteger, nullable=False)
    creation_timestamp: Mapped[int] = mapped_column(BigInteger, nullable=False)
    update_timestamp: Mapped[int] = mapped_column(BigInteger, nullable=False)

    __table_args__ = (
        Index(
            "ix_documents_creation_timestamp_id", "creation_timestamp", "id",
        ),
    )


@lru_cache
def documents_table(name: str = DEFAULT_TABLE_NAME) -> Table:
    """Table object for the configured table name."""
    if name == DEFAULT_TABLE_NAME:
        return DocumentRecord.__table__
    table = DocumentRecord.__table__.to_metadata(MetaData(), name=name)
    # index names are schema-wide, not per table
    for index in table.indexes:
        index.name = index.name.replace(DEFAULT_TABLE_NAME, name, 1)
    return table
