"""SQL Document Store — DocumentStore implemented on async SQLAlchemy Core statements.

Invariants:
    - create is an INSERT guarded by the primary key: a duplicate id is ConditionFailed
    - update is UPDATE ... WHERE id = :id AND revision = :expected; zero rows is ConditionFailed
    - Every call runs in its own session and transaction; nothing is shared between calls
    - No method raises: DatabaseError and any other driver exception (a value the driver
      cannot bind, a dropped connection) become StoreFailure; cancellation still propagates

Design Decisions:
    - Core statements over ORM unit-of-work: the compare-and-swap must be a single
      conditional statement, not a read-modify-write
    - Scan predicate spelled as (ts > c.ts) OR (ts = c.ts AND id > c.id) instead of a row-value
      comparison so SQLite and PostgreSQL render the same query
"""

import logging

from sqlalchemy import and_, delete, insert, or_, select, update
from sqlalchemy.engine import Row
from sqlalchemy.exc import IntegrityError

from docstore.core.domain_types import (
    Cursor, Document, DocumentId, Revision, UnixTimestamp,
)
from docstore.core.store_results import (
    ConditionFailed, DeleteResult, LookupResult, Ok, ScanResult,
    StoreFailure, WriteResult,
)
from docstore.infrastructure.database import DatabaseSessionManager
from docstore.models.document import DEFAULT_TABLE_NAME, documents_table

logger = logging.getLogger(__name__)


def _to_row(document: Document) -> dict:
    return {
        "id": document.id,
        "title": document.title,
        "description": document.description,
        "body": document.body,
        "revision": document.revision,
        "creation_timestamp": document.creation_timestamp,
        "update_timestamp": document.update_timestamp,
    }


def _from_row(row: Row) -> Document:
    m = row._mapping
    return Document(
        id=DocumentId(m["id"]),
        title=m["title"],
        description=m["description"],
        body=m["body"],
        revision=Revision(m["revision"]),
        creation_timestamp=UnixTimestamp(m["creation_timestamp"]),
        update_timestamp=UnixTimestamp(m["update_timestamp"]),
    )


def _failure(operation: str, exc: BaseException, document_id: str | None = None) -> StoreFailure:
    logger.error(
        f"Document store {operation} failed: {exc}",
        extra={"operation": operation, "document_id": document_id},
    )
    return StoreFailure(exc)


class SqlDocumentStore:
    """Versioned document store backed by a single SQL table."""

    def __init__(
        self, db: DatabaseSessionManager, table_name: str = DEFAULT_TABLE_NAME,
    ):
        self._db = db
        self._table = documents_table(table_name)

    async def create(self, document: Document) -> WriteResult:
        try:
            async with self._db.session() as session:
                try:
                    await session.execute(
                        insert(self._table).values(**_to_row(document)),
                    )
                    await session.commit()
                except IntegrityError:
                    await session.rollback()
                    return ConditionFailed()
        except Exception as e:
            return _failure("create", e, document.id)
        return Ok(document)

    async def update(
        self, expected_revision: Revision, document: Document,
    ) -> WriteResult:
        t = self._table
        stmt = (
            update(t)
            .where(t.c.id == document.id, t.c.revision == expected_revision)
            .values(
                title=document.title,
                description=document.description,
                body=document.body,
                update_timestamp=document.update_timestamp,
                revision=document.revision,
            )
        )
        try:
            async with self._db.session() as session:
                result = await session.execute(stmt)
                if result.rowcount == 0:
                    await session.rollback()
                    return ConditionFailed()
                row = (
                    await session.execute(select(t).where(t.c.id == document.id))
                ).one()
                await session.commit()
                return Ok(_from_row(row))
        except Exception as e:
            return _failure("update", e, document.id)

    async def get(self, document_id: DocumentId) -> LookupResult:
        t = self._table
        try:
            async with self._db.session() as session:
                row = (
                    await session.execute(select(t).where(t.c.id == document_id))
                ).first()
        except Exception as e:
            return _failure("get", e, document_id)
        return Ok(_from_row(row) if row is not None else None)

    async def delete(self, document_id: DocumentId) -> DeleteResult:
        t = self._table
        try:
            async with self._db.session() as session:
                result = await session.execute(
                    delete(t).where(t.c.id == document_id),
                )
                removed = result.rowcount > 0
                await session.commit()
        except Exception as e:
            return _failure("delete", e, document_id)
        return Ok(removed)

    async def scan(self, limit: int, after: Cursor | None = None) -> ScanResult:
        t = self._table
        stmt = select(t).order_by(t.c.creation_timestamp, t.c.id).limit(limit)
        if after is not None:
            stmt = stmt.where(
                or_(
                    t.c.creation_timestamp > after.creation_timestamp,
                    and_(
                        t.c.creation_timestamp == after.creation_timestamp,
                        t.c.id > after.id,
                    ),
                )
            )
        try:
            async with self._db.session() as session:
                rows = (await session.execute(stmt)).all()
        except Exception as e:
            return _failure("scan", e)
        return Ok([_from_row(r) for r in rows])
