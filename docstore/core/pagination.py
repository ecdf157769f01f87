"""Pagination — over-fetch-by-one paging with a (creation_timestamp, id) cursor.

Invariants:
    - Callers scan page_size + 1 documents; the extra one only signals "more exists"
    - A page never holds more than page_size documents
    - Cursor is the (id, creation_timestamp) of the last RETAINED document, or ZERO_CURSOR
    - parse_cursor rejects blank ids and non-integer, negative or beyond-int64 timestamps

Design Decisions:
    - Over-fetch by one instead of a count query: one store round trip per page
"""

from docstore.core.domain_types import (
    MAX_INT64, Cursor, Document, DocumentId, Page, UnixTimestamp, ZERO_CURSOR,
)
from docstore.core.errors import InvalidCursorError


DEFAULT_PAGE_SIZE: int = 10


def fetch_size(page_size: int) -> int:
    """How many documents to scan for one page."""
    return page_size + 1


def paginate(documents: list[Document], page_size: int) -> Page:
    """Bound a raw scan result to a page and derive the continuation cursor."""
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")

    if len(documents) <= page_size:
        return Page(documents=tuple(documents), cursor=ZERO_CURSOR)

    retained = tuple(documents[:page_size])
    last = retained[-1]
    return Page(
        documents=retained,
        cursor=Cursor(id=last.id, creation_timestamp=last.creation_timestamp),
    )


def parse_cursor(last_id: str | None, last_creation_timestamp: object) -> Cursor:
    """Build a Cursor from raw caller input. Raises InvalidCursorError."""
    if last_id is None or not str(last_id).strip():
        raise InvalidCursorError("last id is blank")

    if isinstance(last_creation_timestamp, bool):
        raise InvalidCursorError("creation timestamp is not an integer")
    try:
        timestamp = int(str(last_creation_timestamp).strip())
    except (TypeError, ValueError):
        raise InvalidCursorError("creation timestamp is not an integer")
    if timestamp < 0:
        raise InvalidCursorError("creation timestamp is negative")
    if timestamp > MAX_INT64:
        raise InvalidCursorError("creation timestamp exceeds int64")

    return Cursor(
        id=DocumentId(str(last_id)),
        creation_timestamp=UnixTimestamp(timestamp),
    )
