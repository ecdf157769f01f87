"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection
    - Store methods report outcomes as store_results variants, they do not raise

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Async in Protocol: boundary methods are async because implementations do IO,
      but core pure functions never await — services/ orchestrates the calls
"""

from typing import Protocol

from docstore.core.domain_types import Cursor, Document, DocumentId, Revision
from docstore.core.store_results import (
    DeleteResult, LookupResult, ScanResult, WriteResult,
)


class DocumentStore(Protocol):
    """Versioned key-value store with conditional writes — implemented by shell."""

    async def create(self, document: Document) -> WriteResult:
        """Insert only if no document with document.id exists."""
        ...

    async def update(
        self, expected_revision: Revision, document: Document,
    ) -> WriteResult:
        """Write title/description/body/update_timestamp/revision only if the
        stored revision equals expected_revision (ConditionFailed when missing)."""
        ...

    async def get(self, document_id: DocumentId) -> LookupResult: ...

    async def delete(self, document_id: DocumentId) -> DeleteResult: ...

    async def scan(self, limit: int, after: Cursor | None = None) -> ScanResult:
        """Up to `limit` documents ordered by (creation_timestamp, id), strictly after `after`."""
        ...
