"""Document Service — orchestrates validation, conditional writes, conflict resolution, paging.

Invariants:
    - Every operation returns an OperationResult and never raises
    - Each operation is one linear pass; store calls are awaited strictly one after another
    - Invalid input (400) and malformed cursors (400) never reach the store
    - Timestamps are server-assigned; on update the caller's revision is the expected
      revision and the written revision is exactly one more
    - ConditionFailed goes to ConflictResolver; StoreFailure short-circuits to 500
    - No retries: a 409 is handed back so the caller can re-base

Design Decisions:
    - Store injected at construction: the process builds it once, tests pass fakes
    - Clock injected as a callable so tests pin timestamps
"""

import logging
import time
from dataclasses import replace
from typing import Callable

from docstore.core.domain_types import (
    Cursor, Document, DocumentId, Operation, Revision, UnixTimestamp,
)
from docstore.core.errors import InvalidCursorError
from docstore.core.operation_result import (
    OperationResult, failed, invalid, not_found, ok,
)
from docstore.core.pagination import (
    DEFAULT_PAGE_SIZE, fetch_size, paginate, parse_cursor,
)
from docstore.core.repository_protocols import DocumentStore
from docstore.core.store_results import ConditionFailed, Ok, StoreFailure
from docstore.core.validation import validate
from docstore.services.conflict_resolver import ConflictResolver

logger = logging.getLogger(__name__)


def unix_now() -> UnixTimestamp:
    return UnixTimestamp(int(time.time()))


class DocumentService:
    """Create / update / delete / get / list over a DocumentStore."""

    def __init__(
        self,
        store: DocumentStore,
        page_size: int = DEFAULT_PAGE_SIZE,
        clock: Callable[[], int] = unix_now,
    ):
        if page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {page_size}")
        self._store = store
        self._page_size = page_size
        self._clock = clock
        self._resolver = ConflictResolver(store)

    @property
    def page_size(self) -> int:
        return self._page_size

    # ─── Writes ──────────────────────────────────────────────────

    async def create(self, document: Document) -> OperationResult:
        errors = validate(document)
        if errors:
            return invalid(document, errors)

        now = UnixTimestamp(self._clock())
        candidate = replace(
            document, creation_timestamp=now, update_timestamp=now,
        )

        match await self._store.create(candidate):
            case Ok(value=stored):
                logger.info(
                    "Document created",
                    extra={"document_id": stored.id, "operation": Operation.CREATE.value},
                )
                return ok(stored)
            case ConditionFailed():
                return await self._resolver.resolve_create(candidate)
            case failure:
                self._log_failure(Operation.CREATE, failure, candidate.id)
                return failed(candidate)

    async def update(self, document: Document) -> OperationResult:
        errors = validate(document)
        if errors:
            return invalid(document, errors)

        old_revision = document.revision
        candidate = replace(
            document,
            update_timestamp=UnixTimestamp(self._clock()),
            revision=Revision(old_revision + 1),
        )

        match await self._store.update(old_revision, candidate):
            case Ok(value=stored):
                logger.info(
                    f"Document updated to revision {stored.revision}",
                    extra={"document_id": stored.id, "operation": Operation.UPDATE.value},
                )
                return ok(stored)
            case ConditionFailed():
                return await self._resolver.resolve_update(candidate)
            case failure:
                self._log_failure(Operation.UPDATE, failure, candidate.id)
                return failed(candidate)

    async def delete(self, document_id: DocumentId) -> OperationResult:
        match await self._store.delete(document_id):
            case Ok(value=True):
                logger.info(
                    "Document deleted",
                    extra={"document_id": document_id, "operation": Operation.DELETE.value},
                )
                return ok(document_id)
            case Ok(value=False):
                return not_found(document_id)
            case failure:
                self._log_failure(Operation.DELETE, failure, document_id)
                return failed(document_id)

    # ─── Reads ───────────────────────────────────────────────────

    async def get(self, document_id: DocumentId) -> OperationResult:
        match await self._store.get(document_id):
            case Ok(value=None):
                return not_found(document_id)
            case Ok(value=stored):
                return ok(stored)
            case failure:
                self._log_failure(Operation.GET, failure, document_id)
                return failed(document_id)

    async def list_first(self) -> OperationResult:
        return await self._list(None, Operation.LIST_FIRST)

    async def list_after(
        self, last_id: str | None, last_creation_timestamp: object,
    ) -> OperationResult:
        try:
            cursor = parse_cursor(last_id, last_creation_timestamp)
        except InvalidCursorError as e:
            logger.warning(
                f"Rejected cursor: {e.reason}",
                extra={"operation": Operation.LIST_AFTER.value, "error_code": e.code},
            )
            return invalid(None, [e.message])
        return await self._list(cursor, Operation.LIST_AFTER)

    async def _list(
        self, after: Cursor | None, operation: Operation,
    ) -> OperationResult:
        match await self._store.scan(fetch_size(self._page_size), after):
            case Ok(value=documents):
                return ok(paginate(documents, self._page_size))
            case failure:
                self._log_failure(operation, failure)
                return failed(None)

    # ─── Helpers ─────────────────────────────────────────────────

    def _log_failure(
        self,
        operation: Operation,
        failure: object,
        document_id: str | None = None,
    ) -> None:
        detail = (
            failure.describe() if isinstance(failure, StoreFailure)
            else f"unexpected store result {failure!r}"
        )
        logger.error(
            f"Document {operation.value} failed: {detail}",
            extra={
                "document_id": document_id,
                "operation": operation.value,
                "error_code": "STORE_FAILURE",
            },
        )
