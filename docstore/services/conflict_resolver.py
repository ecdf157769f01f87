"""Conflict Resolver — re-reads the stored document after a failed conditional write.

Invariants:
    - Runs only after a write reported ConditionFailed, never for StoreFailure
    - Exactly one store call (get); the 200/409 decision is delegated to core
    - A failing re-read is INTERNAL_ERROR with the caller's candidate, no stored-state claim
"""

import logging

from docstore.core.conflict_resolution import reconcile_create, reconcile_update
from docstore.core.domain_types import Document, Operation
from docstore.core.operation_result import OperationResult, failed
from docstore.core.repository_protocols import DocumentStore
from docstore.core.store_results import Ok, StoreFailure

logger = logging.getLogger(__name__)


class ConflictResolver:
    """Classifies a lost conditional write as an idempotent retry or a true conflict."""

    def __init__(self, store: DocumentStore):
        self._store = store

    async def resolve_create(self, candidate: Document) -> OperationResult:
        return await self._resolve(candidate, Operation.CREATE)

    async def resolve_update(self, candidate: Document) -> OperationResult:
        return await self._resolve(candidate, Operation.UPDATE)

    async def _resolve(
        self, candidate: Document, operation: Operation,
    ) -> OperationResult:
        lookup = await self._store.get(candidate.id)
        if not isinstance(lookup, Ok):
            logger.error(
                f"Re-reading document after failed {operation.value} failed: "
                f"{_describe(lookup)}",
                extra={
                    "document_id": candidate.id,
                    "operation": operation.value,
                    "error_code": "CONFLICT_REREAD_FAILED",
                },
            )
            return failed(candidate)

        stored = lookup.value
        if operation is Operation.CREATE:
            result = reconcile_create(candidate, stored)
        else:
            result = reconcile_update(candidate, stored)

        if not result.ok:
            logger.info(
                f"Conditional {operation.value} lost to a different stored value",
                extra={
                    "document_id": candidate.id,
                    "operation": operation.value,
                    "error_code": "CONFLICT",
                },
            )
        return result


def _describe(result: object) -> str:
    if isinstance(result, StoreFailure):
        return result.describe()
    return f"unexpected store result {result!r}"
