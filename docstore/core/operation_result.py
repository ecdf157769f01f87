"""Operation Result — the value every orchestrator operation returns.

Invariants:
    - Orchestrator operations never raise: every outcome is an OperationResult
    - errors is empty unless status_code is BAD_REQUEST
    - 500 results never carry error detail (nothing internal leaks to the caller)
"""

from dataclasses import dataclass

from docstore.core.domain_types import Document, DocumentId, Page, StatusCode

Entity = Document | Page | DocumentId | None


@dataclass(frozen=True)
class OperationResult:
    entity: Entity
    status_code: StatusCode
    errors: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return self.status_code == StatusCode.OK

    def to_response(self) -> dict:
        """Render the JSON body handed back by the transport adapter."""
        entity = self.entity
        if isinstance(entity, (Document, Page)):
            entity = entity.to_dict()
        return {"entity": entity, "errors": list(self.errors)}


# ─── Constructors ────────────────────────────────────────────────

def ok(entity: Entity) -> OperationResult:
    return OperationResult(entity, StatusCode.OK)


def invalid(entity: Entity, errors: list[str]) -> OperationResult:
    return OperationResult(entity, StatusCode.BAD_REQUEST, tuple(errors))


def not_found(document_id: DocumentId) -> OperationResult:
    return OperationResult(document_id, StatusCode.NOT_FOUND)


def conflict(stored: Document | None) -> OperationResult:
    return OperationResult(stored, StatusCode.CONFLICT)


def failed(entity: Entity) -> OperationResult:
    return OperationResult(entity, StatusCode.INTERNAL_ERROR)
