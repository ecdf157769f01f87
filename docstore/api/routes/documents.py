"""Documents — HTTP adapter over DocumentService.

Invariants:
    - PUT creates, POST updates, DELETE/GET address one document by id
    - GET without cursor parameters lists the first page; with either parameter it
      lists the page after that cursor (a half-given cursor is a 400)
    - Response status is the OperationResult status; body is OperationResult.to_response()
"""

import logging

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from docstore.api.dependencies import get_document_service
from docstore.core.domain_types import DocumentId
from docstore.core.operation_result import OperationResult
from docstore.schemas.document import DocumentPayload
from docstore.services.document_service import DocumentService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/documents", tags=["documents"])


def _respond(result: OperationResult) -> JSONResponse:
    return JSONResponse(
        status_code=int(result.status_code), content=result.to_response(),
    )


@router.put("")
async def create_document(
    body: DocumentPayload,
    service: DocumentService = Depends(get_document_service),
):
    """Create a document; retrying an identical create is a 200."""
    return _respond(await service.create(body.to_document()))


@router.post("")
async def update_document(
    body: DocumentPayload,
    service: DocumentService = Depends(get_document_service),
):
    """Update a document; body.revision is the revision the caller last saw."""
    return _respond(await service.update(body.to_document()))


@router.delete("/{document_id}")
async def delete_document(
    document_id: str,
    service: DocumentService = Depends(get_document_service),
):
    return _respond(await service.delete(DocumentId(document_id)))


@router.get("/{document_id}")
async def get_document(
    document_id: str,
    service: DocumentService = Depends(get_document_service),
):
    return _respond(await service.get(DocumentId(document_id)))


@router.get("")
async def list_documents(
    last_id: str | None = Query(None, alias="lastID"),
    last_creation_timestamp: str | None = Query(
        None, alias="lastCreationTimestamp",
    ),
    service: DocumentService = Depends(get_document_service),
):
    """List one page of documents ordered by creation time."""
    if last_id is None and last_creation_timestamp is None:
        return _respond(await service.list_first())
    return _respond(
        await service.list_after(last_id, last_creation_timestamp),
    )
