"""Route Dependencies — hand out the per-process objects built in the lifespan.

Invariants:
    - The lifespan is the only place that constructs DatabaseSessionManager and DocumentService
    - Routes receive them through Depends, tests replace them with dependency_overrides
    - A request served before the lifespan wired the service is a 503, not a crash
"""

from fastapi import Request

from docstore.core.errors import ServiceUnavailableError
from docstore.infrastructure.database import DatabaseSessionManager
from docstore.services.document_service import DocumentService


def get_db_manager(request: Request) -> DatabaseSessionManager | None:
    return getattr(request.app.state, "db_manager", None)


def get_document_service(request: Request) -> DocumentService:
    service = getattr(request.app.state, "document_service", None)
    if service is None:
        raise ServiceUnavailableError("document_service")
    return service
