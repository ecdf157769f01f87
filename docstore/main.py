"""docstore API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map DocStoreError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database manager, store and DocumentService built once in the lifespan and kept
      on app.state; nothing is constructed lazily on first request
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from docstore.api.error_handlers import register_error_handlers
from docstore.api.routes import documents, health
from docstore.config import Settings, get_settings
from docstore.infrastructure.database import DatabaseSessionManager
from docstore.infrastructure.observability import setup_logging
from docstore.infrastructure.sql_document_store import SqlDocumentStore
from docstore.services.document_service import DocumentService

logger = logging.getLogger(__name__)


def build_document_service(
    db_manager: DatabaseSessionManager, settings: Settings,
) -> DocumentService:
    store = SqlDocumentStore(db_manager, settings.documents_table_name)
    return DocumentService(store, page_size=settings.page_size)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db_manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    app.state.db_manager = db_manager
    app.state.document_service = build_document_service(db_manager, settings)
    logger.info("docstore API started")
    yield
    logger.info("docstore API shutting down")
    await db_manager.dispose()


app = FastAPI(title="docstore API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(documents.router)

register_error_handlers(app)
