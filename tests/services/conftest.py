"""Service test fixtures — fake store, SQLite-backed store, FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - The client fixture sets app.state directly (httpx ASGITransport skips the lifespan)
    - The clock is pinned so timestamps are predictable
"""

import pytest
from sqlalchemy.ext.asyncio import create_async_engine
from httpx import ASGITransport, AsyncClient

from docstore.db.base import Base
from docstore.infrastructure.database import DatabaseSessionManager
from docstore.infrastructure.sql_document_store import SqlDocumentStore
from docstore.services.document_service import DocumentService
from docstore.main import app
import docstore.models  # noqa: F401

from tests.services.fake_store import FakeClock, FakeDocumentStore


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def fake_store():
    return FakeDocumentStore()


@pytest.fixture
def service(fake_store, clock):
    return DocumentService(fake_store, page_size=10, clock=clock)


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def db_manager(test_engine):
    return DatabaseSessionManager.from_engine(test_engine)


@pytest.fixture
def sql_store(db_manager):
    return SqlDocumentStore(db_manager)


@pytest.fixture
async def client(db_manager, sql_store, clock):
    """FastAPI test client over a SQLite-backed DocumentService with page_size=2."""
    app.state.db_manager = db_manager
    app.state.document_service = DocumentService(
        sql_store, page_size=2, clock=clock,
    )

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    del app.state.document_service
    del app.state.db_manager
