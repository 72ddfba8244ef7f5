"""Test fixtures for the RBAC Registry."""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from shared.config import AuditSettings
from shared.database import Base

from app.services.audit import AuditClient

# Use SQLite for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
TEST_API_KEY = "test-api-key"


@pytest_asyncio.fixture
async def test_engine():
    """Create test database engine.

    StaticPool keeps one connection so every session sees the same
    in-memory database.
    """
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def test_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create test database session."""
    session_factory = async_sessionmaker(test_engine, expire_on_commit=False)
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def disabled_audit() -> AsyncGenerator[AuditClient, None]:
    """Audit client that never sends anything."""
    client = AuditClient(AuditSettings(enabled=False), source="rbac-registry")
    yield client
    await client.close()


@pytest_asyncio.fixture
async def test_app(test_engine, disabled_audit):
    """The FastAPI app wired to the test database."""
    from app.main import app

    original_settings = app.state.settings
    app.state.settings = original_settings.model_copy(update={"rbac_api_key": TEST_API_KEY})
    app.state.db_engine = test_engine
    app.state.session_factory = async_sessionmaker(test_engine, expire_on_commit=False)
    app.state.audit = disabled_audit

    yield app

    app.state.settings = original_settings


@pytest_asyncio.fixture
async def test_client(test_app) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client sending a valid API key."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(
        transport=transport,
        base_url="http://test",
        headers={"x-api-key": TEST_API_KEY},
    ) as client:
        yield client


@pytest_asyncio.fixture
async def anonymous_client(test_app) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client sending no API key."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def sample_service_data():
    """Sample service data for testing."""
    return {
        "name": "Billing",
        "operations": [{"name": "read-invoices"}, {"name": "write-invoices"}],
    }


@pytest.fixture
def make_service(test_client: AsyncClient):
    """Register a service over the API and return its body."""

    async def _make(name: str = "Billing", operations=("op1",)) -> dict:
        response = await test_client.post(
            "/api/v1/services",
            json={"name": name, "operations": [{"name": op} for op in operations]},
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _make


@pytest.fixture
def make_role(test_client: AsyncClient):
    """Create a role over the API and return its body."""

    async def _make(name: str, service_op_ids: list[str]) -> dict:
        response = await test_client.post(
            "/api/v1/roles", json={"name": name, "serviceOpIds": service_op_ids}
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _make
