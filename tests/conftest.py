import os
import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool


os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["DATABASE_URL_SYNC"] = "sqlite:///:memory:"
os.environ.pop("LOG_DIR", None)

from account_service.main import app
from account_service.core.db import Base, get_db


@pytest_asyncio.fixture(scope="function")
async def async_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        future=True,
        echo=False,
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def async_session(async_engine):
    async_session_maker = async_sessionmaker(
        async_engine, class_=AsyncSession, expire_on_commit=False
    )
    async with async_session_maker() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def async_app(async_session):
    async def override_get_db():
        yield async_session

    app.dependency_overrides[get_db] = override_get_db

    yield app
    app.dependency_overrides.clear()


@pytest_asyncio.fixture(scope="function")
async def client(async_app):
    transport = ASGITransport(app=async_app)
    async with AsyncClient(
        transport=transport, base_url="http://test/api/v1"
    ) as ac:
        yield ac


@pytest.fixture
def account_request():
    return {
        "firstName": "Jaime",
        "lastName": "Flores",
        "accountPin": "1234",
        "confAccountPin": "1234",
        "holderIdNumber": "1235454SN123",
    }
