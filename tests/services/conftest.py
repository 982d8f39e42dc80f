"""Service test fixtures - in-memory repository, SQLite DB and FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory repository and a fresh in-memory SQLite database
    - get_db_manager dependency overridden to use the test database
    - db_manager patched for the readiness probe, which reads it directly

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for adapter and route tests
    - Service fixture uses a fixed clock so age assertions are exact
"""

from datetime import date

import pytest
from httpx import ASGITransport, AsyncClient

import user_api.infrastructure.database as db_module
from user_api.db.base import Base
from user_api.infrastructure.database import DatabaseSessionManager, get_db_manager
from user_api.infrastructure.memory_repository import InMemoryUserRepository
from user_api.infrastructure.user_repository import SqlAlchemyUserRepository
from user_api.main import app
from user_api.services.user_service import UserService
import user_api.models  # noqa: F401

TODAY = date(2024, 6, 15)


@pytest.fixture
def memory_repo():
    return InMemoryUserRepository()


@pytest.fixture
def service(memory_repo):
    return UserService(memory_repo, clock=lambda: TODAY)


@pytest.fixture
async def test_db_manager():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    async with manager.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield manager
    async with manager.engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await manager.dispose()


@pytest.fixture
def sql_repo(test_db_manager):
    return SqlAlchemyUserRepository(test_db_manager)


@pytest.fixture
async def client(test_db_manager):
    """FastAPI test client with the DB manager overridden."""
    app.dependency_overrides[get_db_manager] = lambda: test_db_manager

    original_manager = db_module.db_manager
    db_module.db_manager = test_db_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
