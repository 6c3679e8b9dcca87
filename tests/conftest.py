"""
Shared pytest fixtures for all tests.

Provides test database setup, repository fixtures and the HTTP client.
"""
from typing import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool, StaticPool

from todo_ish.database import Base
from todo_ish.dependencies import get_task_repository
from todo_ish.domain.repositories.task_repo import TaskRepository
from todo_ish.infrastructure.repositories.in_memory_task_repo import InMemoryTaskRepository
from todo_ish.infrastructure.repositories.postgres_task_repo import PostgresTaskRepository
from todo_ish.main import app


@pytest.fixture(scope="function")
async def test_db_engine() -> AsyncGenerator[AsyncEngine, None]:
    """
    Create a test database engine.

    Uses in-memory SQLite with StaticPool to share connection across async tasks.
    For PostgreSQL-specific features, use testcontainers in separate tests.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(test_db_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the test engine."""
    return async_sessionmaker(
        test_db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture
def sql_repository(session_factory: async_sessionmaker[AsyncSession]) -> PostgresTaskRepository:
    """SQL-backed repository running on the SQLite test engine."""
    return PostgresTaskRepository(session_factory)


@pytest.fixture
async def unreachable_repository() -> AsyncGenerator[PostgresTaskRepository, None]:
    """
    SQL-backed repository whose every connection attempt is refused.

    The error is raised by the connection creator, the same place asyncpg
    raises it when the server is down, so SQLAlchemy does not wrap it.
    """

    async def refuse_connection():
        raise ConnectionRefusedError(111, "Connect call failed ('127.0.0.1', 1)")

    engine = create_async_engine(
        "sqlite+aiosqlite://",
        async_creator=refuse_connection,
        poolclass=NullPool,
    )

    yield PostgresTaskRepository(async_sessionmaker(engine, expire_on_commit=False))

    await engine.dispose()


@pytest.fixture
def memory_repository() -> InMemoryTaskRepository:
    """Fresh in-memory repository."""
    return InMemoryTaskRepository()


@pytest.fixture(params=["memory", "sql"])
def repository(
    request: pytest.FixtureRequest,
    session_factory: async_sessionmaker[AsyncSession],
) -> TaskRepository:
    """Each TaskRepository implementation in turn."""
    if request.param == "memory":
        return InMemoryTaskRepository()
    return PostgresTaskRepository(session_factory)


@pytest.fixture
async def client(repository: TaskRepository) -> AsyncGenerator[AsyncClient, None]:
    """
    Create test HTTP client with overridden dependencies.

    Runs once per repository implementation.
    """
    app.dependency_overrides[get_task_repository] = lambda: repository

    transport = ASGITransport(app=app)  # type: ignore
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
