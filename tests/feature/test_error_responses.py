"""
Feature tests for TaskError → HTTP translation.

A mocked repository raises each error kind so the handler's status codes
and messages can be checked without a failing database.
"""
from typing import AsyncGenerator
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest
from httpx import ASGITransport, AsyncClient

from todo_ish.dependencies import get_task_repository
from todo_ish.domain.repositories.task_repo import TaskRepository
from todo_ish.exceptions import CreationError, DbError, GetTaskError, IdNotFound
from todo_ish.main import app


@pytest.fixture
def failing_repo() -> AsyncMock:
    """Create a mocked TaskRepository."""
    return AsyncMock(spec=TaskRepository)


@pytest.fixture
async def failing_client(failing_repo: AsyncMock) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client wired to the mocked repository."""
    app.dependency_overrides[get_task_repository] = lambda: failing_repo

    transport = ASGITransport(app=app)  # type: ignore
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


async def test_list_failure_returns_500(
    failing_client: AsyncClient, failing_repo: AsyncMock
) -> None:
    """Should map GetTaskError to 500."""
    failing_repo.get_all.side_effect = GetTaskError()

    response = await failing_client.get("/v1/tasks/")

    assert response.status_code == 500
    assert response.json() == {"message": "Could not get tasks"}


async def test_create_failure_returns_500(
    failing_client: AsyncClient, failing_repo: AsyncMock
) -> None:
    """Should map CreationError to 500."""
    failing_repo.save.side_effect = CreationError()

    response = await failing_client.post("/v1/tasks/", json={"name": "doomed"})

    assert response.status_code == 500
    assert response.json() == {"message": "Could not create task"}


async def test_update_failure_returns_500(
    failing_client: AsyncClient, failing_repo: AsyncMock
) -> None:
    """Should map DbError to 500 with a generic message."""
    failing_repo.update.side_effect = DbError()

    response = await failing_client.patch(f"/v1/tasks/{uuid4()}")

    assert response.status_code == 500
    assert response.json() == {"message": "System failure. Please try again later"}


async def test_update_missing_returns_404(
    failing_client: AsyncClient, failing_repo: AsyncMock
) -> None:
    """Should map IdNotFound on update to 404."""
    failing_repo.update.side_effect = IdNotFound()

    response = await failing_client.patch(f"/v1/tasks/{uuid4()}")

    assert response.status_code == 404
    assert response.json() == {"message": "Task not found"}


async def test_database_outage_returns_json_message(
    unreachable_repository: TaskRepository,
) -> None:
    """Should answer with the {"message"} body when the database is down."""
    app.dependency_overrides[get_task_repository] = lambda: unreachable_repository
    transport = ASGITransport(app=app)  # type: ignore
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            create_response = await client.post("/v1/tasks/", json={"name": "offline"})
            list_response = await client.get("/v1/tasks/")
            patch_response = await client.patch(f"/v1/tasks/{uuid4()}")
    finally:
        app.dependency_overrides.clear()

    assert create_response.status_code == 500
    assert create_response.json() == {"message": "Could not create task"}
    assert list_response.status_code == 500
    assert list_response.json() == {"message": "Could not get tasks"}
    assert patch_response.status_code == 500
    assert patch_response.json() == {"message": "System failure. Please try again later"}


async def test_error_message_does_not_leak_details(
    failing_client: AsyncClient, failing_repo: AsyncMock
) -> None:
    """Should ignore any text attached to the raised error."""
    failing_repo.get_all.side_effect = GetTaskError("relation \"tasks\" does not exist")

    response = await failing_client.get("/v1/tasks/")

    assert response.json() == {"message": "Could not get tasks"}
