"""
Dependency injection for FastAPI routes.

Provides factory functions for the service and the repository wired at startup.
"""
from fastapi import Depends, Request

from .domain.repositories.task_repo import TaskRepository
from .domain.services.task_service import TaskService


def get_task_repository(request: Request) -> TaskRepository:
    """
    Dependency for getting the TaskRepository built during app startup.

    Args:
        request: Incoming request (injected by FastAPI)

    Returns:
        The repository stored on app.state by the lifespan
    """
    return request.app.state.task_repository


def get_task_service(
    repository: TaskRepository = Depends(get_task_repository),
) -> TaskService:
    """
    Dependency for getting TaskService with injected repository.

    Args:
        repository: TaskRepository implementation (injected by FastAPI)

    Returns:
        TaskService instance
    """
    return TaskService(task_repo=repository)
