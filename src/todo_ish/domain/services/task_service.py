"""
Task service - business logic for task management.

Accepts the repository interface for dependency injection, so the same
service runs on top of either storage implementation.
"""
from uuid import UUID, uuid4

from ..models.task import Task
from ..repositories.task_repo import TaskRepository


class TaskService:
    """Service layer for task operations."""

    def __init__(self, task_repo: TaskRepository) -> None:
        """
        Initialize service with repository dependency.

        Args:
            task_repo: TaskRepository interface
        """
        self._task_repo = task_repo

    async def create_task(self, name: str) -> Task:
        """
        Create a new task.

        The id is generated here, never by the store.

        Args:
            name: Task name

        Returns:
            Newly created Task instance

        Raises:
            CreationError: If the task could not be persisted
        """
        task = Task(id=uuid4(), name=name, done=False)

        await self._task_repo.save(task)
        return task

    async def list_tasks(self) -> list[Task]:
        """List all tasks."""
        return await self._task_repo.get_all()

    async def get_task(self, task_id: UUID) -> Task:
        """
        Fetch task by ID.

        Raises:
            IdNotFound: If task doesn't exist
        """
        return await self._task_repo.get_by_id(task_id)

    async def complete_task(self, task_id: UUID) -> None:
        """
        Mark task as done.

        Raises:
            IdNotFound: If task doesn't exist
            DbError: If the update could not be written
        """
        await self._task_repo.update(task_id)
