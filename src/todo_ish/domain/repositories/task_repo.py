"""
Task repository interface (Port).

Abstract interface for task persistence operations. Implementations live in
the infrastructure layer and must honour the same success/failure contract so
the HTTP layer stays implementation-agnostic.
"""
from abc import ABC, abstractmethod
from uuid import UUID

from ..models.task import Task


class TaskRepository(ABC):
    """Abstract repository for Task persistence operations."""

    @abstractmethod
    async def save(self, task: Task) -> None:
        """
        Persist a new task.

        The caller supplies a fully formed task, including its id.

        Args:
            task: Task domain model to persist

        Raises:
            CreationError: If the store rejects the write (duplicate id included)
        """
        pass

    @abstractmethod
    async def get_all(self) -> list[Task]:
        """
        Fetch every stored task.

        Returns:
            List of Task domain models, empty when nothing is stored

        Raises:
            GetTaskError: If the store cannot be read
        """
        pass

    @abstractmethod
    async def get_by_id(self, task_id: UUID) -> Task:
        """
        Fetch task by ID.

        Args:
            task_id: Unique identifier of the task

        Returns:
            The matching Task

        Raises:
            IdNotFound: If no task has this id
        """
        pass

    @abstractmethod
    async def update(self, task_id: UUID) -> None:
        """
        Mark a task as done.

        Re-updating a task that is already done succeeds.

        Args:
            task_id: Unique identifier of the task

        Raises:
            IdNotFound: If no task has this id
            DbError: If the write itself fails
        """
        pass
