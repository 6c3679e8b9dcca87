"""
In-memory implementation of TaskRepository.

Used for tests and the demo mode (STORAGE_BACKEND=memory). All four operations
are serialized by a single asyncio.Lock around the backing list.
"""
import asyncio
import logging
from uuid import UUID

from ...domain.models.task import Task
from ...domain.repositories.task_repo import TaskRepository
from ...exceptions import CreationError, IdNotFound

logger = logging.getLogger(__name__)


class InMemoryTaskRepository(TaskRepository):
    """In-process Task repository backed by a lock-guarded list."""

    def __init__(self) -> None:
        self._tasks: list[Task] = []
        self._lock = asyncio.Lock()

    async def save(self, task: Task) -> None:
        """Append a copy of the task."""
        async with self._lock:
            if any(existing.id == task.id for existing in self._tasks):
                logger.error(f"Task {task.id} already exists in memory store")
                raise CreationError()
            self._tasks.append(task.model_copy())
            logger.info(f"Task {task.id} saved")

    async def get_all(self) -> list[Task]:
        """Return a snapshot of every stored task, in insertion order."""
        async with self._lock:
            return [task.model_copy() for task in self._tasks]

    async def get_by_id(self, task_id: UUID) -> Task:
        """Fetch task by ID."""
        async with self._lock:
            task = self._find(task_id)
            if task is None:
                logger.debug(f"Task {task_id} not found in memory store")
                raise IdNotFound()
            return task.model_copy()

    async def update(self, task_id: UUID) -> None:
        """Mark the task as done."""
        async with self._lock:
            task = self._find(task_id)
            if task is None:
                logger.debug(f"Task {task_id} not found in memory store")
                raise IdNotFound()
            task.mark_done()

    def _find(self, task_id: UUID) -> Task | None:
        # caller holds the lock
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None
