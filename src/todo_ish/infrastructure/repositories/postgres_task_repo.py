"""
PostgreSQL implementation of TaskRepository.

Maps between Task domain models and TaskORM database models. Every operation
opens its own session from the factory, so a pooled connection is held only
for the duration of that call. Storage failures are logged here and re-raised
as an opaque TaskError kind.
"""
import logging
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ...database import TaskORM
from ...domain.models.task import Task
from ...domain.repositories.task_repo import TaskRepository
from ...exceptions import CreationError, DbError, GetTaskError, IdNotFound, TaskError

logger = logging.getLogger(__name__)

# asyncpg raises connection failures as OSError, which SQLAlchemy does not wrap
STORAGE_ERRORS = (SQLAlchemyError, OSError)


class PostgresTaskRepository(TaskRepository):
    """PostgreSQL implementation of the Task repository."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """
        Initialize repository with a session factory.

        Args:
            session_factory: SQLAlchemy async session factory bound to the pool
        """
        self._session_factory = session_factory

    async def save(self, task: Task) -> None:
        """Insert a single task row."""
        try:
            async with self._session_factory.begin() as session:
                session.add(self._from_domain(task))
        except STORAGE_ERRORS as exc:
            raise self._storage_error("save", exc, CreationError()) from None

    async def get_all(self) -> list[Task]:
        """Fetch all tasks, most recently created first."""
        try:
            async with self._session_factory() as session:
                result = await session.execute(
                    select(TaskORM).order_by(TaskORM.created_at.desc())
                )
                orm_objs = result.scalars().all()
                return [self._to_domain(obj) for obj in orm_objs]
        except STORAGE_ERRORS as exc:
            raise self._storage_error("get_all", exc, GetTaskError()) from None

    async def get_by_id(self, task_id: UUID) -> Task:
        """
        Fetch task by ID.

        Zero rows and a failed query both surface as IdNotFound; the caller
        cannot tell a missing task from a transient database error.
        """
        try:
            async with self._session_factory() as session:
                result = await session.execute(
                    select(TaskORM).where(TaskORM.id == task_id)
                )
                return self._to_domain(result.scalar_one())
        except STORAGE_ERRORS as exc:
            raise self._storage_error("get_by_id", exc, IdNotFound()) from None

    async def update(self, task_id: UUID) -> None:
        """Set done = true for the given id, checking the affected row count."""
        try:
            async with self._session_factory.begin() as session:
                result = await session.execute(
                    update(TaskORM)
                    .where(TaskORM.id == task_id)
                    .values(done=True)
                    .execution_options(synchronize_session=False)
                )
                rows_affected = result.rowcount
        except STORAGE_ERRORS as exc:
            raise self._storage_error("update", exc, DbError()) from None

        if rows_affected == 0:
            logger.debug(f"Task {task_id} not found for update")
            raise IdNotFound()

    @staticmethod
    def _storage_error(operation: str, exc: Exception, error: TaskError) -> TaskError:
        """Log the underlying cause and hand back the opaque error to raise."""
        logger.error(f"DB error in {operation} ({error.kind.value}): {exc}")
        return error

    @staticmethod
    def _to_domain(orm_obj: TaskORM) -> Task:
        """
        Convert ORM model to domain model.

        Args:
            orm_obj: SQLAlchemy ORM object

        Returns:
            Task domain model
        """
        return Task(id=orm_obj.id, name=orm_obj.name, done=orm_obj.done)

    @staticmethod
    def _from_domain(task: Task) -> TaskORM:
        """
        Convert domain model to ORM model.

        created_at is left to the column default.

        Args:
            task: Task domain model

        Returns:
            TaskORM SQLAlchemy object
        """
        return TaskORM(id=task.id, name=task.name, done=task.done)
