"""
Domain exceptions for todo_ish.

All domain errors inherit from DomainError. Storage failures are translated
into one of the TaskError kinds at the repository boundary, so callers never
see a driver exception.
"""
from enum import Enum


class DomainError(Exception):
    """Base exception for all domain-level errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidStateTransition(DomainError):
    """Raised when attempting an invalid state machine transition."""

    def __init__(self, entity_type: str, current_state: str, attempted_action: str) -> None:
        self.entity_type = entity_type
        self.current_state = current_state
        self.attempted_action = attempted_action
        super().__init__(
            f"Cannot {attempted_action} {entity_type} in state {current_state}"
        )


class TaskErrorKind(str, Enum):
    """Failure kinds surfaced by task storage operations."""

    ID_NOT_FOUND = "id_not_found"
    CREATION_ERROR = "creation_error"
    GET_TASK_ERROR = "get_task_error"
    DB_ERROR = "db_error"


class TaskError(DomainError):
    """Base for task storage failures. Carries only its kind."""

    kind: TaskErrorKind
    default_message = "Task storage failure"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class IdNotFound(TaskError):
    """Raised when a lookup or update targets an id that does not exist."""

    kind = TaskErrorKind.ID_NOT_FOUND
    default_message = "Task not found"


class CreationError(TaskError):
    """Raised when persisting a new task fails."""

    kind = TaskErrorKind.CREATION_ERROR
    default_message = "Could not create task"


class GetTaskError(TaskError):
    """Raised when bulk retrieval of tasks fails."""

    kind = TaskErrorKind.GET_TASK_ERROR
    default_message = "Could not get tasks"


class DbError(TaskError):
    """Raised when a storage write fails for a reason other than a missing id."""

    kind = TaskErrorKind.DB_ERROR
    default_message = "Database failure"
