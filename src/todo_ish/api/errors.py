"""
HTTP translation of task storage errors.

Each TaskError kind maps to a status code and a generic message. Nothing from
the underlying storage failure is included in the response.
"""
from fastapi import Request, status
from fastapi.responses import JSONResponse

from ..exceptions import TaskError, TaskErrorKind
from .schemas.task_schemas import ErrorResponse

ERROR_RESPONSES: dict[TaskErrorKind, tuple[int, str]] = {
    TaskErrorKind.ID_NOT_FOUND: (status.HTTP_404_NOT_FOUND, "Task not found"),
    TaskErrorKind.CREATION_ERROR: (
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Could not create task",
    ),
    TaskErrorKind.GET_TASK_ERROR: (
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Could not get tasks",
    ),
    TaskErrorKind.DB_ERROR: (
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "System failure. Please try again later",
    ),
}


def task_error_response(error: TaskError) -> JSONResponse:
    """Render a TaskError as a status code plus {"message": ...} body."""
    status_code, message = ERROR_RESPONSES[error.kind]
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(message=message).model_dump(),
    )


async def task_error_handler(request: Request, exc: TaskError) -> JSONResponse:
    """FastAPI exception handler for TaskError."""
    return task_error_response(exc)
