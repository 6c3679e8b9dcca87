"""
Task API routes.

HTTP endpoints for task management operations. TaskError raised by the
service propagates to the handler registered in main.
"""
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from ...dependencies import get_task_service
from ...domain.services.task_service import TaskService
from ..schemas.task_schemas import ErrorResponse, TaskCreate, TaskResponse

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.get(
    "/",
    response_model=list[TaskResponse],
    summary="List all tasks",
    description="Get every task, most recently created first.",
    responses={500: {"model": ErrorResponse}},
)
async def list_tasks(
    service: TaskService = Depends(get_task_service),
) -> list[TaskResponse]:
    """List all tasks."""
    tasks = await service.list_tasks()
    return [TaskResponse.from_domain(task) for task in tasks]


@router.post(
    "/",
    response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new task",
    description="Create a new task; the server assigns the id and done=false.",
    responses={500: {"model": ErrorResponse}},
)
async def create_task(
    payload: TaskCreate,
    service: TaskService = Depends(get_task_service),
) -> TaskResponse:
    """Create a new task."""
    task = await service.create_task(name=payload.name)
    return TaskResponse.from_domain(task)


@router.get(
    "/{task_id}",
    response_model=TaskResponse,
    summary="Get task by ID",
    description="Retrieve details of a specific task.",
    responses={404: {"model": ErrorResponse}},
)
async def get_task(
    task_id: UUID,
    service: TaskService = Depends(get_task_service),
) -> TaskResponse:
    """Get task by ID."""
    task = await service.get_task(task_id)
    return TaskResponse.from_domain(task)


@router.patch(
    "/{task_id}",
    status_code=status.HTTP_200_OK,
    summary="Mark task as done",
    description="Set done=true on a task. Repeating the call is harmless.",
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def complete_task(
    task_id: UUID,
    service: TaskService = Depends(get_task_service),
) -> Response:
    """Mark task as done."""
    await service.complete_task(task_id)
    return Response(status_code=status.HTTP_200_OK)
