"""
API schemas (DTOs) for Task endpoints.

Request and response models for task operations.
"""
from uuid import UUID

from pydantic import BaseModel, Field

from ...domain.models.task import Task


class TaskCreate(BaseModel):
    """Request schema for creating a new task."""

    name: str = Field(..., description="Task name")


class TaskResponse(BaseModel):
    """Response schema for task data."""

    id: UUID
    name: str
    done: bool

    @classmethod
    def from_domain(cls, task: Task) -> "TaskResponse":
        """
        Convert domain model to API response.

        Args:
            task: Task domain model

        Returns:
            TaskResponse DTO
        """
        return cls(id=task.id, name=task.name, done=task.done)

    model_config = {
        "json_schema_extra": {
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "name": "Feed the cow",
                "done": False,
            }
        }
    }


class ErrorResponse(BaseModel):
    """Response schema for failed requests."""

    message: str
