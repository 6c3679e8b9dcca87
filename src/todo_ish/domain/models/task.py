"""
Task domain model.

Represents a single to-do item. This is a pure domain model using Pydantic -
no SQLAlchemy dependencies.
"""
from typing import Any
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from ...exceptions import InvalidStateTransition


class Task(BaseModel):
    """
    Task domain model.

    The id is assigned by the creator, never by the store, and is frozen
    together with the name. The only permitted transition is
    done: False → True (via mark_done).
    """

    id: UUID = Field(default_factory=uuid4, frozen=True)
    name: str = Field(..., frozen=True, description="Human readable task name")
    done: bool = Field(default=False)

    model_config = ConfigDict(
        validate_assignment=True,
    )

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "done" and self.done and value is not True:
            raise InvalidStateTransition(
                entity_type="Task",
                current_state="done",
                attempted_action="reopen",
            )
        super().__setattr__(name, value)

    def mark_done(self) -> None:
        """
        Mark the task as completed.

        Idempotent: calling it on a task that is already done is a no-op.
        """
        self.done = True
