"""Pydantic DTOs (Data Transfer Objects) for the Task endpoints."""

from datetime import datetime

from pydantic import AliasChoices, ConfigDict, Field

from leaseify.application.schemas.records import WireModel


class TaskCreate(WireModel):
    """Schema for creating a task. Title presence is checked by the service."""

    title: str | None = Field(None, max_length=200, examples=["Fix sink"])
    due_date: datetime | None = None


class TaskUpdate(WireModel):
    """Schema for toggling a task."""

    is_completed: bool


class TaskResponse(WireModel):
    """Schema returned to the client."""

    id: str = Field(
        validation_alias=AliasChoices("id", "_id"),
        serialization_alias="_id",
    )
    title: str
    is_completed: bool
    due_date: datetime | None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class DeletedResponse(WireModel):
    """Acknowledgement returned by delete endpoints."""

    id: str
    message: str
