"""Task model for Task API."""

from typing import ClassVar

from pydantic import BaseModel, Field


class Task(BaseModel):
    """Task entity model."""

    id: str = Field(..., description="Unique identifier for the task")
    title: str = Field(..., description="Short title of the task")
    description: str = Field(..., description="Free-form task description")

    class Config:
        """Pydantic config."""

        json_schema_extra: ClassVar[dict] = {
            "example": {
                "id": "t001",
                "title": "Write docs",
                "description": "Document the task endpoints",
            }
        }
