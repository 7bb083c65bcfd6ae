"""User model for User API."""

from typing import ClassVar

from pydantic import BaseModel, Field


class User(BaseModel):
    """User entity model."""

    id: str = Field(..., description="Unique identifier for the user")
    name: str = Field(..., description="Full name of the user")
    email: str = Field(..., description="Email address of the user")
    password: str = Field(..., description="User password")

    class Config:
        """Pydantic config."""

        json_schema_extra: ClassVar[dict] = {
            "example": {
                "id": "f001",
                "name": "Jane Doe",
                "email": "jane.doe@example.com",
                "password": "Abcdef1!",
            }
        }
