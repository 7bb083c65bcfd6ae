"""Health check response models."""

from typing import ClassVar

from pydantic import BaseModel

from taskboard_common.models.user import User


class PingResponse(BaseModel):
    """Ping response model."""

    message: str = "Pong!"
    result: list[User]

    class Config:
        """Pydantic config."""

        json_schema_extra: ClassVar[dict] = {
            "example": {
                "message": "Pong!",
                "result": [
                    {
                        "id": "f001",
                        "name": "Jane Doe",
                        "email": "jane.doe@example.com",
                        "password": "Abcdef1!",
                    }
                ],
            }
        }
