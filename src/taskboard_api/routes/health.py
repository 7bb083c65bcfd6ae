"""Health check routes."""

from fastapi import APIRouter, Depends

from taskboard_api.models.health import PingResponse
from taskboard_api.services import get_user_service
from taskboard_common.services.user_service import UserService

router = APIRouter(tags=["health"])


@router.get("/ping", response_model=PingResponse)
def ping(service: UserService = Depends(get_user_service)) -> PingResponse:
    """Health probe.

    Reads the full user collection so a broken store connection surfaces
    as a 500 instead of a false positive.

    Returns:
        PingResponse with every stored user
    """
    return PingResponse(message="Pong!", result=service.list_users())
