"""User API routes."""

from typing import Any

from fastapi import APIRouter, Body, Depends, status

from taskboard_api.models.responses import MessageResponse, UserCreatedResponse, UserListResponse
from taskboard_api.services import get_user_service
from taskboard_common.errors import NotFoundError, ValidationError
from taskboard_common.services.user_service import UserService
from taskboard_common.validation import validate_deletable_user_id, validate_new_user

router = APIRouter(prefix="/users", tags=["users"], redirect_slashes=False)


@router.get("", response_model=UserListResponse)
@router.get("/", response_model=UserListResponse)
def list_users(q: str | None = None, service: UserService = Depends(get_user_service)) -> UserListResponse:
    """List users, or those whose name matches ``%q`` when ``q`` is given."""
    if q is None:
        return UserListResponse(result=service.list_users())
    return UserListResponse(result=service.search_users(q))


@router.post("", response_model=UserCreatedResponse, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=UserCreatedResponse, status_code=status.HTTP_201_CREATED)
def add_user(
    payload: Any = Body(default=None),
    service: UserService = Depends(get_user_service),
) -> UserCreatedResponse:
    """Create a user.

    Args:
        payload: JSON body with ``id``, ``name``, ``email`` and ``password``
        service: User store

    Returns:
        Confirmation message and the stored user
    """
    user = validate_new_user(payload if isinstance(payload, dict) else {})

    if service.get_user(user.id):
        raise ValidationError("'id' ja existe.")

    if service.get_user_by_email(user.email):
        raise ValidationError("'email' ja existe")

    service.add_user(user)
    return UserCreatedResponse(message="User criado com sucesso", user=user)


@router.delete("/{user_id}", response_model=MessageResponse)
def delete_user(user_id: str, service: UserService = Depends(get_user_service)) -> MessageResponse:
    """Delete a user and every task link it owns.

    The links and the user row are removed by two separate statements.
    A failure between them leaves the user without its links.
    """
    validate_deletable_user_id(user_id)

    if not service.get_user(user_id):
        raise NotFoundError("'id' não encontrado")

    service.delete_user_tasks(user_id)
    service.delete_user(user_id)
    return MessageResponse(message="User deletado com sucesso")
