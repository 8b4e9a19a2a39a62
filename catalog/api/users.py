"""
User API endpoints
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from catalog.core.errors import ErrorResponseModel
from catalog.dependencies.auth import require_admin
from catalog.dependencies.services import get_user_service
from catalog.models.user import AuthenticatedIdentity
from catalog.schemas.user import UserCreate, UserRoleResponse, UserSaveResponse
from catalog.services.user import UserService

router = APIRouter()

GUEST_ROLE = "guest"


@router.post(
    "/user",
    response_model=UserSaveResponse,
    response_model_exclude_none=True,
)
async def create_user(
    user: UserCreate,
    service: UserService = Depends(get_user_service),
):
    """
    Save a user profile the first time its email is seen.
    """
    return await service.create_user(user)


@router.get(
    "/users",
    response_model=List[Dict[str, Any]],
    responses={401: {"model": ErrorResponseModel}},
)
async def list_users(
    service: UserService = Depends(get_user_service),
    identity: AuthenticatedIdentity = Depends(require_admin),
):
    """
    Get every stored user. Requires an admin credential.
    """
    return await service.list_users()


@router.get(
    "/user/{email}",
    response_model=UserRoleResponse,
    response_model_exclude_unset=True,
    responses={404: {"model": UserRoleResponse}},
)
async def get_user_role(
    email: str,
    service: UserService = Depends(get_user_service),
):
    """
    Get the role of a user; unknown users are reported as guests.
    """
    role = await service.get_user_role(email)
    if role is None:
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"role": GUEST_ROLE})
    return role
