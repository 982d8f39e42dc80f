"""User Routes - CRUD endpoints over user records.

Invariants:
    - Bodies are parsed by pydantic, field rules enforced by UserService
    - Path ids outside the 32-bit INTEGER range → 400 before any store access
    - Domain errors propagate to the global handlers (400 / 404 / 503)
    - DELETE returns 204 with an empty body
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response, status

from user_api.api.dependencies import get_user_service
from user_api.core.domain_types import USER_ID_MAX, USER_ID_MIN, UserId
from user_api.schemas.user import UserCreate, UserResponse, UserUpdate
from user_api.services.user_service import UserService

router = APIRouter(prefix="/api/v1/users", tags=["users"])

UserIdPath = Annotated[int, Path(ge=USER_ID_MIN, le=USER_ID_MAX)]


@router.get("", response_model=list[UserResponse])
async def list_users(service: UserService = Depends(get_user_service)):
    return await service.list_users()


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: UserIdPath, service: UserService = Depends(get_user_service),
):
    return await service.get_user(UserId(user_id))


@router.post(
    "", response_model=UserResponse, status_code=status.HTTP_201_CREATED,
)
async def create_user(
    body: UserCreate, service: UserService = Depends(get_user_service),
):
    return await service.create_user(body.name, body.dob)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: UserIdPath,
    body: UserUpdate,
    service: UserService = Depends(get_user_service),
):
    return await service.update_user(UserId(user_id), body.name, body.dob)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: UserIdPath, service: UserService = Depends(get_user_service),
):
    await service.delete_user(UserId(user_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
