# taskhub/adapters/api/routers/users.py
from typing import List

from fastapi import APIRouter, Depends, Response, status

from taskhub.adapters.api.dependencies import (
    get_create_user_use_case,
    get_delete_user_use_case,
    get_get_user_use_case,
    get_list_users_use_case,
    get_update_user_use_case,
)
from taskhub.adapters.api.schemas import (
    CreateUserRequest,
    ErrorResponse,
    UpdateUserRequest,
    UserResponse,
)
from taskhub.core.use_cases.create_user import CreateUser, CreateUserCommand
from taskhub.core.use_cases.delete_user import DeleteUser
from taskhub.core.use_cases.get_user import GetUser, ListUsers
from taskhub.core.use_cases.update_user import UpdateUser, UpdateUserCommand

router = APIRouter(
    prefix="/users",
    tags=["Users"],
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)

# --- Endpoints ---

@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_409_CONFLICT: {"model": ErrorResponse}},
    summary="Create a User",
)
async def create_user(
    request: CreateUserRequest,
    use_case: CreateUser = Depends(get_create_user_use_case),
):
    """Registers a user; the email must not be taken by another user."""
    user = await use_case.execute(CreateUserCommand(name=request.name, email=request.email))
    return UserResponse.from_domain(user)


@router.get("", response_model=List[UserResponse], summary="List Users")
async def list_users(use_case: ListUsers = Depends(get_list_users_use_case)):
    users = await use_case.execute()
    return [UserResponse.from_domain(user) for user in users]


@router.get(
    "/{id}",
    response_model=UserResponse,
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
    summary="Get a User",
)
async def get_user(id: str, use_case: GetUser = Depends(get_get_user_use_case)):
    user = await use_case.execute(id)
    return UserResponse.from_domain(user)


@router.put(
    "/{id}",
    response_model=UserResponse,
    responses={
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
        status.HTTP_409_CONFLICT: {"model": ErrorResponse},
    },
    summary="Replace a User's Name and Email",
)
async def update_user(
    id: str,
    request: UpdateUserRequest,
    use_case: UpdateUser = Depends(get_update_user_use_case),
):
    user = await use_case.execute(id, UpdateUserCommand(name=request.name, email=request.email))
    return UserResponse.from_domain(user)


@router.delete(
    "/{id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
    summary="Delete a User",
)
async def delete_user(id: str, use_case: DeleteUser = Depends(get_delete_user_use_case)):
    """Deletes the user together with every task they own."""
    await use_case.execute(id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
