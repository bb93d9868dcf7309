"""
FastAPI router for the users bounded context.

All routes delegate to use cases. No business logic here.
Body decoding is handled by Pydantic schemas.
Error mapping is handled by centralized error handlers.
"""

from fastapi import APIRouter, Depends, Path, Response, status

from app.application.users.create_user import CreateUserUseCase
from app.application.users.dtos import CreateUserCommand, GetUserQuery
from app.application.users.get_user import GetUserUseCase
from app.interfaces.users.dependencies import (
    get_create_user_use_case,
    get_get_user_use_case,
)
from app.interfaces.users.schemas import (
    USER_ID_MAX,
    USER_ID_MIN,
    CreateUserRequest,
    ErrorResponse,
    UserResponse,
)

router = APIRouter(prefix="/users", tags=["users"])


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Get a user",
    description="Fetch a single user by its numeric id.",
)
async def get_user(
    user_id: int = Path(..., ge=USER_ID_MIN, le=USER_ID_MAX),
    use_case: GetUserUseCase = Depends(get_get_user_use_case),
) -> UserResponse:
    """Return the user with the given id."""
    user = await use_case.execute(GetUserQuery(user_id=user_id))
    return UserResponse(id=user.id, username=user.username, password=user.password)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_class=Response,
    responses={
        422: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Create a user",
    description="Store a new user. Responds 201 with an empty body.",
)
async def create_user(
    request: CreateUserRequest,
    use_case: CreateUserUseCase = Depends(get_create_user_use_case),
) -> Response:
    """Create a user from a username and password."""
    command = CreateUserCommand(
        username=request.username,
        password=request.password,
    )
    await use_case.execute(command)
    return Response(status_code=status.HTTP_201_CREATED)
