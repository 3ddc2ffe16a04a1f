"""User API routes."""

from fastapi import APIRouter, Depends, Query, Request, status

from user_directory.api.dependencies import get_user_service
from user_directory.api.schemas.user import UserListResponse, UserResponse, UserWrite
from user_directory.core.config import settings
from user_directory.core.rate_limit import limiter
from user_directory.domain.entities.user import PageRequest, User
from user_directory.domain.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])

# Bodies are decoded by hand so any Content-Type is accepted; document the schema.
_USER_BODY = {
    "requestBody": {
        "required": True,
        "content": {"application/json": {"schema": UserWrite.model_json_schema()}},
    }
}


@router.get(
    "",
    response_model=UserListResponse,
    summary="List users",
    responses={
        200: {"description": "One page of users and the filtered total"},
    },
)
@limiter.limit(settings.rate_limit_read)  # type: ignore[untyped-decorator]
async def list_users(
    request: Request,
    service: UserService = Depends(get_user_service),
    page: str | None = Query(None, description="1-based page number (default 1)"),
    page_size: str | None = Query(
        None, alias="pageSize", description="Users per page (default 10)"
    ),
    country: str | None = Query(None, description="Case-insensitive country filter"),
) -> UserListResponse:
    """
    List users ordered by creation time.

    Invalid or non-positive paging values fall back to the defaults. A page
    past the end returns no users but still reports the filtered total.
    """
    result = await service.list(PageRequest.from_query(page, page_size, country))
    return UserListResponse(
        total=result.total,
        users=[_build_user_response(user) for user in result.users],
    )


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    summary="Get a user",
    responses={
        200: {"description": "User details"},
        404: {"description": "User not found"},
    },
)
@limiter.limit(settings.rate_limit_read)  # type: ignore[untyped-decorator]
async def get_user(
    request: Request,
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Get a specific user by ID."""
    user = await service.get_by_id(user_id)
    return _build_user_response(user)


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a user",
    openapi_extra=_USER_BODY,
    responses={
        201: {"description": "User created successfully"},
        400: {"description": "Request body could not be decoded"},
    },
)
@limiter.limit(settings.rate_limit_write)  # type: ignore[untyped-decorator]
async def create_user(
    request: Request,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Create a new user. The ID and timestamps are assigned by the server."""
    body = UserWrite.decode(await request.body())
    user = await service.create(body.to_entity())
    return _build_user_response(user)


@router.put(
    "/{user_id}",
    response_model=UserResponse,
    summary="Replace a user",
    openapi_extra=_USER_BODY,
    responses={
        200: {"description": "User replaced successfully"},
        400: {"description": "Request body could not be decoded"},
        404: {"description": "User not found"},
    },
)
@limiter.limit(settings.rate_limit_write)  # type: ignore[untyped-decorator]
async def update_user(
    request: Request,
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """
    Replace a user wholesale.

    Fields left out of the body are cleared. The ID and `created_at` cannot
    be changed.
    """
    body = UserWrite.decode(await request.body())
    user = await service.update(user_id, body.to_entity())
    return _build_user_response(user)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a user",
    responses={
        204: {"description": "User deleted successfully"},
        404: {"description": "User not found"},
    },
)
@limiter.limit(settings.rate_limit_write)  # type: ignore[untyped-decorator]
async def delete_user(
    request: Request,
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> None:
    """Delete a user."""
    await service.delete(user_id)
    return None


def _build_user_response(user: User) -> UserResponse:
    return UserResponse.model_validate(user)
