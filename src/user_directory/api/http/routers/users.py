"""User directory API router with CRUD operations."""

from fastapi import APIRouter, Depends, Query
from starlette.responses import Response

from user_directory.api.http.deps import (
    get_user_directory_service,
    read_create_request,
    read_update_request,
)
from user_directory.api.http.responses import render_outcome
from user_directory.core.services import BadRequest, Success, UserDirectoryService
from user_directory.entities.user import CreateUserRequest, UpdateUserRequest

USERS_PATH = "/api/users"

router = APIRouter(prefix=USERS_PATH, tags=["users"])


@router.get("", name="list_users")
def list_users(
    skip: int | None = Query(default=None, description="Records to skip"),
    take: int | None = Query(default=None, description="Page size, at most 200"),
    service: UserDirectoryService = Depends(get_user_directory_service),
) -> Response:
    """List users ordered by last name, then first name."""
    return render_outcome(service.list_users(skip, take))


@router.get("/{user_id}", name="get_user")
def get_user(
    user_id: str,
    service: UserDirectoryService = Depends(get_user_directory_service),
) -> Response:
    """Get a user by ID."""
    return render_outcome(service.get_user(user_id))


@router.post("", name="create_user", status_code=201)
def create_user(
    body: CreateUserRequest | BadRequest | None = Depends(read_create_request),
    service: UserDirectoryService = Depends(get_user_directory_service),
) -> Response:
    """Create a new user."""
    if isinstance(body, BadRequest):
        return render_outcome(body)

    outcome = service.create_user(body)
    location = (
        f"{USERS_PATH}/{outcome.value.id}" if isinstance(outcome, Success) else None
    )
    return render_outcome(outcome, location=location)


@router.put("/{user_id}", name="update_user")
def update_user(
    user_id: str,
    body: UpdateUserRequest | BadRequest | None = Depends(read_update_request),
    service: UserDirectoryService = Depends(get_user_directory_service),
) -> Response:
    """Apply a partial update to a user."""
    if isinstance(body, BadRequest):
        return render_outcome(body)
    return render_outcome(service.update_user(user_id, body))


@router.delete("/{user_id}", name="delete_user", status_code=204)
def delete_user(
    user_id: str,
    service: UserDirectoryService = Depends(get_user_directory_service),
) -> Response:
    """Delete a user."""
    return render_outcome(service.delete_user(user_id))
