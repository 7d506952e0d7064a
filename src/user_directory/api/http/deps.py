"""FastAPI dependency implementations."""

from __future__ import annotations

from typing import TypeVar

from fastapi import Request
from pydantic import TypeAdapter, ValidationError

from user_directory.api.http.app_data import ApplicationDependencies
from user_directory.core.services import BadRequest, UserDirectoryService
from user_directory.core.services.outcomes import BODY_UNPARSEABLE
from user_directory.core.store import DirectoryStore
from user_directory.entities.user import CreateUserRequest, UpdateUserRequest

RequestT = TypeVar("RequestT", CreateUserRequest, UpdateUserRequest)

_create_adapter = TypeAdapter(CreateUserRequest | None)
_update_adapter = TypeAdapter(UpdateUserRequest | None)


def get_app_dependencies(request: Request) -> ApplicationDependencies:
    return request.app.state.app_dependencies


def get_store(request: Request) -> DirectoryStore:
    """Get the directory store instance."""
    return get_app_dependencies(request).store


def get_user_directory_service(request: Request) -> UserDirectoryService:
    """Get the user directory service instance."""
    return get_app_dependencies(request).user_directory_service


async def _read_body(
    request: Request, adapter: TypeAdapter[RequestT | None]
) -> RequestT | BadRequest | None:
    # An empty body or a JSON null both mean "no request"
    raw = await request.body()
    if not raw.strip():
        return None
    try:
        return adapter.validate_json(raw)
    except ValidationError:
        return BadRequest(BODY_UNPARSEABLE)


async def read_create_request(
    request: Request,
) -> CreateUserRequest | BadRequest | None:
    """Parse the body of a create call without letting FastAPI reject it first."""
    return await _read_body(request, _create_adapter)


async def read_update_request(
    request: Request,
) -> UpdateUserRequest | BadRequest | None:
    """Parse the body of an update call without letting FastAPI reject it first."""
    return await _read_body(request, _update_adapter)
