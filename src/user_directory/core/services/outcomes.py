"""Outcome values returned by the user directory handlers.

Handlers never raise for expected conditions. Each returns exactly one of
these values and the HTTP layer maps it onto a response.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar, Union

from user_directory.entities._base import ApiModel
from user_directory.entities.user import User

T = TypeVar("T")

USER_NOT_FOUND = "User not found."
BODY_REQUIRED = "Request body is required."
BODY_UNPARSEABLE = "Request body could not be parsed."


class UserPage(ApiModel):
    """One page of the directory listing."""

    items: list[User]
    total: int
    skip: int
    take: int


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T
    created: bool = False

    @property
    def status_code(self) -> int:
        if self.created:
            return 201
        if self.value is None:
            return 204
        return 200


@dataclass(frozen=True)
class BadRequest:
    message: str = BODY_REQUIRED
    status_code: int = field(default=400, init=False)


@dataclass(frozen=True)
class ValidationFailed:
    errors: dict[str, list[str]]
    status_code: int = field(default=422, init=False)


@dataclass(frozen=True)
class NotFound:
    message: str = USER_NOT_FOUND
    status_code: int = field(default=404, init=False)


Outcome = Union[Success[T], BadRequest, ValidationFailed, NotFound]
