"""Request bodies accepted by the user endpoints."""

from pydantic import ConfigDict, Field

from user_directory.entities._base import ApiModel


class UserRequest(ApiModel):
    """Bag of optional user fields.

    ``None`` (a missing key or an explicit JSON ``null``) means the field was
    not supplied. Values of the wrong JSON type are rejected at parse time.
    """

    model_config = ConfigDict(strict=True, extra="ignore", frozen=True)

    first_name: str | None = Field(default=None)
    last_name: str | None = Field(default=None)
    email: str | None = Field(default=None)
    department: str | None = Field(default=None)
    title: str | None = Field(default=None)
    phone: str | None = Field(default=None)
    is_active: bool | None = Field(default=None)


class CreateUserRequest(UserRequest):
    """Body of ``POST /api/users``; the four required fields must resolve."""


class UpdateUserRequest(UserRequest):
    """Body of ``PUT /api/users/{id}``; only supplied fields are applied."""
