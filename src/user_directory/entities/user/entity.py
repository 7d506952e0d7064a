"""User domain entity."""

from pydantic import Field

from user_directory.entities._base import Entity

MAX_NAME_LENGTH = 100
MAX_EMAIL_LENGTH = 320
MAX_DEPARTMENT_LENGTH = 200
MAX_TITLE_LENGTH = 100
MAX_PHONE_LENGTH = 30


class User(Entity):
    """User entity representing a person in the directory.

    Required string fields are always trimmed and non-empty; optional ones are
    either ``None`` or a trimmed non-empty string. Validation happens before a
    record is built, see ``user_directory.core.validation``.
    """

    first_name: str = Field(description="User's first name")
    last_name: str = Field(description="User's last name")
    email: str = Field(description="User's email address")
    department: str = Field(description="Department the user belongs to")
    title: str | None = Field(default=None, description="User's job title")
    phone: str | None = Field(default=None, description="User's phone number")
    is_active: bool = Field(default=True, description="Whether the user is active")
