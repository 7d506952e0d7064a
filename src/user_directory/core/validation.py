"""Field normalization and validation for user requests.

Create and update share one validator. They differ only in the presence
policy applied per field:

- ``REQUIRED``: a missing or blank value is reported as "is required".
- ``OPTIONAL``: a missing value is skipped, a blank one is reported as
  "cannot be empty" because blank never means "clear the field".

Every request field is read through ``read_field`` into one of three states
(absent, blank, present) so that handlers and validators agree on what was
supplied.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

from user_directory.entities.user import UserRequest
from user_directory.entities.user.entity import (
    MAX_DEPARTMENT_LENGTH,
    MAX_EMAIL_LENGTH,
    MAX_NAME_LENGTH,
    MAX_PHONE_LENGTH,
    MAX_TITLE_LENGTH,
)

REQUEST_ERROR_KEY = "request"
EMPTY_UPDATE_MESSAGE = "At least one field must be provided for update."

FieldErrors = dict[str, list[str]]


class FieldState(Enum):
    ABSENT = "absent"
    BLANK = "blank"
    PRESENT = "present"


class Presence(Enum):
    REQUIRED = "required"
    OPTIONAL = "optional"


@dataclass(frozen=True)
class FieldValue:
    """A request field read as absent, blank, or present with its normalized value."""

    state: FieldState
    value: str | None = None

    @property
    def supplied(self) -> bool:
        return self.state is not FieldState.ABSENT


@dataclass(frozen=True)
class FieldRule:
    """Constraints for one string field of a user record."""

    name: str
    key: str
    label: str
    max_length: int
    email: bool = False


FIELD_RULES: tuple[FieldRule, ...] = (
    FieldRule("first_name", "firstName", "First name", MAX_NAME_LENGTH),
    FieldRule("last_name", "lastName", "Last name", MAX_NAME_LENGTH),
    FieldRule("email", "email", "Email", MAX_EMAIL_LENGTH, email=True),
    FieldRule("department", "department", "Department", MAX_DEPARTMENT_LENGTH),
    FieldRule("title", "title", "Title", MAX_TITLE_LENGTH),
    FieldRule("phone", "phone", "Phone", MAX_PHONE_LENGTH),
)

CREATE_POLICY: Mapping[str, Presence] = {
    "first_name": Presence.REQUIRED,
    "last_name": Presence.REQUIRED,
    "email": Presence.REQUIRED,
    "department": Presence.REQUIRED,
    "title": Presence.OPTIONAL,
    "phone": Presence.OPTIONAL,
}

UPDATE_POLICY: Mapping[str, Presence] = {
    rule.name: Presence.OPTIONAL for rule in FIELD_RULES
}


def normalize(value: str | None) -> str | None:
    """Trim ``value``; empty or whitespace-only strings become ``None``."""
    if value is None:
        return None
    trimmed = value.strip()
    return trimmed or None


def read_field(value: str | None) -> FieldValue:
    if value is None:
        return FieldValue(FieldState.ABSENT)
    normalized = normalize(value)
    if normalized is None:
        return FieldValue(FieldState.BLANK)
    return FieldValue(FieldState.PRESENT, normalized)


def read_fields(request: UserRequest) -> dict[str, FieldValue]:
    """Read every string field of ``request`` keyed by attribute name."""
    return {rule.name: read_field(getattr(request, rule.name)) for rule in FIELD_RULES}


def is_valid_email(value: str) -> bool:
    """Structural email check: exactly one ``@``, not first or last, no line breaks."""
    if "\r" in value or "\n" in value:
        return False
    at = value.find("@")
    return 0 < at < len(value) - 1 and value.rfind("@") == at


def check_field(rule: FieldRule, field: FieldValue, presence: Presence) -> str | None:
    """Return the error message for one field, or ``None`` when it is acceptable."""
    value = field.value
    if field.state is FieldState.ABSENT or value is None:
        if presence is Presence.REQUIRED:
            return f"{rule.label} is required."
        if field.state is FieldState.BLANK:
            return f"{rule.label} cannot be empty."
        return None

    if len(value) > rule.max_length:
        return f"{rule.label} must be {rule.max_length} characters or fewer."
    if rule.email and not is_valid_email(value):
        return f"{rule.label} is not valid."
    return None


def validate_fields(
    request: UserRequest, policy: Mapping[str, Presence]
) -> FieldErrors:
    """Validate every string field of ``request`` under ``policy``.

    All violated fields are reported, keyed by their wire name.
    """
    errors: FieldErrors = {}
    fields = read_fields(request)
    for rule in FIELD_RULES:
        message = check_field(rule, fields[rule.name], policy[rule.name])
        if message is not None:
            errors[rule.key] = [message]
    return errors


def validate_for_create(request: UserRequest) -> FieldErrors:
    return validate_fields(request, CREATE_POLICY)


def validate_for_update(request: UserRequest) -> FieldErrors:
    errors = validate_fields(request, UPDATE_POLICY)
    supplied = any(field.supplied for field in read_fields(request).values())
    if not supplied and request.is_active is None:
        errors[REQUEST_ERROR_KEY] = [EMPTY_UPDATE_MESSAGE]
    return errors
