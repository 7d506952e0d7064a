"""Core services for the user directory."""

from .outcomes import (
    BadRequest,
    NotFound,
    Outcome,
    Success,
    UserPage,
    ValidationFailed,
)
from .user_directory import UserDirectoryService

__all__ = [
    "BadRequest",
    "NotFound",
    "Outcome",
    "Success",
    "UserPage",
    "ValidationFailed",
    "UserDirectoryService",
]
