"""Entities module.

Each entity has its own package containing the domain model and the request
contracts that feed it.
"""

from .user import CreateUserRequest, UpdateUserRequest, User, UserRequest

__all__ = [
    "User",
    "UserRequest",
    "CreateUserRequest",
    "UpdateUserRequest",
]
