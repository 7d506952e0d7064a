"""Entity package: User."""

from .contracts import CreateUserRequest, UpdateUserRequest, UserRequest
from .entity import User

__all__ = ["User", "UserRequest", "CreateUserRequest", "UpdateUserRequest"]
