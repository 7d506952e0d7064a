"""Request handlers for the user directory."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from loguru import logger

from user_directory.core.services.outcomes import (
    BadRequest,
    NotFound,
    Outcome,
    Success,
    UserPage,
    ValidationFailed,
)
from user_directory.core.store import DirectoryStore
from user_directory.core.validation import (
    FieldState,
    read_fields,
    validate_for_create,
    validate_for_update,
)
from user_directory.entities._base import canonical_id, new_id, utc_now
from user_directory.entities.user import CreateUserRequest, UpdateUserRequest, User

DEFAULT_TAKE = 50
MAX_TAKE = 200


class UserDirectoryService:
    """Compose validation and store access into handler outcomes.

    The store is the only shared state. The service holds no locks; the one
    check-then-act sequence (update after lookup) re-checks the store's own
    return value so a record deleted in between is reported as not found.
    """

    def __init__(
        self,
        store: DirectoryStore,
        *,
        default_take: int = DEFAULT_TAKE,
        max_take: int = MAX_TAKE,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = new_id,
    ) -> None:
        self._store = store
        self._default_take = default_take
        self._max_take = max_take
        self._clock = clock
        self._id_factory = id_factory

    @property
    def store(self) -> DirectoryStore:
        return self._store

    def list_users(
        self, skip: int | None = None, take: int | None = None
    ) -> Success[UserPage]:
        """Return one page of users ordered by last name, then first name.

        ``skip`` is floored at 0; ``take`` defaults to the configured page size
        and is clamped to ``[1, max_take]``.
        """
        safe_skip = max(skip if skip is not None else 0, 0)
        requested = take if take is not None else self._default_take
        safe_take = min(max(requested, 1), self._max_take)

        users = self._store.list_all()
        page = UserPage(
            items=users[safe_skip : safe_skip + safe_take],
            total=len(users),
            skip=safe_skip,
            take=safe_take,
        )
        return Success(page)

    def get_user(self, user_id: str) -> Outcome[User]:
        user_id = canonical_id(user_id)
        user = self._store.get_by_id(user_id)
        if user is None:
            return NotFound()
        return Success(user)

    def create_user(self, request: CreateUserRequest | None) -> Outcome[User]:
        if request is None:
            return BadRequest()

        errors = validate_for_create(request)
        if errors:
            logger.debug("Rejected create request: {}", errors)
            return ValidationFailed(errors)

        fields = read_fields(request)
        now = self._clock()
        user = User(
            id=self._id_factory(),
            first_name=fields["first_name"].value,
            last_name=fields["last_name"].value,
            email=fields["email"].value,
            department=fields["department"].value,
            title=fields["title"].value,
            phone=fields["phone"].value,
            is_active=True if request.is_active is None else request.is_active,
            created_at=now,
            updated_at=now,
        )
        stored = self._store.create(user)
        logger.info("Created user {}", stored.id)
        return Success(stored, created=True)

    def update_user(
        self, user_id: str, request: UpdateUserRequest | None
    ) -> Outcome[User]:
        if request is None:
            return BadRequest()

        user_id = canonical_id(user_id)
        errors = validate_for_update(request)
        if errors:
            logger.debug("Rejected update request for user {}: {}", user_id, errors)
            return ValidationFailed(errors)

        existing = self._store.get_by_id(user_id)
        if existing is None:
            return NotFound()

        changes: dict[str, object] = {
            name: field.value
            for name, field in read_fields(request).items()
            if field.state is FieldState.PRESENT
        }
        if request.is_active is not None:
            changes["is_active"] = request.is_active
        changes["updated_at"] = max(self._clock(), existing.created_at)

        updated = existing.model_copy(update=changes)
        if not self._store.update(updated):
            logger.info("User {} was removed before the update was applied", user_id)
            return NotFound()

        logger.info("Updated user {} ({})", user_id, ", ".join(sorted(changes)))
        return Success(updated)

    def delete_user(self, user_id: str) -> Outcome[None]:
        user_id = canonical_id(user_id)
        if not self._store.delete(user_id):
            return NotFound()
        logger.info("Deleted user {}", user_id)
        return Success(None)
