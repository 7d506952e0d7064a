"""In-memory directory store backed by a sharded-lock map."""

from __future__ import annotations

import threading
from contextlib import ExitStack
from dataclasses import dataclass, field

from loguru import logger

from user_directory.entities.user import User

DEFAULT_SHARDS = 16


@dataclass
class _Shard:
    lock: threading.Lock = field(default_factory=threading.Lock)
    records: dict[str, User] = field(default_factory=dict)


def _name_order(user: User) -> tuple[str, str, str, str]:
    # Case-insensitive by name, exact spelling only breaks ties
    return (
        user.last_name.casefold(),
        user.first_name.casefold(),
        user.last_name,
        user.first_name,
    )


class DirectoryStore:
    """Authoritative mapping from user id to ``User``.

    Every id hashes onto one shard. Single-record operations lock only that
    shard, so writers to ids on different shards proceed independently.
    ``list_all`` locks all shards in a fixed order to take a consistent
    snapshot. Records are frozen, so a reader never sees a half-applied
    update.
    """

    def __init__(self, shards: int = DEFAULT_SHARDS) -> None:
        if shards < 1:
            raise ValueError(f"shards must be at least 1, got {shards}")
        self._shards = tuple(_Shard() for _ in range(shards))
        logger.debug("Directory store initialized with {} shards", shards)

    def _shard_for(self, user_id: str) -> _Shard:
        return self._shards[hash(user_id) % len(self._shards)]

    def list_all(self) -> list[User]:
        """Return a snapshot of every record sorted by last name, then first name."""
        with ExitStack() as stack:
            for shard in self._shards:
                stack.enter_context(shard.lock)
            users = [user for shard in self._shards for user in shard.records.values()]
        return sorted(users, key=_name_order)

    def get_by_id(self, user_id: str) -> User | None:
        shard = self._shard_for(user_id)
        with shard.lock:
            return shard.records.get(user_id)

    def create(self, user: User) -> User:
        shard = self._shard_for(user.id)
        with shard.lock:
            shard.records[user.id] = user
        return user

    def update(self, user: User) -> bool:
        """Replace the stored record only if its id is still present."""
        shard = self._shard_for(user.id)
        with shard.lock:
            if user.id not in shard.records:
                return False
            shard.records[user.id] = user
            return True

    def delete(self, user_id: str) -> bool:
        shard = self._shard_for(user_id)
        with shard.lock:
            return shard.records.pop(user_id, None) is not None

    def count(self) -> int:
        with ExitStack() as stack:
            for shard in self._shards:
                stack.enter_context(shard.lock)
            return sum(len(shard.records) for shard in self._shards)

    def clear(self) -> None:
        for shard in self._shards:
            with shard.lock:
                shard.records.clear()
