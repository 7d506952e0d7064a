import uuid
from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict
from pydantic import Field as PydanticField
from pydantic.alias_generators import to_camel


def utc_now() -> datetime:
    return datetime.now(UTC)


def new_id() -> str:
    return str(uuid.uuid4())


def canonical_id(value: str) -> str:
    """Return the lowercase hyphenated form of ``value`` if it spells a UUID.

    Uppercase, braced, ``urn:uuid:`` and unhyphenated spellings all map to the
    form ``new_id`` produces. Anything else is returned unchanged.
    """
    try:
        return str(uuid.UUID(value))
    except ValueError:
        return value


class ApiModel(BaseModel):
    """Base model serialized with camelCase keys on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Entity(ApiModel):
    """Base entity class with auto-generated UUID identifier.

    Entities are frozen: a mutation produces a new instance through
    ``model_copy`` and the store swaps whole records.
    """

    model_config = ConfigDict(frozen=True)

    id: str = PydanticField(
        default_factory=new_id,
        description="Unique identifier for the entity",
    )

    created_at: datetime = PydanticField(default_factory=utc_now)
    updated_at: datetime = PydanticField(default_factory=utc_now)
