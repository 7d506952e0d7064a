"""Unit tests for the user entity and request contracts."""

from datetime import UTC, datetime
from uuid import UUID

import pytest
from pydantic import ValidationError

from user_directory.entities._base import canonical_id, new_id
from user_directory.entities.user import CreateUserRequest, UpdateUserRequest, User


class TestUser:
    """Test the User domain entity."""

    def test_user_creation_with_defaults(self):
        """User should be created with auto-generated UUID and active flag."""
        user = User(first_name="Ann", last_name="Lee", email="ann@x.com", department="Eng")

        UUID(user.id)
        assert user.is_active is True
        assert user.title is None
        assert user.phone is None
        assert user.created_at.tzinfo is not None

    def test_user_is_frozen(self):
        user = User(first_name="Ann", last_name="Lee", email="ann@x.com", department="Eng")

        with pytest.raises(ValidationError):
            user.first_name = "Bob"

    def test_model_copy_keeps_identity(self):
        user = User(first_name="Ann", last_name="Lee", email="ann@x.com", department="Eng")

        copy = user.model_copy(update={"department": "Sales"})

        assert copy.id == user.id
        assert copy.created_at == user.created_at
        assert copy.department == "Sales"
        assert user.department == "Eng"

    def test_serializes_with_camel_case_keys(self):
        stamp = datetime(2024, 1, 15, 9, 30, tzinfo=UTC)
        user = User(
            id="u-1",
            first_name="Ann",
            last_name="Lee",
            email="ann@x.com",
            department="Eng",
            created_at=stamp,
            updated_at=stamp,
        )

        data = user.model_dump(mode="json", by_alias=True)

        assert data == {
            "id": "u-1",
            "firstName": "Ann",
            "lastName": "Lee",
            "email": "ann@x.com",
            "department": "Eng",
            "title": None,
            "phone": None,
            "isActive": True,
            "createdAt": "2024-01-15T09:30:00Z",
            "updatedAt": "2024-01-15T09:30:00Z",
        }


class TestRequestContracts:
    """Test parsing of request bodies."""

    def test_parses_camel_case_json(self):
        request = CreateUserRequest.model_validate_json(
            '{"firstName": "Ann", "lastName": "Lee", "isActive": false}'
        )

        assert request.first_name == "Ann"
        assert request.last_name == "Lee"
        assert request.is_active is False
        assert request.email is None

    def test_null_means_absent(self):
        request = UpdateUserRequest.model_validate_json('{"title": null}')
        assert request.title is None

    def test_unknown_keys_are_ignored(self):
        request = UpdateUserRequest.model_validate_json('{"title": "Lead", "nickname": "A"}')
        assert request.title == "Lead"

    def test_wrong_types_are_rejected(self):
        with pytest.raises(ValidationError):
            CreateUserRequest.model_validate_json('{"firstName": 123}')

        with pytest.raises(ValidationError):
            UpdateUserRequest.model_validate_json('{"isActive": "yes"}')


class TestCanonicalId:
    def test_generated_ids_are_already_canonical(self):
        user_id = new_id()
        assert canonical_id(user_id) == user_id

    @pytest.mark.parametrize(
        "raw",
        [
            "3F2504E0-4F89-11D3-9A0C-0305E82C3301",
            "{3f2504e0-4f89-11d3-9a0c-0305e82c3301}",
            "3f2504e04f8911d39a0c0305e82c3301",
            "urn:uuid:3f2504e0-4f89-11d3-9a0c-0305e82c3301",
        ],
    )
    def test_uuid_spellings_collapse(self, raw):
        assert canonical_id(raw) == "3f2504e0-4f89-11d3-9a0c-0305e82c3301"

    @pytest.mark.parametrize("raw", ["missing", "u-1", ""])
    def test_other_ids_are_unchanged(self, raw):
        assert canonical_id(raw) == raw
