"""Unit tests for RoleValidator."""

from unittest.mock import AsyncMock

import pytest

from nova_users.core.i18n import get_translator
from nova_users.domain.services import RoleValidator, is_alpha_dash, is_valid_name


@pytest.fixture
def lookup():
    """Slug lookup that finds no existing slug."""
    mock = AsyncMock()
    mock.slug_exists.return_value = False
    return mock


@pytest.fixture
def validator(lookup):
    return RoleValidator(lookup)


def valid_payload(**overrides):
    payload = {"name": "Editor", "slug": "editor-role", "description": "Can edit content"}
    payload.update(overrides)
    return payload


class TestIsValidName:
    @pytest.mark.parametrize(
        "name",
        ["Editor", "Jean-Paul O'Connor", "Jean-Paul O’Connor", "Ștefan Müller", "Åsa  Öberg ", "Zoë"],
    )
    def test_accepts_names(self, name):
        assert is_valid_name(name) is True

    @pytest.mark.parametrize(
        "name",
        ["", " Editor", "Editor2", "R2-D2", "Web_Master", "Editor!", "Editor.", "a@b"],
    )
    def test_rejects_non_names(self, name):
        assert is_valid_name(name) is False


class TestIsAlphaDash:
    @pytest.mark.parametrize("slug", ["editor", "editor-role", "editor_role", "Role42", "ștefan"])
    def test_accepts_slugs(self, slug):
        assert is_alpha_dash(slug) is True

    @pytest.mark.parametrize("slug", ["", "editor role", "editor.role", "editor/role", "rôle!"])
    def test_rejects_slugs(self, slug):
        assert is_alpha_dash(slug) is False


def test_only_keeps_role_fields():
    """Unknown keys are dropped and missing keys become None."""
    data = RoleValidator.only({"name": "Editor", "slug": 12345, "id": 7, "_token": "x"})

    assert data == {"name": "Editor", "slug": "12345", "description": None}


@pytest.mark.asyncio
async def test_valid_payload_passes(validator, lookup):
    result = await validator.validate(valid_payload())

    assert result.passes()
    assert not result.fails()
    assert result.all() == []
    lookup.slug_exists.assert_awaited_once_with("editor-role", exclude_id=None)


@pytest.mark.asyncio
async def test_name_accepts_apostrophes_and_dashes(validator):
    result = await validator.validate(valid_payload(name="Jean-Paul O'Connor"))

    assert not result.has("name")


@pytest.mark.asyncio
async def test_short_name_fails_min(validator):
    result = await validator.validate(valid_payload(name="X"))

    assert result.messages()["name"] == ["The Name must be at least 4 characters."]


@pytest.mark.asyncio
async def test_name_with_digits_is_not_a_valid_name(validator):
    result = await validator.validate(valid_payload(name="Editor 2"))

    assert result.messages()["name"] == ["The Name field is not a valid name."]


@pytest.mark.asyncio
async def test_long_name_fails_max(validator):
    result = await validator.validate(valid_payload(name="A" * 41))

    assert result.messages()["name"] == ["The Name may not be greater than 40 characters."]


@pytest.mark.asyncio
async def test_every_failing_rule_is_reported(validator):
    """A short name with a digit reports both rules."""
    result = await validator.validate(valid_payload(name="X1"))

    assert [e.code for e in result.errors if e.field == "name"] == ["min", "valid_name"]


@pytest.mark.asyncio
async def test_missing_fields_only_report_required(validator, lookup):
    result = await validator.validate({})

    assert result.messages() == {
        "name": ["The Name field is required."],
        "slug": ["The Slug field is required."],
        "description": ["The Description field is required."],
    }
    lookup.slug_exists.assert_not_awaited()


@pytest.mark.asyncio
async def test_blank_value_is_required(validator):
    result = await validator.validate(valid_payload(description="   "))

    assert result.messages()["description"] == ["The Description field is required."]


@pytest.mark.asyncio
@pytest.mark.parametrize("slug", ["abc", "a" * 41])
async def test_slug_length_bounds(validator, slug):
    result = await validator.validate(valid_payload(slug=slug))

    assert result.has("slug")
    assert not result.has("name")


@pytest.mark.asyncio
@pytest.mark.parametrize("slug", ["abcd", "a" * 40])
async def test_slug_length_limits_are_inclusive(validator, slug):
    result = await validator.validate(valid_payload(slug=slug))

    assert not result.has("slug")


@pytest.mark.asyncio
async def test_slug_with_spaces_fails_alpha_dash(validator):
    result = await validator.validate(valid_payload(slug="editor role"))

    assert result.messages()["slug"] == [
        "The Slug may only contain letters, numbers, and dashes."
    ]


@pytest.mark.asyncio
async def test_taken_slug_fails_unique(validator, lookup):
    lookup.slug_exists.return_value = True

    result = await validator.validate(valid_payload())

    assert result.messages()["slug"] == ["The Slug has already been taken."]


@pytest.mark.asyncio
async def test_update_excludes_own_id_from_uniqueness(validator, lookup):
    await validator.validate(valid_payload(), role_id=7)

    lookup.slug_exists.assert_awaited_once_with("editor-role", exclude_id=7)


@pytest.mark.asyncio
async def test_description_bounds(validator):
    short = await validator.validate(valid_payload(description="Edit"))
    long = await validator.validate(valid_payload(description="x" * 256))
    longest = await validator.validate(valid_payload(description="x" * 255))

    assert short.messages()["description"] == ["The Description must be at least 5 characters."]
    assert long.messages()["description"] == [
        "The Description may not be greater than 255 characters."
    ]
    assert longest.passes()


@pytest.mark.asyncio
async def test_messages_are_translated(validator):
    get_translator().add_messages(
        "en",
        "users",
        {
            "The :attribute field is required.": "Le champ :attribute est obligatoire.",
            "Name": "Nom",
        },
    )

    result = await validator.validate(valid_payload(name=""))

    assert result.messages()["name"] == ["Le champ Nom est obligatoire."]
