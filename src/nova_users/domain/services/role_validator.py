"""Role payload validation.

Validates the ``name``, ``slug`` and ``description`` of a Role before it is
created or updated. Every field is checked independently and every failing
rule of a field is reported, except that an empty value only reports that
the field is required.
"""

import unicodedata
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol

from nova_users.core.i18n import translate

ROLE_FIELDS = ("name", "slug", "description")

ATTRIBUTE_LABELS = {
    "name": "Name",
    "slug": "Slug",
    "description": "Description",
}

MESSAGES = {
    "required": "The :attribute field is required.",
    "min": "The :attribute must be at least :min characters.",
    "max": "The :attribute may not be greater than :max characters.",
    "alpha_dash": "The :attribute may only contain letters, numbers, and dashes.",
    "unique": "The :attribute has already been taken.",
    "valid_name": "The :attribute field is not a valid name.",
}

# Apostrophe and right single quotation mark, as in "O'Connor" / "O’Connor".
_NAME_QUOTES = frozenset("'’")


def is_valid_name(value: str) -> bool:
    """Check that a value looks like a human name.

    A valid name is one or more groups of letters, non-spacing marks, dash
    punctuation or apostrophes, separated by whitespace. Leading whitespace
    is not allowed; trailing whitespace is.
    """
    if not value or value[0].isspace():
        return False

    for word in value.split():
        for char in word:
            category = unicodedata.category(char)
            if category.startswith("L") or category in ("Mn", "Pd"):
                continue
            if char in _NAME_QUOTES:
                continue
            return False
    return True


def is_alpha_dash(value: str) -> bool:
    """Check that a value holds only letters, digits, underscores and dashes."""
    if not value:
        return False
    return all(char.isalnum() or char in "_-" for char in value)


class SlugLookup(Protocol):
    """Anything able to tell whether a slug is already used by a Role."""

    async def slug_exists(self, slug: str, exclude_id: int | None = None) -> bool: ...


@dataclass(frozen=True)
class RoleValidationError:
    """A single Role validation error.

    Attributes:
        field: The field name.
        message: Human-readable, translated error message.
        code: Machine-readable rule name.
    """

    field: str
    message: str
    code: str


@dataclass
class ValidationResult:
    """Outcome of validating a Role payload."""

    errors: list[RoleValidationError] = field(default_factory=list)

    def passes(self) -> bool:
        return not self.errors

    def fails(self) -> bool:
        return bool(self.errors)

    def messages(self) -> dict[str, list[str]]:
        """Error messages grouped by field, in field order."""
        grouped: dict[str, list[str]] = {}
        for error in self.errors:
            grouped.setdefault(error.field, []).append(error.message)
        return grouped

    def all(self) -> list[str]:
        """Every error message, flattened."""
        return [error.message for error in self.errors]

    def has(self, field_name: str) -> bool:
        return any(error.field == field_name for error in self.errors)


class RoleValidator:
    """Validator for Role create and update payloads."""

    MIN_NAME_LENGTH = 4
    MAX_NAME_LENGTH = 40
    MIN_SLUG_LENGTH = 4
    MAX_SLUG_LENGTH = 40
    MIN_DESCRIPTION_LENGTH = 5
    MAX_DESCRIPTION_LENGTH = 255

    def __init__(self, lookup: SlugLookup) -> None:
        self.lookup = lookup

    @staticmethod
    def only(data: Mapping[str, Any]) -> dict[str, str | None]:
        """Keep the whitelisted Role fields of a payload.

        Missing fields map to None; other values are converted to strings.
        """
        result: dict[str, str | None] = {}
        for key in ROLE_FIELDS:
            value = data.get(key)
            result[key] = None if value is None else str(value)
        return result

    @staticmethod
    def _error(field_name: str, code: str, **replacements: Any) -> RoleValidationError:
        message = translate("users", MESSAGES[code])
        message = message.replace(":attribute", translate("users", ATTRIBUTE_LABELS[field_name]))
        for key, value in replacements.items():
            message = message.replace(f":{key}", str(value))
        return RoleValidationError(field=field_name, message=message, code=code)

    @classmethod
    def _check_length(
        cls, field_name: str, value: str, minimum: int, maximum: int
    ) -> list[RoleValidationError]:
        errors = []
        if len(value) < minimum:
            errors.append(cls._error(field_name, "min", min=minimum))
        if len(value) > maximum:
            errors.append(cls._error(field_name, "max", max=maximum))
        return errors

    @staticmethod
    def _is_empty(value: str | None) -> bool:
        return value is None or not value.strip()

    @classmethod
    def validate_name(cls, name: str | None) -> list[RoleValidationError]:
        """Validate a Role name.

        Args:
            name: The name to validate.

        Returns:
            List of validation errors (empty if valid).
        """
        if cls._is_empty(name):
            return [cls._error("name", "required")]

        errors = cls._check_length("name", name, cls.MIN_NAME_LENGTH, cls.MAX_NAME_LENGTH)
        if not is_valid_name(name):
            errors.append(cls._error("name", "valid_name"))
        return errors

    @classmethod
    def validate_slug_format(cls, slug: str | None) -> list[RoleValidationError]:
        """Validate the format of a Role slug (uniqueness excluded)."""
        if cls._is_empty(slug):
            return [cls._error("slug", "required")]

        errors = cls._check_length("slug", slug, cls.MIN_SLUG_LENGTH, cls.MAX_SLUG_LENGTH)
        if not is_alpha_dash(slug):
            errors.append(cls._error("slug", "alpha_dash"))
        return errors

    @classmethod
    def validate_description(cls, description: str | None) -> list[RoleValidationError]:
        """Validate a Role description."""
        if cls._is_empty(description):
            return [cls._error("description", "required")]

        return cls._check_length(
            "description",
            description,
            cls.MIN_DESCRIPTION_LENGTH,
            cls.MAX_DESCRIPTION_LENGTH,
        )

    async def validate(
        self, data: Mapping[str, Any], role_id: int | None = None
    ) -> ValidationResult:
        """Validate a Role payload against every rule.

        Args:
            data: Payload with 'name', 'slug' and 'description'.
            role_id: ID of the Role being updated, excluded from the
                slug uniqueness check. None when creating.

        Returns:
            ValidationResult holding every error found.
        """
        payload = self.only(data)
        slug = payload["slug"]

        errors = self.validate_name(payload["name"])

        errors.extend(self.validate_slug_format(slug))
        if not self._is_empty(slug) and await self.lookup.slug_exists(slug, exclude_id=role_id):
            errors.append(self._error("slug", "unique"))

        errors.extend(self.validate_description(payload["description"]))

        return ValidationResult(errors=errors)
