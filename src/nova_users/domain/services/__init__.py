"""Domain services for Nova Users.

Services contain business logic that doesn't naturally fit within a single entity.
They have no dependencies on infrastructure or external frameworks.
"""

from nova_users.domain.services.role_validator import (
    ROLE_FIELDS,
    RoleValidationError,
    RoleValidator,
    SlugLookup,
    ValidationResult,
    is_alpha_dash,
    is_valid_name,
)

__all__ = [
    "ROLE_FIELDS",
    "RoleValidationError",
    "RoleValidator",
    "SlugLookup",
    "ValidationResult",
    "is_alpha_dash",
    "is_valid_name",
]
