"""Persistence repositories for database operations."""

from nova_users.infrastructure.persistence.repositories.role_repository import (
    RoleRepository,
    parse_role_id,
)

__all__ = [
    "RoleRepository",
    "parse_role_id",
]
