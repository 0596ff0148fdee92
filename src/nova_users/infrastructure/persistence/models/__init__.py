"""SQLAlchemy models for the Users module tables.

All models inherit from the Base class defined in database.py and are
automatically created on application startup in development mode.
"""

from nova_users.infrastructure.persistence.models.role import RoleModel
from nova_users.infrastructure.persistence.models.user import UserModel

__all__ = [
    "RoleModel",
    "UserModel",
]
