"""Routes of the Users module."""

from nova_users.infrastructure.web.routes.language_router import router as language_router
from nova_users.infrastructure.web.routes.roles_router import router as roles_router

__all__ = [
    "language_router",
    "roles_router",
]
