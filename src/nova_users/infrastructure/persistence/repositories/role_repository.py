"""Role repository for database operations."""

from collections.abc import Iterable, Mapping
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from nova_users.core.logging import get_logger
from nova_users.domain.exceptions import DuplicateSlugError
from nova_users.infrastructure.persistence.models import RoleModel
from nova_users.infrastructure.persistence.pagination import Page, normalize_page

logger = get_logger(__name__)

EDITABLE_FIELDS = ("name", "slug", "description")

# Largest value a signed 64-bit INTEGER column accepts
MAX_SQL_INTEGER = 2**63 - 1


def parse_role_id(role_id: int | str) -> int | None:
    """Turn a raw identifier into a role ID, or None if it cannot be one."""
    if isinstance(role_id, bool):
        return None
    if isinstance(role_id, int):
        parsed = role_id
    else:
        text = str(role_id).strip()
        digits = text[1:] if text[:1] in ("+", "-") else text
        if not (digits.isascii() and digits.isdecimal()):
            return None
        parsed = int(text)
    if not -MAX_SQL_INTEGER - 1 <= parsed <= MAX_SQL_INTEGER:
        return None
    return parsed


class RoleRepository:
    """Repository for role database operations.

    Writes commit immediately, so each create, save or delete is its own
    unit of work.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def get_by_id(self, role_id: int | str) -> RoleModel | None:
        """Get a role by ID.

        Args:
            role_id: Role ID, possibly still the raw path segment.

        Returns:
            Role model if found, None otherwise.
        """
        parsed = parse_role_id(role_id)
        if parsed is None:
            return None
        result = await self.session.execute(select(RoleModel).where(RoleModel.id == parsed))
        return result.scalar_one_or_none()

    async def get_by_slug(self, slug: str) -> RoleModel | None:
        """Get a role by slug."""
        result = await self.session.execute(select(RoleModel).where(RoleModel.slug == slug))
        return result.scalar_one_or_none()

    async def slug_exists(self, slug: str, exclude_id: int | None = None) -> bool:
        """Check whether a slug is used by a role other than ``exclude_id``."""
        query = select(func.count()).select_from(RoleModel).where(RoleModel.slug == slug)
        if exclude_id is not None:
            query = query.where(RoleModel.id != exclude_id)
        result = await self.session.execute(query)
        return result.scalar_one() > 0

    async def count(self) -> int:
        result = await self.session.execute(select(func.count()).select_from(RoleModel))
        return result.scalar_one()

    async def create(self, fields: Mapping[str, Any]) -> RoleModel:
        """Create and persist a new role.

        Args:
            fields: Values for name, slug and description. Other keys are ignored.

        Returns:
            The created role, with its ID assigned.

        Raises:
            DuplicateSlugError: If another role already uses the slug.
        """
        role = RoleModel(**{key: fields[key] for key in EDITABLE_FIELDS})
        self.session.add(role)
        await self._commit(role.slug)
        await self.session.refresh(role)
        return role

    async def save(self, role: RoleModel) -> RoleModel:
        """Persist changes made to a role.

        Raises:
            DuplicateSlugError: If another role already uses the new slug.
        """
        if role not in self.session:
            self.session.add(role)
        await self._commit(role.slug)
        await self.session.refresh(role)
        return role

    async def delete(self, role: RoleModel) -> None:
        """Delete a role (hard delete)."""
        await self.session.delete(role)
        await self.session.commit()

    async def list_paged(
        self,
        per_page: int,
        page: int | str | None = 1,
        eager_load: Iterable[str] = ("users",),
    ) -> Page[RoleModel]:
        """List one page of roles ordered by ID.

        Args:
            per_page: Page size.
            page: 1-based page number; invalid values fall back to 1.
            eager_load: Relationships to load with the roles.

        Returns:
            The requested page.
        """
        current_page = normalize_page(page)
        query = select(RoleModel).order_by(RoleModel.id)
        for relationship_name in eager_load:
            query = query.options(selectinload(getattr(RoleModel, relationship_name)))

        offset = min((current_page - 1) * per_page, MAX_SQL_INTEGER)
        result = await self.session.execute(query.offset(offset).limit(per_page))
        return Page(
            items=list(result.scalars().all()),
            total=await self.count(),
            per_page=per_page,
            current_page=current_page,
        )

    async def _commit(self, slug: str) -> None:
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            if await self.slug_exists(slug):
                logger.info("Role write rejected: slug already taken", slug=slug)
                raise DuplicateSlugError(slug) from e
            raise
