"""FastAPI dependencies for the web layer."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from nova_users.application.services import RoleWorkflow
from nova_users.core.config import Settings, get_settings
from nova_users.infrastructure.persistence.database import get_db_session
from nova_users.infrastructure.persistence.repositories import RoleRepository
from nova_users.infrastructure.web.templating import ViewRenderer, get_view_renderer


def get_role_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> RoleRepository:
    """Get the role repository."""
    return RoleRepository(session)


def get_role_workflow(
    repository: Annotated[RoleRepository, Depends(get_role_repository)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> RoleWorkflow:
    """Get the role workflow, paginating with the configured page size."""
    return RoleWorkflow(repository, per_page=settings.roles_per_page)


Workflow = Annotated[RoleWorkflow, Depends(get_role_workflow)]
Renderer = Annotated[ViewRenderer, Depends(get_view_renderer)]
