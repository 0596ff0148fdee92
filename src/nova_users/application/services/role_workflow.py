"""Role administration workflow.

Turns the inputs of each Roles page into repository calls and returns what
should happen next: render a view, or redirect with a flash status.
Not-found and validation outcomes are ordinary results, never exceptions.
"""

from collections.abc import Mapping
from typing import Any

from markupsafe import escape

from nova_users.application.breadcrumb import Breadcrumb
from nova_users.application.results import ActionResult, RedirectResult, ViewResult
from nova_users.core.i18n import translate
from nova_users.core.logging import get_logger
from nova_users.core.menus import resolve_menu
from nova_users.domain.exceptions import DuplicateSlugError
from nova_users.domain.services import RoleValidator
from nova_users.infrastructure.persistence.repositories import RoleRepository

logger = get_logger(__name__)

ROLES_URI = "roles"
DEFAULT_PER_PAGE = 25
BREADCRUMB_WEIGHT = 900


class RoleWorkflow:
    """CRUD actions for Roles."""

    def __init__(self, repository: RoleRepository, per_page: int = DEFAULT_PER_PAGE) -> None:
        """Initialize the workflow.

        Args:
            repository: Role repository, also used for slug uniqueness checks.
            per_page: Number of roles per list page.
        """
        self.repository = repository
        self.validator = RoleValidator(repository)
        self.per_page = per_page

    def _not_found(self, role_id: Any) -> RedirectResult:
        logger.info("Role not found", role_id=str(role_id))
        return RedirectResult(
            to=ROLES_URI,
            status=translate("users", "Role not found: #{0}", escape(role_id)),
            status_type="danger",
        )

    @staticmethod
    def _invalid(input_data: dict[str, Any], messages: list[str]) -> RedirectResult:
        return RedirectResult(
            to=None,
            status=messages,
            status_type="danger",
            with_input=input_data,
        )

    @staticmethod
    def _slug_taken_message() -> str:
        message = translate("users", "The :attribute has already been taken.")
        return message.replace(":attribute", translate("users", "Slug"))

    async def index(self, page: int | str | None = 1) -> ViewResult:
        """List one page of roles with their users."""
        roles = await self.repository.list_paged(self.per_page, page, eager_load=("users",))

        return ViewResult(
            template="roles/index.html",
            shared={
                "title": translate("users", "Roles"),
                "breadcrumb": Breadcrumb.for_roles(),
                "menu": resolve_menu("main"),
            },
            data={"roles": roles},
        )

    async def create(self, breadcrumb: Breadcrumb | None = None) -> ViewResult:
        """Show the empty create form."""
        title = translate("users", "Create Role")
        breadcrumb = (breadcrumb or Breadcrumb()).append(
            uri=f"{ROLES_URI}/create",
            title=title,
            icon="mdi mdi-plus-circle",
            weight=BREADCRUMB_WEIGHT,
        )

        return ViewResult(
            template="roles/create.html",
            shared={
                "title": title,
                "breadcrumb": breadcrumb,
                "menu": resolve_menu("main"),
            },
        )

    async def store(self, input_data: Mapping[str, Any]) -> RedirectResult:
        """Validate the submitted fields and create a role."""
        data = RoleValidator.only(input_data)

        validation = await self.validator.validate(data)
        if validation.fails():
            logger.info("Role validation failed", action="store", errors=validation.messages())
            return self._invalid(data, validation.all())

        try:
            role = await self.repository.create(data)
        except DuplicateSlugError:
            return self._invalid(data, [self._slug_taken_message()])

        logger.info("Role created", role_id=role.id, slug=role.slug)

        status = translate(
            "users", "The Role <b>{0}</b> was successfully created.", escape(data["name"])
        )
        return RedirectResult(to=ROLES_URI, status=status)

    async def show(self, role_id: int | str, breadcrumb: Breadcrumb | None = None) -> ActionResult:
        """Show a single role."""
        role = await self.repository.get_by_id(role_id)
        if role is None:
            return self._not_found(role_id)

        title = translate("users", "Show Role")
        breadcrumb = (breadcrumb or Breadcrumb()).append(
            uri=f"{ROLES_URI}/{role.id}",
            title=title,
            icon="mdi mdi-eye",
            weight=BREADCRUMB_WEIGHT,
        )

        return ViewResult(
            template="roles/show.html",
            shared={
                "title": title,
                "breadcrumb": breadcrumb,
                "menu": resolve_menu("entry", role.id),
            },
            data={"role": role},
        )

    async def edit(self, role_id: int | str, breadcrumb: Breadcrumb | None = None) -> ActionResult:
        """Show the edit form of a role."""
        role = await self.repository.get_by_id(role_id)
        if role is None:
            return self._not_found(role_id)

        title = translate("users", "Edit Role")
        breadcrumb = (breadcrumb or Breadcrumb()).append(
            uri=f"{ROLES_URI}/{role.id}/edit",
            title=title,
            icon="mdi mdi-pencil",
            weight=BREADCRUMB_WEIGHT,
        )

        return ViewResult(
            template="roles/edit.html",
            shared={
                "title": title,
                "breadcrumb": breadcrumb,
                "menu": resolve_menu("entry", role.id),
            },
            data={"role": role},
        )

    async def update(self, role_id: int | str, input_data: Mapping[str, Any]) -> RedirectResult:
        """Validate the submitted fields and update a role."""
        role = await self.repository.get_by_id(role_id)
        if role is None:
            return self._not_found(role_id)

        data = RoleValidator.only(input_data)

        validation = await self.validator.validate(data, role_id=role.id)
        if validation.fails():
            logger.info(
                "Role validation failed",
                action="update",
                role_id=role.id,
                errors=validation.messages(),
            )
            return self._invalid(data, validation.all())

        orig_name = role.name

        role.name = data["name"]
        role.slug = data["slug"]
        role.description = data["description"]

        try:
            await self.repository.save(role)
        except DuplicateSlugError:
            return self._invalid(data, [self._slug_taken_message()])

        logger.info("Role updated", role_id=role.id, slug=role.slug)

        status = translate(
            "users", "The Role <b>{0}</b> was successfully updated.", escape(orig_name)
        )
        return RedirectResult(to=ROLES_URI, status=status)

    async def destroy(self, role_id: int | str) -> RedirectResult:
        """Delete a role."""
        role = await self.repository.get_by_id(role_id)
        if role is None:
            return self._not_found(role_id)

        deleted_id, name, slug = role.id, role.name, role.slug
        await self.repository.delete(role)

        logger.info("Role deleted", role_id=deleted_id, slug=slug)

        status = translate("users", "The Role <b>{0}</b> was successfully deleted.", escape(name))
        return RedirectResult(to=ROLES_URI, status=status)
