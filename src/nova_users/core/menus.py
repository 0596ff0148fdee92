"""Admin menu configuration for the Users module.

``ROLES_MENU`` holds the base breadcrumb trail shared by every Roles page,
the ``main`` menu shown on the list and create pages, and the ``entry``
menu shown on pages about a single Role. Entry URIs may contain an ``{id}``
placeholder which is filled in with :func:`resolve_menu`.
"""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class MenuItem:
    """A navigation link.

    Attributes:
        uri: Site-relative URI.
        title: Untranslated title (domain 'users').
        icon: CSS classes of the icon.
        weight: Sort weight, lower first.
    """

    uri: str
    title: str
    icon: str
    weight: int = 0


ROLES_MENU: dict[str, tuple[MenuItem, ...]] = {
    "breadcrumb": (
        MenuItem(uri="admin/dashboard", title="Dashboard", icon="mdi mdi-view-dashboard", weight=0),
        MenuItem(uri="roles", title="Roles", icon="mdi mdi-account-key", weight=800),
    ),
    "main": (
        MenuItem(uri="roles", title="Roles", icon="mdi mdi-format-list-bulleted", weight=0),
        MenuItem(uri="roles/create", title="Create Role", icon="mdi mdi-plus-circle", weight=10),
    ),
    "entry": (
        MenuItem(uri="roles", title="Roles", icon="mdi mdi-format-list-bulleted", weight=0),
        MenuItem(uri="roles/{id}", title="Show Role", icon="mdi mdi-eye", weight=10),
        MenuItem(uri="roles/{id}/edit", title="Edit Role", icon="mdi mdi-pencil", weight=20),
    ),
}


def resolve_menu(name: str, role_id: int | None = None) -> tuple[MenuItem, ...]:
    """Return a roles menu with its ``{id}`` placeholders filled in.

    Raises:
        KeyError: If no menu with that name exists.
    """
    items = ROLES_MENU[name]
    if role_id is None:
        return items
    return tuple(replace(item, uri=item.uri.format(id=role_id)) for item in items)
