"""Breadcrumb trails.

A trail is an immutable value: handlers receive the trail built so far and
return an extended copy, so no request ever mutates another's trail.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from nova_users.core.menus import MenuItem, resolve_menu


@dataclass(frozen=True)
class BreadcrumbItem:
    """One step of a breadcrumb trail."""

    uri: str
    title: str
    icon: str
    weight: int = 0


@dataclass(frozen=True)
class Breadcrumb:
    """An ordered, immutable breadcrumb trail."""

    items: tuple[BreadcrumbItem, ...] = ()

    @classmethod
    def of(cls, items: Iterable[BreadcrumbItem | MenuItem] | None) -> "Breadcrumb":
        """Build a trail from items; None gives an empty trail."""
        if items is None:
            return cls()
        return cls(
            tuple(
                BreadcrumbItem(uri=item.uri, title=item.title, icon=item.icon, weight=item.weight)
                for item in items
            )
        )

    @classmethod
    def for_roles(cls) -> "Breadcrumb":
        """The base trail shared by every Roles page."""
        return cls.of(resolve_menu("breadcrumb"))

    def append(self, uri: str, title: str, icon: str, weight: int = 0) -> "Breadcrumb":
        """Return a new trail with one more item at the end."""
        item = BreadcrumbItem(uri=uri, title=title, icon=icon, weight=weight)
        return Breadcrumb(self.items + (item,))

    def sorted(self) -> list[BreadcrumbItem]:
        """Items ordered by weight; equal weights keep their order."""
        return sorted(self.items, key=lambda item: item.weight)

    def __iter__(self) -> Iterator[BreadcrumbItem]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)
