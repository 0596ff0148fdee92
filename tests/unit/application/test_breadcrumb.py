from dataclasses import FrozenInstanceError

import pytest

from nova_users.application.breadcrumb import Breadcrumb, BreadcrumbItem


def test_for_roles_starts_with_dashboard_and_roles():
    trail = Breadcrumb.for_roles()

    assert [item.title for item in trail] == ["Dashboard", "Roles"]
    assert [item.weight for item in trail] == [0, 800]


def test_append_returns_new_trail():
    base = Breadcrumb.for_roles()

    extended = base.append(uri="roles/create", title="Create Role", icon="mdi mdi-plus-circle", weight=900)

    assert len(base) == 2
    assert len(extended) == 3
    assert extended.items[-1] == BreadcrumbItem("roles/create", "Create Role", "mdi mdi-plus-circle", 900)


def test_trail_is_immutable():
    trail = Breadcrumb()

    with pytest.raises(FrozenInstanceError):
        trail.items = ()


def test_sorted_orders_by_weight_keeping_ties_in_order():
    trail = (
        Breadcrumb()
        .append("c", "C", "", 900)
        .append("a", "A", "", 0)
        .append("b1", "B1", "", 800)
        .append("b2", "B2", "", 800)
    )

    assert [item.uri for item in trail.sorted()] == ["a", "b1", "b2", "c"]


def test_of_none_is_empty():
    assert len(Breadcrumb.of(None)) == 0
