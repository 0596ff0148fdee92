import pytest

from nova_users.infrastructure.persistence.pagination import MAX_PAGE, Page, normalize_page


def test_page_bounds():
    page = Page(items=["d", "e"], total=5, per_page=2, current_page=2)

    assert page.last_page == 3
    assert page.has_pages is True
    assert page.has_more_pages is True
    assert page.first_item == 3
    assert page.last_item == 4
    assert list(page.page_numbers()) == [1, 2, 3]
    assert page.url("/roles", 3) == "/roles?page=3"


def test_empty_page():
    page = Page(items=[], total=0, per_page=25, current_page=1)

    assert page.last_page == 1
    assert page.has_pages is False
    assert page.first_item is None
    assert page.last_item is None
    assert len(page) == 0


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (3, 3),
        ("2", 2),
        (None, 1),
        ("", 1),
        ("x", 1),
        (0, 1),
        (-4, 1),
        ("99999999999999999999", MAX_PAGE),
    ],
)
def test_normalize_page(raw, expected):
    assert normalize_page(raw) == expected
