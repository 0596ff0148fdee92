from types import SimpleNamespace

from nova_users.infrastructure.web.flash import (
    MAX_INPUT_LENGTH,
    FlashStatus,
    pop_old_input,
    pop_status,
    with_input,
    with_status,
)


def make_request():
    return SimpleNamespace(session={})


def test_status_is_consumed_once():
    request = make_request()

    with_status(request, "The Role <b>Editor</b> was successfully created.")

    assert pop_status(request) == FlashStatus(
        messages=["The Role <b>Editor</b> was successfully created."], type="success"
    )
    assert pop_status(request) is None


def test_status_list_of_messages():
    request = make_request()

    with_status(request, ["First error.", "Second error."], "danger")

    status = pop_status(request)
    assert status.messages == ["First error.", "Second error."]
    assert status.type == "danger"


def test_old_input_keeps_strings_and_missing_values():
    request = make_request()

    with_input(request, {"name": "X", "slug": None, "upload": object()})

    assert pop_old_input(request) == {"name": "X", "slug": None}
    assert pop_old_input(request) == {}


def test_old_input_is_truncated():
    request = make_request()

    with_input(request, {"name": "Editor", "description": "x" * 5000})

    old = pop_old_input(request)
    assert old["name"] == "Editor"
    assert old["description"] == "x" * MAX_INPUT_LENGTH
