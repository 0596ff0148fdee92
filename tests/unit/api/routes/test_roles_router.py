"""Unit tests for the Roles router helpers."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from starlette.requests import Request

from nova_users.application.results import RedirectResult, ViewResult
from nova_users.application.services import RoleWorkflow
from nova_users.infrastructure.web.flash import INPUT_KEY, STATUS_KEY
from nova_users.infrastructure.web.routes.roles_router import destroy, redirect, respond
from nova_users.infrastructure.web.templating import ViewRenderer


def make_request(referer: str | None = None) -> Request:
    headers = [(b"referer", referer.encode())] if referer else []
    return Request({"type": "http", "method": "POST", "path": "/roles", "headers": headers, "session": {}})


@pytest.fixture
def mock_workflow():
    """Create a mock RoleWorkflow."""
    return AsyncMock(spec=RoleWorkflow)


def test_redirect_to_uri_flashes_status():
    request = make_request(referer="http://test/roles/create")

    response = redirect(request, RedirectResult(to="roles", status="Done."), fallback="roles/create")

    assert response.status_code == 303
    assert response.headers["location"] == "/roles"
    assert request.session[STATUS_KEY] == {"messages": ["Done."], "type": "success"}
    assert INPUT_KEY not in request.session


def test_redirect_back_prefers_referer():
    request = make_request(referer="http://test/roles/3/edit")
    result = RedirectResult(status=["Bad slug."], status_type="danger", with_input={"slug": "x y"})

    response = redirect(request, result, fallback="roles/3/edit")

    assert response.headers["location"] == "http://test/roles/3/edit"
    assert request.session[STATUS_KEY]["type"] == "danger"
    assert request.session[INPUT_KEY] == {"slug": "x y"}


def test_redirect_back_without_referer_uses_fallback():
    request = make_request()

    response = redirect(request, RedirectResult(), fallback="roles/create")

    assert response.headers["location"] == "/roles/create"
    assert STATUS_KEY not in request.session


def test_respond_renders_views():
    request = make_request()
    renderer = MagicMock(spec=ViewRenderer)
    view = ViewResult(template="roles/show.html")

    respond(request, renderer, view, fallback="roles")

    renderer.render.assert_called_once_with(request, view)


@pytest.mark.asyncio
async def test_destroy_redirects_to_list(mock_workflow):
    mock_workflow.destroy.return_value = RedirectResult(to="roles", status="Deleted.")
    request = make_request()

    response = await destroy("5", request, mock_workflow)

    assert response.headers["location"] == "/roles"
    mock_workflow.destroy.assert_awaited_once_with("5")
