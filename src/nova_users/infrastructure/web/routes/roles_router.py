"""Roles administration pages.

Each route hands its inputs to the role workflow and turns the outcome into
an HTML page or a redirect carrying a flash status.
"""

from fastapi import APIRouter, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from nova_users.application.breadcrumb import Breadcrumb
from nova_users.application.results import ActionResult, RedirectResult
from nova_users.core.logging import get_logger
from nova_users.infrastructure.web.assets import site_url
from nova_users.infrastructure.web.dependencies import Renderer, Workflow
from nova_users.infrastructure.web.flash import with_input, with_status
from nova_users.infrastructure.web.templating import ViewRenderer

logger = get_logger(__name__)

router = APIRouter(tags=["Roles"])


def redirect(request: Request, result: RedirectResult, fallback: str) -> RedirectResponse:
    """Turn a redirect result into a 303 response, flashing its status and input.

    A "back" redirect goes to the Referer when there is one, else to ``fallback``.
    """
    if result.status is not None:
        with_status(request, result.status, result.status_type)
    if result.with_input is not None:
        with_input(request, result.with_input)

    if result.is_back:
        target = request.headers.get("referer") or site_url(fallback)
    else:
        target = site_url(result.to)
    return RedirectResponse(target, status_code=status.HTTP_303_SEE_OTHER)


def respond(request: Request, renderer: ViewRenderer, result: ActionResult, fallback: str) -> Response:
    if isinstance(result, RedirectResult):
        return redirect(request, result, fallback)
    return renderer.render(request, result)


async def read_form(request: Request) -> dict[str, str]:
    """Submitted form fields, without file uploads."""
    form = await request.form()
    return {key: value for key, value in form.items() if isinstance(value, str)}


@router.get("", response_class=HTMLResponse, summary="List roles")
async def index(request: Request, workflow: Workflow, renderer: Renderer, page: str = "1") -> Response:
    """List the roles, one page at a time."""
    return renderer.render(request, await workflow.index(page))


@router.get("/create", response_class=HTMLResponse, summary="Create role form")
async def create(request: Request, workflow: Workflow, renderer: Renderer) -> Response:
    """Show the form for a new role."""
    return renderer.render(request, await workflow.create(Breadcrumb.for_roles()))


@router.post("", summary="Store role")
async def store(request: Request, workflow: Workflow) -> Response:
    """Create a role from the submitted form."""
    result = await workflow.store(await read_form(request))
    return redirect(request, result, fallback="roles/create")


@router.get("/{role_id}", response_class=HTMLResponse, summary="Show role")
async def show(role_id: str, request: Request, workflow: Workflow, renderer: Renderer) -> Response:
    """Show a single role."""
    result = await workflow.show(role_id, Breadcrumb.for_roles())
    return respond(request, renderer, result, fallback="roles")


@router.get("/{role_id}/edit", response_class=HTMLResponse, summary="Edit role form")
async def edit(role_id: str, request: Request, workflow: Workflow, renderer: Renderer) -> Response:
    """Show the edit form of a role."""
    result = await workflow.edit(role_id, Breadcrumb.for_roles())
    return respond(request, renderer, result, fallback="roles")


@router.post("/{role_id}", summary="Update role")
async def update(role_id: str, request: Request, workflow: Workflow) -> Response:
    """Update a role from the submitted form."""
    result = await workflow.update(role_id, await read_form(request))
    return redirect(request, result, fallback=f"roles/{role_id}/edit")


@router.post("/{role_id}/destroy", summary="Delete role")
async def destroy(role_id: str, request: Request, workflow: Workflow) -> Response:
    """Delete a role."""
    result = await workflow.destroy(role_id)
    return redirect(request, result, fallback="roles")
