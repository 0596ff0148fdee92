"""Jinja2 view rendering.

Views are rendered inside the default layout. The renderer merges the
values shared by the action with the flash status and old input of the
request, the language menu and the request statistics.
"""

from datetime import datetime
from pathlib import Path
from typing import Any

from fastapi import Request
from fastapi.responses import HTMLResponse
from jinja2 import Environment, FileSystemLoader, TemplateNotFound, select_autoescape

from nova_users.application.breadcrumb import Breadcrumb
from nova_users.application.results import ViewResult
from nova_users.core.config import Settings, get_settings
from nova_users.core.i18n import get_locale, translate
from nova_users.core.logging import get_logger
from nova_users.core.profiler import current_profile
from nova_users.infrastructure.web.assets import assets_css, assets_js, resource_url, site_url
from nova_users.infrastructure.web.flash import pop_old_input, pop_status

logger = get_logger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parents[2] / "templates"


def create_environment(settings: Settings) -> Environment:
    """Create the Jinja2 environment with the layout helpers as globals."""
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.globals.update(
        {
            "__": translate,
            "site_url": site_url,
            "resource_url": resource_url,
            "assets_css": assets_css,
            "assets_js": assets_js,
            "config": settings,
        }
    )
    return env


class ViewRenderer:
    """Renders workflow views as HTML responses."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self.env = create_environment(self.settings)

    def language_menu(self) -> list[dict[str, Any]]:
        """Entries of the language changer menu, current language marked active."""
        current = get_locale()
        return [
            {
                "code": code,
                "info": language.info,
                "name": language.name,
                "url": site_url(f"language/{code}"),
                "active": code == current,
            }
            for code, language in self.settings.languages.items()
        ]

    def statistics(self) -> dict[str, Any] | None:
        """Request statistics shown in the footer in debug mode."""
        if not self.settings.debug:
            return None
        profile = current_profile()
        return profile.as_dict() if profile is not None else None

    def context(self, request: Request, view: ViewResult) -> dict[str, Any]:
        shared = dict(view.shared)
        breadcrumb = shared.get("breadcrumb")
        if not isinstance(breadcrumb, Breadcrumb):
            shared["breadcrumb"] = Breadcrumb.of(breadcrumb)

        return {
            "request": request,
            **shared,
            **view.data,
            "status": pop_status(request),
            "old": pop_old_input(request),
            "locale": get_locale(),
            "languages": self.language_menu(),
            "year": datetime.now().year,
            "statistics": self.statistics(),
        }

    def render(self, request: Request, view: ViewResult, status_code: int = 200) -> HTMLResponse:
        """Render a view to an HTML response.

        Raises:
            TemplateNotFound: If the view template does not exist.
        """
        try:
            template = self.env.get_template(view.template)
        except TemplateNotFound:
            logger.error("View template not found", template=view.template)
            raise
        html = template.render(self.context(request, view))
        return HTMLResponse(html, status_code=status_code)

    def render_error(self, request: Request, title: str, message: str, status_code: int) -> HTMLResponse:
        """Render the error page without touching the session."""
        template = self.env.get_template("errors/error.html")
        html = template.render(
            {
                "request": request,
                "title": title,
                "message": message,
                "status_code": status_code,
                "breadcrumb": Breadcrumb(),
                "menu": (),
                "status": None,
                "old": {},
                "locale": get_locale(),
                "languages": self.language_menu(),
                "year": datetime.now().year,
                "statistics": None,
            }
        )
        return HTMLResponse(html, status_code=status_code)


_view_renderer: ViewRenderer | None = None


def get_view_renderer() -> ViewRenderer:
    """Get the global view renderer instance."""
    global _view_renderer
    if _view_renderer is None:
        _view_renderer = ViewRenderer()
    return _view_renderer
