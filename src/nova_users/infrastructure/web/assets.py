"""Asset URLs, tags and serving.

The layout asks for stylesheets and scripts by URL; this module turns those
lists into tags and serves the module's own static files. Bundling and
minification are left to a front-end toolchain.
"""

import importlib
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from markupsafe import Markup, escape
from starlette.staticfiles import StaticFiles
from starlette.types import ASGIApp, Receive, Scope, Send

from nova_users.core.config import Settings
from nova_users.core.logging import get_logger

logger = get_logger(__name__)

STATIC_DIR = Path(__file__).resolve().parents[2] / "static"
ASSETS_PREFIX = "/assets"


def site_url(path: str = "") -> str:
    """Site-relative URL of a path, e.g. ``site_url('roles')`` -> ``/roles``."""
    return "/" + path.lstrip("/")


def resource_url(path: str, module: str | None = None) -> str:
    """URL of a static resource, optionally owned by a module.

    ``resource_url('css/style.css', 'Bootstrap')`` -> ``/assets/bootstrap/css/style.css``
    """
    parts = [ASSETS_PREFIX]
    if module:
        parts.append(module.lower())
    parts.append(path.lstrip("/"))
    return "/".join(parts)


def assets_css(urls: Iterable[str]) -> Markup:
    """Stylesheet link tags for the given URLs."""
    return Markup("\n").join(
        Markup('<link href="{}" rel="stylesheet" type="text/css">').format(escape(url))
        for url in urls
    )


def assets_js(urls: Iterable[str]) -> Markup:
    """Script tags for the given URLs."""
    return Markup("\n").join(
        Markup('<script src="{}" type="text/javascript"></script>').format(escape(url))
        for url in urls
    )


class CachedStaticFiles(StaticFiles):
    """Static files served with a ``Cache-Control: max-age`` header."""

    def __init__(self, *args: Any, cache_time: int = 0, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.cache_time = cache_time

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        async def send_with_cache_control(message: dict) -> None:
            if message["type"] == "http.response.start" and message.get("status") in (200, 304):
                headers = list(message.get("headers", []))
                headers.append((b"cache-control", f"public, max-age={self.cache_time}".encode()))
                message = {**message, "headers": headers}
            await send(message)

        await super().__call__(scope, receive, send_with_cache_control)


def create_assets_app(settings: Settings) -> ASGIApp:
    """Build the ASGI app serving the module assets.

    The 'default' driver serves the package static directory. The 'custom'
    driver imports the class named by ``assets_dispatcher`` and builds it
    with the same ``directory`` and ``cache_time`` arguments.

    Raises:
        ImportError: If the custom dispatcher cannot be imported.
    """
    if settings.assets_driver == "custom":
        module_name, _, class_name = (settings.assets_dispatcher or "").rpartition(".")
        if not module_name:
            raise ImportError(f"Invalid assets dispatcher path: {settings.assets_dispatcher!r}")
        dispatcher_class = getattr(importlib.import_module(module_name), class_name)
        logger.info("Using custom assets dispatcher", dispatcher=settings.assets_dispatcher)
        return dispatcher_class(directory=str(STATIC_DIR), cache_time=settings.assets_cache_time)

    return CachedStaticFiles(directory=str(STATIC_DIR), cache_time=settings.assets_cache_time)
