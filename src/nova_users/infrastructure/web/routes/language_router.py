"""Language changer."""

from fastapi import APIRouter, Request, status
from fastapi.responses import RedirectResponse
from markupsafe import escape

from nova_users.core.config import get_settings
from nova_users.core.i18n import translate
from nova_users.core.logging import get_logger
from nova_users.infrastructure.web.assets import site_url
from nova_users.infrastructure.web.flash import with_status

logger = get_logger(__name__)

router = APIRouter(tags=["Language"])

LOCALE_SESSION_KEY = "language"


@router.get("/{code}", summary="Switch language")
async def change_language(code: str, request: Request) -> RedirectResponse:
    """Remember the chosen language in the session and go back."""
    settings = get_settings()
    code = code.lower()

    if code in settings.languages:
        request.session[LOCALE_SESSION_KEY] = code
        logger.debug("Language changed", locale=code)
    else:
        logger.info("Unknown language requested", locale=code)
        with_status(request, translate("users", "Unknown language: {0}", escape(code)), "danger")

    target = request.headers.get("referer") or site_url()
    return RedirectResponse(target, status_code=status.HTTP_303_SEE_OTHER)
