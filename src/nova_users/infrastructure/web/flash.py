"""Flash statuses and old input.

Both are stored in the signed session cookie when a redirect is issued and
consumed by the next rendered page.
"""

from dataclasses import dataclass
from typing import Any

from starlette.requests import Request

from nova_users.application.results import StatusType

STATUS_KEY = "_flash_status"
INPUT_KEY = "_old_input"

# Longest flashed value; keeps the session cookie under the browser size limit
MAX_INPUT_LENGTH = 300


@dataclass(frozen=True)
class FlashStatus:
    """A one-time message shown on the next page.

    Attributes:
        messages: One or more messages; they may contain trusted markup.
        type: Bootstrap alert style.
    """

    messages: list[str]
    type: str = "success"


def with_status(request: Request, message: str | list[str], type: StatusType = "success") -> None:
    """Flash a status for the next request."""
    messages = [message] if isinstance(message, str) else [str(m) for m in message]
    request.session[STATUS_KEY] = {"messages": messages, "type": type}


def with_input(request: Request, data: dict[str, Any]) -> None:
    """Flash submitted input so the form can be refilled."""
    request.session[INPUT_KEY] = {
        key: value if value is None else value[:MAX_INPUT_LENGTH]
        for key, value in data.items()
        if value is None or isinstance(value, str)
    }


def pop_status(request: Request) -> FlashStatus | None:
    """Consume the flashed status, if any."""
    raw = request.session.pop(STATUS_KEY, None)
    if not raw:
        return None
    return FlashStatus(messages=list(raw.get("messages", [])), type=raw.get("type", "success"))


def pop_old_input(request: Request) -> dict[str, Any]:
    """Consume the flashed input, if any."""
    return request.session.pop(INPUT_KEY, None) or {}
