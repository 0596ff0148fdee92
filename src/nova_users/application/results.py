"""Outcomes of workflow actions.

Actions never talk to the web framework directly. They return one of these
values and the router turns it into a response.
"""

from dataclasses import dataclass, field
from typing import Any, Literal

StatusType = Literal["success", "info", "warning", "danger"]


@dataclass(frozen=True)
class ViewResult:
    """Render a template.

    Attributes:
        template: Template name, relative to the templates directory.
        shared: Values shared with the layout (title, breadcrumb, menu).
        data: Values only the view itself uses.
    """

    template: str
    shared: dict[str, Any] = field(default_factory=dict)
    data: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class RedirectResult:
    """Redirect, optionally flashing a status and the submitted input.

    Attributes:
        to: Site-relative URI to redirect to; None means "back".
        status: One message or a list of messages to flash.
        status_type: Bootstrap alert style of the status.
        with_input: Submitted input to flash for refilling the form.
    """

    to: str | None = None
    status: str | list[str] | None = None
    status_type: StatusType = "success"
    with_input: dict[str, Any] | None = None

    @property
    def is_back(self) -> bool:
        return self.to is None


ActionResult = ViewResult | RedirectResult
