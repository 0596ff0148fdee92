"""Per-request profiling.

A :class:`RequestProfile` is started by the request middleware and kept in
a context variable. When database profiling is enabled, a SQLAlchemy
``before_cursor_execute`` listener counts the statements issued while the
profile is active.
"""

import time
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any

from sqlalchemy import event
from sqlalchemy.engine import Engine

_current_profile: ContextVar["RequestProfile | None"] = ContextVar(
    "nova_users_profile", default=None
)


@dataclass
class RequestProfile:
    """Timing and query statistics for one request."""

    started_at: float = field(default_factory=time.perf_counter)
    queries: int = 0
    count_queries: bool = False

    @property
    def elapsed_ms(self) -> float:
        """Milliseconds elapsed since the profile started."""
        return (time.perf_counter() - self.started_at) * 1000.0

    def as_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"elapsed_ms": round(self.elapsed_ms, 2)}
        if self.count_queries:
            data["queries"] = self.queries
        return data


def start_profile(count_queries: bool = False) -> RequestProfile:
    """Start a new profile for the current context and return it."""
    profile = RequestProfile(count_queries=count_queries)
    _current_profile.set(profile)
    return profile


def current_profile() -> RequestProfile | None:
    """Return the profile of the current context, if any."""
    return _current_profile.get()


def end_profile() -> None:
    """Detach the profile from the current context."""
    _current_profile.set(None)


def _count_query(conn, cursor, statement, parameters, context, executemany) -> None:  # noqa: ANN001
    profile = _current_profile.get()
    if profile is not None and profile.count_queries:
        profile.queries += 1


def install_query_counter(engine: Engine) -> None:
    """Attach the query counter to a (sync) engine, once."""
    if not event.contains(engine, "before_cursor_execute", _count_query):
        event.listen(engine, "before_cursor_execute", _count_query)
