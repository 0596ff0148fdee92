"""Core Nova Users utilities.

This module exports core utilities for use throughout the application.
"""

from nova_users.core.config import Settings, get_settings
from nova_users.core.i18n import get_locale, get_translator, set_locale, translate
from nova_users.core.logging import (
    bind_correlation_id,
    clear_context,
    configure_logging,
    get_logger,
)

__all__ = [
    "Settings",
    "bind_correlation_id",
    "clear_context",
    "configure_logging",
    "get_locale",
    "get_logger",
    "get_settings",
    "get_translator",
    "set_locale",
    "translate",
]
