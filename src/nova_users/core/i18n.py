"""Message lookup for translated strings.

Messages are looked up by (locale, domain, message) and fall back to the
message itself. Positional placeholders ``{0}``, ``{1}`` ... are then
replaced with the given arguments. Only the placeholders are formatted, so
other braces in the message are left untouched.
"""

import re
from contextvars import ContextVar
from typing import Any

from nova_users.core.config import get_settings

_PLACEHOLDER = re.compile(r"\{(\d+)\}")

_current_locale: ContextVar[str | None] = ContextVar("nova_users_locale", default=None)


class Translator:
    """In-memory message catalogs keyed by locale and domain."""

    def __init__(self) -> None:
        self._catalogs: dict[str, dict[str, dict[str, str]]] = {}

    def add_messages(self, locale: str, domain: str, messages: dict[str, str]) -> None:
        """Register translations for a locale and domain.

        Args:
            locale: Language code (e.g. 'fr').
            domain: Message domain (e.g. 'users').
            messages: Mapping of source message to translated message.
        """
        catalog = self._catalogs.setdefault(locale, {}).setdefault(domain, {})
        catalog.update(messages)

    def clear(self) -> None:
        """Drop every registered catalog."""
        self._catalogs.clear()

    def lookup(self, locale: str, domain: str, message: str) -> str:
        """Return the translation of a message, or the message itself."""
        return self._catalogs.get(locale, {}).get(domain, {}).get(message, message)

    def translate(self, domain: str, message: str, *args: Any, locale: str | None = None) -> str:
        """Translate a message and substitute its positional placeholders.

        Args:
            domain: Message domain.
            message: Source message, possibly containing ``{n}`` placeholders.
            *args: Values for the placeholders.
            locale: Locale to use; defaults to the current request locale.

        Returns:
            The translated and formatted message.
        """
        text = self.lookup(locale or get_locale(), domain, message)
        if not args:
            return text

        def substitute(match: re.Match[str]) -> str:
            index = int(match.group(1))
            if index < len(args):
                return str(args[index])
            return match.group(0)

        return _PLACEHOLDER.sub(substitute, text)


_translator: Translator | None = None


def get_translator() -> Translator:
    """Get the global translator instance."""
    global _translator
    if _translator is None:
        _translator = Translator()
    return _translator


def get_locale() -> str:
    """Return the locale of the current request, or the application default."""
    return _current_locale.get() or get_settings().app_locale


def set_locale(locale: str | None) -> None:
    """Set the locale for the current context (request)."""
    _current_locale.set(locale)


def translate(domain: str, message: str, *args: Any) -> str:
    """Translate a message in the given domain for the current locale."""
    return get_translator().translate(domain, message, *args)
