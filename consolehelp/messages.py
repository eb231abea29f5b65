"""Localized user-facing messages.

Messages are looked up by their English text in the catalog of the active
language; untranslated messages fall back to the English text. Named
placeholders such as ``{command}`` are then substituted.
"""

from .constants import DEFAULT_LANGUAGE

__all__ = ["add_messages", "get_language", "reset_messages", "set_language", "translate"]


class _MessageState:
    """Container for the active language and the loaded catalogs."""

    def __init__(self) -> None:
        self.language = DEFAULT_LANGUAGE
        self.catalogs: dict[str, dict[str, str]] = {}


_state = _MessageState()


def set_language(language: str) -> None:
    """Select the catalog used by `translate`."""
    _state.language = language


def get_language() -> str:
    """Return the active language."""
    return _state.language


def add_messages(language: str, messages: dict[str, str]) -> None:
    """Register (or extend) the catalog of `language`."""
    _state.catalogs.setdefault(language, {}).update(messages)


def reset_messages() -> None:
    """Drop every catalog and go back to the default language."""
    _state.catalogs = {}
    _state.language = DEFAULT_LANGUAGE


def translate(message: str, **params: object) -> str:
    """Return `message` in the active language with `params` substituted.

    Example:
        translate('No help for unknown command "{command}".', command="foo")
    """
    text = _state.catalogs.get(_state.language, {}).get(message, message)
    for name, value in params.items():
        text = text.replace(f"{{{name}}}", str(value))
    return text
