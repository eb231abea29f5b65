"""Data models for command documentation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

__all__ = ["MISSING", "ActionParameter", "DocComment", "DocTag"]


class _Missing:
    """Marker for a parameter without default value."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


@dataclass
class DocTag:
    """A structured documentation tag, e.g. ``@param str name the name``."""

    name: str  # e.g. "param", "var", "return"
    body: str  # everything after the name, may span lines


@dataclass
class DocComment:
    """A documentation block split into free text and tags."""

    summary: str = ""
    tags: list[DocTag] = field(default_factory=list)

    def find_tag(self, *names: str) -> DocTag | None:
        """Return the first tag named after one of `names`."""
        for tag in self.tags:
            if tag.name in names:
                return tag
        return None


@dataclass
class ActionParameter:
    """A parameter of an action handler, in declaration order."""

    name: str
    default: Any = MISSING

    @property
    def required(self) -> bool:
        """True when no default value is available."""
        return self.default is MISSING
