"""Selector part ordering and combinator symbols."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class Part(IntEnum):
    """Fragment kinds of a simple selector, valued by their canonical position."""

    ELEMENT = 1
    ID = 2
    CLASS = 3
    ATTRIBUTE = 4
    PSEUDO_CLASS = 5
    PSEUDO_ELEMENT = 6

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", "-")


class Combinator(StrEnum):
    """Operators joining two selectors."""

    DESCENDANT = " "
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"
    CHILD = ">"
