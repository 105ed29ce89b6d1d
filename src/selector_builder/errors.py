"""Error hierarchy for the selector builder."""
from __future__ import annotations

from typing import Any


class SelectorError(Exception):
    """Base error for all selector_builder errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


# ---------------------------------------------------------------------------
# Fragment errors
# ---------------------------------------------------------------------------

DUPLICATE_PART_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)

ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)


class DuplicatePartError(SelectorError):
    """A single-occurrence part was set twice on the same selector."""

    def __init__(self, part: Any, message: str = DUPLICATE_PART_MESSAGE) -> None:
        super().__init__(message)
        self.part = part


class DuplicateTagError(DuplicatePartError):
    """The element (tag) part was already set."""


class DuplicateIdError(DuplicatePartError):
    """The id part was already set."""


class DuplicateElementError(DuplicatePartError):
    """The pseudo-element part was already set."""


class InvalidSelectorOrderError(SelectorError):
    """A part was appended after a part that must follow it."""

    def __init__(self, part: Any, previous: Any) -> None:
        super().__init__(ORDER_MESSAGE)
        self.part = part
        self.previous = previous


# ---------------------------------------------------------------------------
# Combinator / codec errors
# ---------------------------------------------------------------------------


class InvalidCombinatorError(SelectorError):
    """The combinator symbol is not one of ' ', '+', '~', '>'."""

    def __init__(self, combinator: Any) -> None:
        super().__init__(f"Invalid combinator: {combinator!r}")
        self.combinator = combinator


class CodecError(SelectorError):
    """JSON text could not be encoded or decoded into the requested schema."""
