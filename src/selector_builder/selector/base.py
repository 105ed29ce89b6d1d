"""Base protocol shared by simple and combined selectors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True, order=True)
class Specificity:
    """CSS specificity weight, compared lexicographically.

    Attributes:
        ids: Number of id parts.
        classes: Number of class, attribute and pseudo-class parts.
        elements: Number of element and pseudo-element parts.
    """

    ids: int = 0
    classes: int = 0
    elements: int = 0

    def __add__(self, other: Specificity) -> Specificity:
        if not isinstance(other, Specificity):
            return NotImplemented
        return Specificity(
            ids=self.ids + other.ids,
            classes=self.classes + other.classes,
            elements=self.elements + other.elements,
        )

    def __str__(self) -> str:
        return f"{self.ids},{self.classes},{self.elements}"


@runtime_checkable
class Selector(Protocol):
    """Anything that renders to a CSS selector string."""

    @property
    def specificity(self) -> Specificity: ...

    def stringify(self) -> str: ...
