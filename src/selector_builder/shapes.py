"""Plain geometric value types."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle with a width and a height."""

    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height
