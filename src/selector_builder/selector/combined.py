"""Combined selector: two selectors joined by a combinator."""

from __future__ import annotations

from dataclasses import dataclass, field

from selector_builder.errors import InvalidCombinatorError
from selector_builder.selector.base import Selector, Specificity
from selector_builder.selector.parts import Combinator

__all__ = ["CombinedSelector", "combine", "parse_combinator"]


@dataclass(frozen=True)
class CombinedSelector:
    """``left`` and ``right`` related through ``combinator``.

    Either operand may itself be a CombinedSelector. The rendered text and the
    specificity are computed once from the operands at construction, so
    reading them never walks the tree and nesting depth is unbounded.
    """

    left: Selector
    combinator: Combinator
    right: Selector
    _text: str = field(init=False, compare=False, repr=False)
    _specificity: Specificity = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        # The combinator is always flanked by single spaces, so the
        # descendant combinator renders as three spaces.
        text = f"{self.left.stringify()} {self.combinator.value} {self.right.stringify()}"
        object.__setattr__(self, "_text", text)
        object.__setattr__(
            self, "_specificity", self.left.specificity + self.right.specificity
        )

    @property
    def specificity(self) -> Specificity:
        return self._specificity

    def stringify(self) -> str:
        return self._text

    def __str__(self) -> str:
        return self.stringify()


def parse_combinator(symbol: str | Combinator) -> Combinator:
    """Return the Combinator for *symbol* or raise InvalidCombinatorError."""
    try:
        return Combinator(symbol)
    except ValueError:
        raise InvalidCombinatorError(symbol) from None


def combine(left: Selector, combinator: str | Combinator, right: Selector) -> CombinedSelector:
    """Join *left* and *right* with *combinator* (one of ``' '``, ``+``, ``~``, ``>``)."""
    comb = parse_combinator(combinator)
    for operand in (left, right):
        if not isinstance(operand, Selector):
            raise TypeError(
                f"combine() operands must be selectors, got {type(operand).__name__}"
            )
    return CombinedSelector(left=left, combinator=comb, right=right)
