"""Selector layer -- public type re-exports."""

from selector_builder.selector.base import Selector, Specificity
from selector_builder.selector.combined import CombinedSelector, combine, parse_combinator
from selector_builder.selector.parts import Combinator, Part
from selector_builder.selector.simple import SimpleSelector

__all__ = [
    # base
    "Selector",
    "Specificity",
    # parts
    "Part",
    "Combinator",
    # variants
    "SimpleSelector",
    "CombinedSelector",
    "combine",
    "parse_combinator",
]
