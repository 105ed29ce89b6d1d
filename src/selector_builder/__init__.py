"""Selector builder: immutable, order-checked CSS selector construction."""
from __future__ import annotations

__version__ = "0.1.0"

# Configuration / errors
from selector_builder.config import BuilderConfig
from selector_builder.errors import (
    CodecError,
    DuplicateElementError,
    DuplicateIdError,
    DuplicatePartError,
    DuplicateTagError,
    InvalidCombinatorError,
    InvalidSelectorOrderError,
    SelectorError,
)

# Selectors
from selector_builder.selector import (
    Combinator,
    CombinedSelector,
    Part,
    Selector,
    SimpleSelector,
    Specificity,
    combine,
)

# Facade
from selector_builder.builder import SelectorBuilder, css_selector_builder

# Collaborators
from selector_builder.codec import decode, encode, selector_from_dict, selector_to_dict
from selector_builder.shapes import Rectangle

__all__ = [
    "__version__",
    # config / errors
    "BuilderConfig",
    "SelectorError",
    "DuplicatePartError",
    "DuplicateTagError",
    "DuplicateIdError",
    "DuplicateElementError",
    "InvalidSelectorOrderError",
    "InvalidCombinatorError",
    "CodecError",
    # selectors
    "Part",
    "Combinator",
    "Selector",
    "Specificity",
    "SimpleSelector",
    "CombinedSelector",
    "combine",
    # facade
    "SelectorBuilder",
    "css_selector_builder",
    # collaborators
    "encode",
    "decode",
    "selector_to_dict",
    "selector_from_dict",
    "Rectangle",
]
