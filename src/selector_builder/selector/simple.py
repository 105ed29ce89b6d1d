"""Simple selector: one compound term built from ordered fragments.

A simple selector renders its parts in canonical CSS order:

    element#id.class[attr]:pseudo-class::pseudo-element

Every fragment call returns a new frozen value, so a chain can be branched
or handed to :func:`~selector_builder.selector.combined.combine` without the
original ever changing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace

from selector_builder.config import BuilderConfig
from selector_builder.errors import (
    DuplicateElementError,
    DuplicateIdError,
    DuplicatePartError,
    DuplicateTagError,
    InvalidSelectorOrderError,
)
from selector_builder.selector.base import Specificity
from selector_builder.selector.parts import Part

logger = logging.getLogger(__name__)

_DUPLICATE_ERRORS: dict[Part, type[DuplicatePartError]] = {
    Part.ELEMENT: DuplicateTagError,
    Part.ID: DuplicateIdError,
    Part.PSEUDO_ELEMENT: DuplicateElementError,
}


@dataclass(frozen=True)
class SimpleSelector:
    """An immutable simple selector.

    Attributes:
        tag_name: Element name, if set.
        id_name: Id value without the leading ``#``, if set.
        classes: Class names in call order.
        attributes: Raw bracket-free attribute strings in call order.
        pseudo_classes: Pseudo-class names in call order.
        pseudo_element_name: Pseudo-element name, if set.
        last_part: The most recently appended part, used for order checks.
        config: Builder settings this selector was started with.
    """

    tag_name: str | None = None
    id_name: str | None = None
    classes: tuple[str, ...] = ()
    attributes: tuple[str, ...] = ()
    pseudo_classes: tuple[str, ...] = ()
    pseudo_element_name: str | None = None
    last_part: Part | None = field(default=None, compare=False)
    config: BuilderConfig = field(default_factory=BuilderConfig, compare=False, repr=False)

    # --- fragments ------------------------------------------------------------

    def element(self, name: str) -> SimpleSelector:
        self._check(Part.ELEMENT, self.tag_name is not None)
        return replace(self, tag_name=name, last_part=Part.ELEMENT)

    def id(self, value: str) -> SimpleSelector:
        self._check(Part.ID, self.id_name is not None)
        return replace(self, id_name=value, last_part=Part.ID)

    def class_(self, name: str) -> SimpleSelector:
        self._check(Part.CLASS)
        return replace(self, classes=self.classes + (name,), last_part=Part.CLASS)

    def attr(self, raw: str) -> SimpleSelector:
        """Append a raw attribute condition such as ``href$=".png"``."""
        self._check(Part.ATTRIBUTE)
        return replace(
            self, attributes=self.attributes + (raw,), last_part=Part.ATTRIBUTE
        )

    def pseudo_class(self, name: str) -> SimpleSelector:
        self._check(Part.PSEUDO_CLASS)
        return replace(
            self,
            pseudo_classes=self.pseudo_classes + (name,),
            last_part=Part.PSEUDO_CLASS,
        )

    def pseudo_element(self, name: str) -> SimpleSelector:
        self._check(Part.PSEUDO_ELEMENT, self.pseudo_element_name is not None)
        return replace(self, pseudo_element_name=name, last_part=Part.PSEUDO_ELEMENT)

    def _check(self, part: Part, already_set: bool = False) -> None:
        """Raise if appending *part* would break the selector's invariants."""
        if already_set:
            logger.debug("%s already set on %r", part.label, self.stringify())
            raise _DUPLICATE_ERRORS[part](part)
        if (
            self.config.strict_order
            and self.last_part is not None
            and part < self.last_part
        ):
            logger.debug(
                "%s after %s on %r", part.label, self.last_part.label, self.stringify()
            )
            raise InvalidSelectorOrderError(part, self.last_part)

    # --- rendering ------------------------------------------------------------

    @property
    def is_empty(self) -> bool:
        return self.stringify() == ""

    @property
    def specificity(self) -> Specificity:
        return Specificity(
            ids=1 if self.id_name is not None else 0,
            classes=len(self.classes) + len(self.attributes) + len(self.pseudo_classes),
            elements=(self.tag_name is not None) + (self.pseudo_element_name is not None),
        )

    def stringify(self) -> str:
        """Render the selector; the attribute group is bracketed once."""
        result = self.tag_name or ""
        if self.id_name is not None:
            result += f"#{self.id_name}"
        result += "".join(f".{name}" for name in self.classes)
        if self.attributes:
            result += f"[{''.join(self.attributes)}]"
        result += "".join(f":{name}" for name in self.pseudo_classes)
        if self.pseudo_element_name is not None:
            result += f"::{self.pseudo_element_name}"
        return result

    def __str__(self) -> str:
        return self.stringify()
