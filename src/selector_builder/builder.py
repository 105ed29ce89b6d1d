"""Stateless facade that starts a new selector for every call."""

from __future__ import annotations

import logging

from selector_builder.config import BuilderConfig
from selector_builder.errors import SelectorError
from selector_builder.selector import Combinator, CombinedSelector, Selector, SimpleSelector
from selector_builder.selector import combine as _combine

__all__ = ["SelectorBuilder", "css_selector_builder"]

logger = logging.getLogger(__name__)


class SelectorBuilder:
    """Entry point for building CSS selectors.

    Each fragment method returns a fresh :class:`SimpleSelector` rooted at
    that call, and the builder itself holds nothing but its frozen config, so
    one instance can serve any number of independent (or concurrent) chains::

        builder = SelectorBuilder()
        builder.element("a").attr('href$=".png"').pseudo_class("focus").stringify()
        # 'a[href$=".png"]:focus'
    """

    def __init__(self, config: BuilderConfig | None = None) -> None:
        self.config = config or BuilderConfig()

    def _start(self) -> SimpleSelector:
        return SimpleSelector(config=self.config)

    def element(self, name: str) -> SimpleSelector:
        return self._start().element(name)

    def id(self, value: str) -> SimpleSelector:
        return self._start().id(value)

    def class_(self, name: str) -> SimpleSelector:
        return self._start().class_(name)

    def attr(self, raw: str) -> SimpleSelector:
        return self._start().attr(raw)

    def pseudo_class(self, name: str) -> SimpleSelector:
        return self._start().pseudo_class(name)

    def pseudo_element(self, name: str) -> SimpleSelector:
        return self._start().pseudo_element(name)

    def combine(
        self, left: Selector, combinator: str | Combinator, right: Selector
    ) -> CombinedSelector:
        try:
            combined = _combine(left, combinator, right)
        except (SelectorError, TypeError) as exc:
            logger.debug("combine rejected: %s", exc)
            raise
        logger.debug("combine: %s", combined)
        return combined


css_selector_builder = SelectorBuilder()
