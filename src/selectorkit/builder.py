"""Selector builder facade.

Each part method starts a new SimpleSelector; ``combine`` joins two built
selectors with a combinator.

Usage:
    from selectorkit import css_selector_builder as builder

    builder.id("main").class_("container").class_("editable").stringify()
    # '#main.container.editable'

    builder.combine(
        builder.element("div").id("main"),
        "+",
        builder.combine(builder.element("table"), "~", builder.element("tr")),
    ).stringify()
    # 'div#main + table ~ tr'
"""

from __future__ import annotations

import functools
import warnings
from typing import Any

from selectorkit.config import BuilderSettings
from selectorkit.core.selector import (
    CombinedSelector,
    InvalidCombinatorError,
    SimpleSelector,
    Stringifiable,
)


class SelectorBuilder:
    """Stateless entry point for building CSS selectors.

    Args:
        settings: Combinator handling. Defaults to BuilderSettings() loaded
            from the environment.
    """

    def __init__(self, settings: BuilderSettings | None = None):
        self._settings = settings if settings is not None else BuilderSettings()

    @property
    def settings(self) -> BuilderSettings:
        return self._settings

    def element(self, value: str) -> SimpleSelector:
        return SimpleSelector().element(value)

    def id(self, value: str) -> SimpleSelector:
        return SimpleSelector().id(value)

    def class_(self, value: str) -> SimpleSelector:
        return SimpleSelector().class_(value)

    def attr(self, value: str) -> SimpleSelector:
        return SimpleSelector().attr(value)

    def pseudo_class(self, value: str) -> SimpleSelector:
        return SimpleSelector().pseudo_class(value)

    def pseudo_element(self, value: str) -> SimpleSelector:
        return SimpleSelector().pseudo_element(value)

    def combine(
        self, left: Stringifiable, combinator: str, right: Stringifiable
    ) -> CombinedSelector:
        """Join two selectors: ``left <combinator> right``.

        Either side may itself be a CombinedSelector, so chains are built by
        nesting.

        Raises:
            InvalidCombinatorError: If combinator is unknown and the policy is "error".
        """
        self.check_combinator(combinator, stacklevel=2)
        return CombinedSelector(left, combinator, right)

    def check_combinator(self, combinator: str, stacklevel: int = 1) -> None:
        """Apply the combinator policy to combinator.

        Args:
            combinator: Combinator token about to be used.
            stacklevel: Frame the warning is attributed to, where 1 is the
                caller of this method.

        Raises:
            InvalidCombinatorError: If combinator is unknown and the policy is "error".
        """
        known = self._settings.known_combinators
        if combinator in known:
            return
        policy = self._settings.combinator_policy
        if policy == "error":
            raise InvalidCombinatorError(combinator, known)
        if policy == "warn":
            warnings.warn(
                f"combine() received unknown combinator {combinator!r}. "
                f"It will be rendered verbatim.",
                stacklevel=stacklevel + 1,
            )


@functools.cache
def default_builder() -> SelectorBuilder:
    """Default builder, configured from SELECTORKIT_* on first call.

    Raises:
        pydantic.ValidationError: If the environment or ``.env`` holds invalid settings.
    """
    return SelectorBuilder()


def __getattr__(name: str) -> Any:
    if name == "css_selector_builder":
        return default_builder()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def make_element(value: str) -> SimpleSelector:
    return SimpleSelector().element(value)


def make_id(value: str) -> SimpleSelector:
    return SimpleSelector().id(value)


def make_class(value: str) -> SimpleSelector:
    return SimpleSelector().class_(value)


def make_attr(value: str) -> SimpleSelector:
    return SimpleSelector().attr(value)


def make_pseudo_class(value: str) -> SimpleSelector:
    return SimpleSelector().pseudo_class(value)


def make_pseudo_element(value: str) -> SimpleSelector:
    return SimpleSelector().pseudo_element(value)


def combine(left: Stringifiable, combinator: str, right: Stringifiable) -> CombinedSelector:
    """Join two selectors under the default builder's combinator policy."""
    default_builder().check_combinator(combinator, stacklevel=2)
    return CombinedSelector(left, combinator, right)
