"""Selector build errors.

Both ordering errors are raised before the offending part is applied, so the
selector keeps its last valid state.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from selectorkit.core.selector.models import Category


class SelectorError(Exception):
    """Base class for selector build failures."""

    pass


class DuplicateSelectorPartError(SelectorError):
    """Raised when element, id, or pseudo-element is set a second time."""

    def __init__(self, category: Category):
        self.category = category
        super().__init__(
            "element, id, and pseudo-element may each occur at most once in a compound selector"
        )


class SelectorOrderError(SelectorError):
    """Raised when a part is added after a part that must follow it."""

    def __init__(self, category: Category, last_stage: int):
        self.category = category
        self.last_stage = last_stage
        super().__init__(
            "selector parts must appear in the order: "
            "element, id, class, attribute, pseudo-class, pseudo-element"
        )


class InvalidCombinatorError(SelectorError, ValueError):
    """Raised for an unknown combinator when the builder policy is "error"."""

    def __init__(self, combinator: str, known: tuple[str, ...]):
        self.combinator = combinator
        self.known = known
        super().__init__(f"Unknown combinator {combinator!r}, expected one of {known!r}")
