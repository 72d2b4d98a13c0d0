r"""Selector models: part categories and the two selector node shapes.

A compound selector is built part by part in a fixed category order:

    element#id.class[attr]:pseudo-class::pseudo-element
              \----/\----/\----------/
              repeatable categories

Usage:
    sel = SimpleSelector().element("a").attr('href$=".png"').pseudo_class("focus")
    sel.stringify()  # 'a[href$=".png"]:focus'

    CombinedSelector(SimpleSelector().element("div"), ">", SimpleSelector().element("span"))
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Protocol, Self, runtime_checkable

from selectorkit.core.selector.errors import DuplicateSelectorPartError, SelectorOrderError


class Cardinality(Enum):
    """How many times a category may occur in one compound selector."""

    SINGLETON = auto()  # at most once
    REPEATABLE = auto()  # any number, kept in insertion order


class Category(Enum):
    """Selector part kinds, declared in the order CSS requires them.

    Each member carries its ordering index, cardinality, the text wrapped
    around every rendered value, and the CompoundParts field that stores it.
    """

    ELEMENT = (1, Cardinality.SINGLETON, "", "", "element")
    ID = (2, Cardinality.SINGLETON, "#", "", "id")
    CLASS = (3, Cardinality.REPEATABLE, ".", "", "classes")
    ATTRIBUTE = (4, Cardinality.REPEATABLE, "[", "]", "attributes")
    PSEUDO_CLASS = (5, Cardinality.REPEATABLE, ":", "", "pseudo_classes")
    PSEUDO_ELEMENT = (6, Cardinality.SINGLETON, "::", "", "pseudo_element")

    def __init__(
        self, index: int, cardinality: Cardinality, prefix: str, suffix: str, field_name: str
    ):
        self.index = index
        self.cardinality = cardinality
        self.prefix = prefix
        self.suffix = suffix
        self.field_name = field_name

    @property
    def is_singleton(self) -> bool:
        return self.cardinality is Cardinality.SINGLETON


@runtime_checkable
class Stringifiable(Protocol):
    """Anything that renders itself as selector text."""

    def stringify(self) -> str: ...


@dataclass(slots=True)
class CompoundParts:
    """Raw part values of one compound selector."""

    element: str | None = None
    id: str | None = None
    classes: list[str] = field(default_factory=list)
    attributes: list[str] = field(default_factory=list)
    pseudo_classes: list[str] = field(default_factory=list)
    pseudo_element: str | None = None

    def add(self, category: Category, value: str) -> None:
        """Store value under category, replacing singletons and appending otherwise."""
        if category.is_singleton:
            setattr(self, category.field_name, value)
        else:
            getattr(self, category.field_name).append(value)

    def values(self, category: Category) -> list[str]:
        """Values stored for category, in insertion order. Unset singletons give []."""
        stored = getattr(self, category.field_name)
        if category.is_singleton:
            return [] if stored is None else [stored]
        return list(stored)


@dataclass(slots=True)
class SimpleSelector:
    """Compound selector accumulated through chained calls.

    Every setter mutates this instance and returns it. ``last_stage`` is the
    highest category index applied so far (0 before any part).

    Raises:
        DuplicateSelectorPartError: A singleton category is set right after itself.
        SelectorOrderError: A category comes after one with a higher index.
    """

    parts: CompoundParts = field(default_factory=CompoundParts)
    last_stage: int = 0

    def add(self, category: Category, value: str) -> Self:
        """Check ordering for category, then apply value."""
        if category.is_singleton and self.last_stage == category.index:
            raise DuplicateSelectorPartError(category)
        if category.index < self.last_stage:
            raise SelectorOrderError(category, self.last_stage)
        self.last_stage = category.index
        self.parts.add(category, value)
        return self

    def element(self, value: str) -> Self:
        return self.add(Category.ELEMENT, value)

    def id(self, value: str) -> Self:
        return self.add(Category.ID, value)

    def class_(self, value: str) -> Self:
        return self.add(Category.CLASS, value)

    def attr(self, value: str) -> Self:
        return self.add(Category.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> Self:
        return self.add(Category.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> Self:
        return self.add(Category.PSEUDO_ELEMENT, value)

    def stringify(self) -> str:
        # Late import to avoid circular dependency
        from selectorkit.core.selector.operations import render

        return render(self)

    def __str__(self) -> str:
        return self.stringify()


@dataclass(frozen=True, slots=True)
class CombinedSelector:
    """Two selectors joined by a combinator: ``left <combinator> right``.

    The combinator is rendered verbatim with one space on each side, so a
    descendant combinator (" ") yields three spaces.
    """

    left: Stringifiable
    combinator: str
    right: Stringifiable

    def stringify(self) -> str:
        # Late import to avoid circular dependency
        from selectorkit.core.selector.operations import render

        return render(self)

    def __str__(self) -> str:
        return self.stringify()


SelectorNode = SimpleSelector | CombinedSelector
