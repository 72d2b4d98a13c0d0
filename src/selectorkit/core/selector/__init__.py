"""Selector functionality: compound/combined selector models and rendering."""

from selectorkit.core.selector.errors import (
    DuplicateSelectorPartError,
    InvalidCombinatorError,
    SelectorError,
    SelectorOrderError,
)
from selectorkit.core.selector.models import (
    Cardinality,
    Category,
    CombinedSelector,
    CompoundParts,
    SelectorNode,
    SimpleSelector,
    Stringifiable,
)
from selectorkit.core.selector.operations import from_dict, render, render_parts, to_dict

__all__ = [
    # Models
    "Category",
    "Cardinality",
    "CompoundParts",
    "SimpleSelector",
    "CombinedSelector",
    "SelectorNode",
    "Stringifiable",
    # Errors
    "SelectorError",
    "DuplicateSelectorPartError",
    "SelectorOrderError",
    "InvalidCombinatorError",
    # Operations
    "render",
    "render_parts",
    "to_dict",
    "from_dict",
]
