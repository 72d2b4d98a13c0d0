"""Core functionalities: selector models and pure rendering functions.

Architecture Note:
    core/ holds the selector data model and stateless operations on it.
    The facade that creates selectors lives in selectorkit.builder.
"""

from selectorkit.core.selector import (
    Cardinality,
    Category,
    CombinedSelector,
    CompoundParts,
    DuplicateSelectorPartError,
    InvalidCombinatorError,
    SelectorError,
    SelectorNode,
    SelectorOrderError,
    SimpleSelector,
    Stringifiable,
    from_dict,
    render,
    render_parts,
    to_dict,
)

__all__ = [
    # Selector
    "Category",
    "Cardinality",
    "CompoundParts",
    "SimpleSelector",
    "CombinedSelector",
    "SelectorNode",
    "Stringifiable",
    "render",
    "render_parts",
    "to_dict",
    "from_dict",
    # Errors
    "SelectorError",
    "DuplicateSelectorPartError",
    "SelectorOrderError",
    "InvalidCombinatorError",
]
