"""selectorkit: build CSS selector strings from composable calls.

Usage:
    from selectorkit import css_selector_builder as builder

    builder.element("a").attr('href$=".png"').pseudo_class("focus").stringify()
    # 'a[href$=".png"]:focus'

    builder.combine(builder.element("div"), ">", builder.element("span")).stringify()
    # 'div > span'

Parts must be added in the order element, id, class, attribute,
pseudo-class, pseudo-element; element, id and pseudo-element at most once.
"""

from typing import Any

__version__ = "0.1.0"

# Builder facade
from selectorkit.builder import (
    SelectorBuilder,
    combine,
    default_builder,
    make_attr,
    make_class,
    make_element,
    make_id,
    make_pseudo_class,
    make_pseudo_element,
)

# Configuration
from selectorkit.config import BuilderSettings

# Core primitives
from selectorkit.core import (
    Cardinality,
    Category,
    CombinedSelector,
    DuplicateSelectorPartError,
    InvalidCombinatorError,
    SelectorError,
    SelectorNode,
    SelectorOrderError,
    SimpleSelector,
    Stringifiable,
    from_dict,
    render,
    to_dict,
)

# Serialization
from selectorkit.serialization import Rectangle, decode, encode

__all__ = [
    # Version
    "__version__",
    # Builder
    "SelectorBuilder",
    "css_selector_builder",
    "default_builder",
    "make_element",
    "make_id",
    "make_class",
    "make_attr",
    "make_pseudo_class",
    "make_pseudo_element",
    "combine",
    # Config
    "BuilderSettings",
    # Core
    "Category",
    "Cardinality",
    "SimpleSelector",
    "CombinedSelector",
    "SelectorNode",
    "Stringifiable",
    "render",
    "to_dict",
    "from_dict",
    # Errors
    "SelectorError",
    "DuplicateSelectorPartError",
    "SelectorOrderError",
    "InvalidCombinatorError",
    # Serialization
    "Rectangle",
    "encode",
    "decode",
]


def __getattr__(name: str) -> Any:
    # Default builder reads settings on first access, not at import
    if name == "css_selector_builder":
        return default_builder()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
