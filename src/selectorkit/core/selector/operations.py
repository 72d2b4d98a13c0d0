"""Pure functions over selector nodes: rendering and a structured debug form.

``to_dict``/``from_dict`` describe already-built selectors as plain data.
They are not a CSS parser: ``from_dict`` replays the setters, so the usual
ordering and cardinality rules still apply.
"""

from __future__ import annotations

from typing import Any

from selectorkit.core.selector.models import (
    Category,
    CombinedSelector,
    CompoundParts,
    SelectorNode,
    SimpleSelector,
    Stringifiable,
)


def render_parts(parts: CompoundParts) -> str:
    """Concatenate parts in category order, each value wrapped in its prefix/suffix."""
    return "".join(
        f"{category.prefix}{value}{category.suffix}"
        for category in Category
        for value in parts.values(category)
    )


def render(node: Stringifiable) -> str:
    """Render any selector node as CSS selector text.

    Args:
        node: SimpleSelector, CombinedSelector, or any object with ``stringify()``.

    The two built-in shapes are matched before the protocol, so a subclass of
    SimpleSelector or CombinedSelector that overrides ``stringify()`` is
    rendered with the base logic when nested inside a CombinedSelector.

    Returns:
        Selector text. Combined selectors recurse into both sides.

    Raises:
        TypeError: If node cannot be rendered.
    """
    match node:
        case SimpleSelector(parts=parts):
            return render_parts(parts)
        case CombinedSelector(left=left, combinator=combinator, right=right):
            return f"{render(left)} {combinator} {render(right)}"
        case Stringifiable():
            return node.stringify()
    raise TypeError(f"Cannot render {type(node).__name__} as a selector")


# Structured form


def to_dict(node: SelectorNode) -> dict[str, Any]:
    """Convert a selector tree to a JSON-serializable dictionary.

    Raises:
        TypeError: If the tree holds a node that is not a SimpleSelector or
            CombinedSelector.
    """
    match node:
        case SimpleSelector(parts=parts):
            return {
                "type": "simple",
                "element": parts.element,
                "id": parts.id,
                "classes": list(parts.classes),
                "attributes": list(parts.attributes),
                "pseudo_classes": list(parts.pseudo_classes),
                "pseudo_element": parts.pseudo_element,
            }
        case CombinedSelector(left=left, combinator=combinator, right=right):
            return {
                "type": "combined",
                "left": to_dict(left),  # type: ignore[arg-type]
                "combinator": combinator,
                "right": to_dict(right),  # type: ignore[arg-type]
            }
    raise TypeError(f"Cannot convert {type(node).__name__} to a dict")


def from_dict(data: dict[str, Any]) -> SelectorNode:
    """Rebuild a selector tree from ``to_dict`` output.

    Raises:
        ValueError: If a node has an unknown ``type``.
        TypeError: If a repeatable field (classes, attributes, pseudo_classes)
            is not a list.
    """
    kind = data.get("type")
    if kind == "combined":
        return CombinedSelector(
            left=from_dict(data["left"]),
            combinator=data["combinator"],
            right=from_dict(data["right"]),
        )
    if kind != "simple":
        raise ValueError(f"Unknown selector node type: {kind!r}")

    selector = SimpleSelector()
    for category in Category:
        stored = data.get(category.field_name)
        if stored is None:
            continue
        if category.is_singleton:
            values = [stored]
        elif isinstance(stored, list):
            values = stored
        else:
            raise TypeError(
                f"{category.field_name} must be a list, got {type(stored).__name__}"
            )
        for value in values:
            selector.add(category, value)
    return selector
