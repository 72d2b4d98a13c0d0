"""Generic JSON encode/decode for plain data.

``decode`` rebuilds an instance by passing the decoded object's values to the
target constructor positionally, in document order.

Usage:
    encode([1, 2, 3])                            # '[1,2,3]'
    encode(Rectangle(10, 20))                    # '{"width":10,"height":20}'
    decode(Rectangle, '{"width":10,"height":20}')  # Rectangle(width=10, height=20)
"""

from __future__ import annotations

import dataclasses
import json
from typing import Any, TypeVar

T = TypeVar("T")


def _default(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def encode(value: Any) -> str:
    """Encode plain data (and dataclass instances) as compact JSON text."""
    return json.dumps(value, default=_default, separators=(",", ":"))


def decode(cls: type[T], text: str) -> T:
    """Construct ``cls`` from the values of a JSON object.

    Args:
        cls: Type whose constructor takes the object's values positionally.
        text: JSON object text.

    Raises:
        TypeError: If text does not decode to a JSON object.
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise TypeError(f"Expected a JSON object, got {type(data).__name__}")
    return cls(*data.values())
