"""JSON helpers for plain value types."""

from selectorkit.serialization.codec import decode, encode
from selectorkit.serialization.models import Rectangle

__all__ = [
    "Rectangle",
    "encode",
    "decode",
]
