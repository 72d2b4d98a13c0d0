"""Plain value types used with the JSON codec."""

from dataclasses import dataclass


@dataclass(slots=True)
class Rectangle:
    """Width/height pair.

    Example:
        r = Rectangle(10, 20)
        r.get_area()  # 200
    """

    width: float
    height: float

    def get_area(self) -> float:
        return self.width * self.height
