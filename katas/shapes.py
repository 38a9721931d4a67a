"""Geometric shapes and their measurements."""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Rectangle:
    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height


@dataclass(frozen=True)
class Circle:
    radius: float

    def area(self) -> float:
        return math.pi * self.radius * self.radius


@dataclass(frozen=True)
class Triangle:
    base: float
    height: float

    def area(self) -> float:
        return (self.base * self.height) * 0.5


def perimeter(rectangle: Rectangle) -> float:
    """Return the perimeter of a rectangle."""
    return 2 * (rectangle.width + rectangle.height)


def area(rectangle: Rectangle) -> float:
    """Return the area of a rectangle."""
    return rectangle.width * rectangle.height