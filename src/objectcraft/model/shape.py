"""Shape models: Rectangle, Circle and the named descriptor registry."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class Shape(Protocol):
    """Anything that can report its area."""

    def area(self) -> float: ...


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle.

    The area is derived from the current fields on every call; it is never
    stored on the instance, so deserialized rectangles compute it the same way.
    """

    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height


@dataclass(frozen=True)
class Circle:
    """A circle described by its radius."""

    radius: float

    def area(self) -> float:
        return math.pi * self.radius**2


def make_shape(width: float, height: float) -> Rectangle:
    """Return a rectangle with the given dimensions.

    Example:
        >>> r = make_shape(10, 20)
        >>> r.width, r.height, r.area()
        (10, 20, 200)
    """
    return Rectangle(width=width, height=height)


# Descriptor classes selectable by name for deserialization.
DESCRIPTORS: dict[str, type] = {
    "rectangle": Rectangle,
    "circle": Circle,
}


def get_descriptor(name: str) -> type:
    """Look up a descriptor class by its registered name."""
    try:
        return DESCRIPTORS[name.lower()]
    except KeyError:
        known = ", ".join(sorted(DESCRIPTORS))
        raise KeyError(f"Unknown descriptor {name!r}; known: {known}") from None
