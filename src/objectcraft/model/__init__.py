from objectcraft.model.shape import (
    DESCRIPTORS,
    Circle,
    Rectangle,
    Shape,
    get_descriptor,
    make_shape,
)

__all__ = [
    "DESCRIPTORS",
    "Circle",
    "Rectangle",
    "Shape",
    "get_descriptor",
    "make_shape",
]
