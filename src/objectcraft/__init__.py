"""objectcraft: shape records, JSON object codec and a CSS selector builder."""
from __future__ import annotations

__version__ = "0.1.0"

from objectcraft.codec import deserialize, parse, serialize
from objectcraft.config import CodecConfig
from objectcraft.errors import (
    DuplicateSelectorPartError,
    InvalidCombinatorError,
    ObjectcraftError,
    OutOfOrderSelectorError,
    ParseError,
    SelectorError,
    SerializationError,
)
from objectcraft.model import Circle, Rectangle, Shape, make_shape
from objectcraft.selector import Combinator, SelectorExpression, selector

__all__ = [
    "__version__",
    "CodecConfig",
    "Circle",
    "Combinator",
    "DuplicateSelectorPartError",
    "InvalidCombinatorError",
    "ObjectcraftError",
    "OutOfOrderSelectorError",
    "ParseError",
    "Rectangle",
    "SelectorError",
    "SelectorExpression",
    "SerializationError",
    "Shape",
    "deserialize",
    "make_shape",
    "parse",
    "selector",
    "serialize",
]
