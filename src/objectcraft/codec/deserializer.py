"""JSON parsing and descriptor-bound deserialization.

A descriptor is an ordinary class. Deserializing creates an instance of it
without calling ``__init__`` and fills the instance namespace with the parsed
fields, so the result answers to the descriptor's methods while its data
comes from the text alone.
"""

from __future__ import annotations

import json
import logging
from typing import Any, TypeVar

from objectcraft.config import DEFAULT_CODEC_CONFIG, CodecConfig
from objectcraft.errors import ParseError

__all__ = ["deserialize", "parse"]

logger = logging.getLogger("objectcraft.codec")

T = TypeVar("T")


class _NonFiniteConstant(ValueError):
    pass


def _reject_constant(name: str) -> Any:
    raise _NonFiniteConstant(f"{name} is not valid JSON")


def _json_type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return "object"


def parse(text: str | bytes, config: CodecConfig | None = None) -> Any:
    """Parse JSON *text* into plain Python values.

    Raises ParseError with the 1-based line and column of the first problem.
    """
    cfg = config or DEFAULT_CODEC_CONFIG
    parse_constant = None if cfg.allow_nan else _reject_constant
    try:
        return json.loads(text, parse_constant=parse_constant)
    except json.JSONDecodeError as exc:
        raise ParseError(
            f"Malformed JSON: {exc.msg} (line {exc.lineno}, column {exc.colno})",
            line=exc.lineno,
            column=exc.colno,
            cause=exc,
        ) from exc
    except _NonFiniteConstant as exc:
        raise ParseError(f"Malformed JSON: {exc}", cause=exc) from exc
    except UnicodeDecodeError as exc:
        raise ParseError(f"JSON bytes are not valid text: {exc}", cause=exc) from exc
    except RecursionError as exc:
        raise ParseError(f"JSON nesting is too deep: {exc}", cause=exc) from exc


def deserialize(
    descriptor: type[T], text: str | bytes, config: CodecConfig | None = None
) -> T:
    """Parse *text* and bind the resulting fields to a new *descriptor* instance.

    The text must hold a JSON object. Its fields are set on the instance in
    document order and take precedence over same-named class attributes;
    methods are only ever taken from *descriptor*. A field that shares its
    name with a method therefore hides that method on the returned instance
    (``{"area": 5}`` makes ``r.area == 5``); the class itself is untouched.

    Example:
        >>> from objectcraft.model import Circle
        >>> c = deserialize(Circle, '{"radius":10}')
        >>> round(c.area(), 2)
        314.16
    """
    if not isinstance(descriptor, type):
        raise TypeError(
            f"descriptor must be a class, got {type(descriptor).__name__}"
        )

    data = parse(text, config)
    if not isinstance(data, dict):
        raise ParseError(
            f"Expected a JSON object for {descriptor.__name__}, "
            f"got {_json_type_name(data)}"
        )

    instance = descriptor.__new__(descriptor)
    try:
        namespace = vars(instance)
    except TypeError:
        raise TypeError(
            f"{descriptor.__name__} instances have no __dict__ to hold parsed fields"
        ) from None
    namespace.update(data)

    logger.debug(
        "Deserialized %d field(s) into %s", len(data), descriptor.__name__
    )
    return instance
