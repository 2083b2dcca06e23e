"""Canonical JSON serialization."""

from __future__ import annotations

import json
import logging
from dataclasses import fields, is_dataclass
from typing import Any

from objectcraft.config import DEFAULT_CODEC_CONFIG, CodecConfig
from objectcraft.errors import SerializationError

__all__ = ["serialize"]

logger = logging.getLogger("objectcraft.codec")


def _instance_data(obj: Any) -> dict[str, Any]:
    """Return the own data of a plain object as a mapping.

    Used as the ``default`` hook of the JSON encoder. Callables (functions,
    bound methods, classes) carry no data and are rejected.
    """
    if not callable(obj):
        namespace = getattr(obj, "__dict__", None)
        if isinstance(namespace, dict):
            return dict(namespace)
        if is_dataclass(obj):
            return {f.name: getattr(obj, f.name) for f in fields(obj)}
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def serialize(value: Any, config: CodecConfig | None = None) -> str:
    """Return the canonical JSON text of *value*.

    Mapping keys keep their insertion order unless ``config.sort_keys`` is set.
    Raises SerializationError for cycles, non-finite floats and values JSON
    cannot represent.
    """
    cfg = config or DEFAULT_CODEC_CONFIG
    logger.debug("Serializing value of type %s", type(value).__name__)
    try:
        return json.dumps(
            value,
            indent=cfg.indent,
            separators=cfg.separators,
            ensure_ascii=cfg.ensure_ascii,
            allow_nan=cfg.allow_nan,
            sort_keys=cfg.sort_keys,
            default=_instance_data,
        )
    except (TypeError, ValueError, RecursionError) as exc:
        raise SerializationError(f"Cannot serialize value: {exc}", cause=exc) from exc
