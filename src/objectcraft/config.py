"""Codec options and logging setup."""
from __future__ import annotations

import logging
from dataclasses import dataclass


@dataclass(frozen=True)
class CodecConfig:
    indent: int | None = None  # None = canonical compact output
    ensure_ascii: bool = False
    allow_nan: bool = False
    sort_keys: bool = False  # False = insertion order

    @property
    def separators(self) -> tuple[str, str]:
        """Item and key separators matching the indent mode."""
        if self.indent is None:
            return (",", ":")
        return (",", ": ")


DEFAULT_CODEC_CONFIG = CodecConfig()


def configure_logging(*, verbose: bool = False) -> None:
    """Route objectcraft log records to stderr.

    Args:
        verbose: Enable DEBUG-level output. When False, only WARNING+.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logging.getLogger("objectcraft").setLevel(level)
