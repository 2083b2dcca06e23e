"""Error hierarchy for objectcraft."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from objectcraft.selector.model import PartKind


class ObjectcraftError(Exception):
    """Base error for all objectcraft errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


# ---------------------------------------------------------------------------
# Codec errors
# ---------------------------------------------------------------------------


class SerializationError(ObjectcraftError):
    """A value contains a cycle or a type JSON cannot represent."""


class ParseError(ObjectcraftError):
    """Raised when JSON text cannot be parsed into a usable value."""

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        *,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.line = line
        self.column = column


# ---------------------------------------------------------------------------
# Selector errors
# ---------------------------------------------------------------------------


class SelectorError(ObjectcraftError):
    """Base error for invalid selector construction."""


class DuplicateSelectorPartError(SelectorError):
    """A once-per-compound part (element, id, pseudo-element) was repeated."""

    def __init__(self, kind: PartKind) -> None:
        super().__init__(
            f"Duplicate {kind.value} selector: element, id and pseudo-element "
            "should not occur more than one time inside the selector"
        )
        self.kind = kind


class OutOfOrderSelectorError(SelectorError):
    """A part was appended after a part that must follow it."""

    def __init__(self, kind: PartKind, previous: PartKind) -> None:
        super().__init__(
            f"Cannot place {kind.value} after {previous.value}: selector parts "
            "should be arranged in the following order: element, id, class, "
            "attribute, pseudo-class, pseudo-element"
        )
        self.kind = kind
        self.previous = previous


class InvalidCombinatorError(SelectorError, ValueError):
    """The combinator symbol is not one of ' ', '>', '+', '~'."""

    def __init__(self, symbol: object) -> None:
        super().__init__(
            f"Invalid combinator {symbol!r}; expected one of ' ', '>', '+', '~'"
        )
        self.symbol = symbol
