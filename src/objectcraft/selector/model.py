"""Selector model: part kinds, fragments and combinators."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from objectcraft.errors import InvalidCombinatorError


class PartKind(Enum):
    """Category of a compound-selector part, declared in rendering order."""

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def rank(self) -> int:
        """Position in the required part order; lower ranks come first."""
        return _RANKS[self]

    @property
    def unique(self) -> bool:
        """True if the kind may appear at most once per compound selector."""
        return self in _UNIQUE_KINDS


_RANKS: dict[PartKind, int] = {
    PartKind.ELEMENT: 0,
    PartKind.ID: 1,
    PartKind.CLASS: 2,
    PartKind.ATTRIBUTE: 3,
    PartKind.PSEUDO_CLASS: 4,
    PartKind.PSEUDO_ELEMENT: 5,
}

_UNIQUE_KINDS = frozenset({PartKind.ELEMENT, PartKind.ID, PartKind.PSEUDO_ELEMENT})

# (prefix, suffix) wrapped around the literal text of each kind.
_DECORATIONS: dict[PartKind, tuple[str, str]] = {
    PartKind.ELEMENT: ("", ""),
    PartKind.ID: ("#", ""),
    PartKind.CLASS: (".", ""),
    PartKind.ATTRIBUTE: ("[", "]"),
    PartKind.PSEUDO_CLASS: (":", ""),
    PartKind.PSEUDO_ELEMENT: ("::", ""),
}


@dataclass(frozen=True)
class Fragment:
    """One typed piece of a compound selector, e.g. ``.container``."""

    kind: PartKind
    value: str  # literal text without decoration: "container", 'href$=".png"'

    def render(self) -> str:
        prefix, suffix = _DECORATIONS[self.kind]
        return f"{prefix}{self.value}{suffix}"


class Combinator(Enum):
    """Relation joining two selectors."""

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"

    @classmethod
    def from_symbol(cls, symbol: str | Combinator) -> Combinator:
        """Resolve a combinator symbol, raising InvalidCombinatorError if unknown."""
        if isinstance(symbol, Combinator):
            return symbol
        try:
            return cls(symbol)
        except ValueError:
            raise InvalidCombinatorError(symbol) from None

    def render(self) -> str:
        return f" {self.value} "
