"""Immutable CSS selector builder.

Each compound selector can consist of element, id, class, attribute,
pseudo-class and pseudo-element parts, in that order::

    element#id.class[attr]:pseudo-class::pseudo-element
              \\----/\\----/\\----------/
              may occur several times

Compound selectors are joined with the combinators ' ', '>', '+' and '~'.
Every call returns a new SelectorExpression; existing expressions are never
modified, so intermediate values stay valid and can be reused.

Example:
    >>> selector.id("main").class_("container").class_("editable").stringify()
    '#main.container.editable'
    >>> selector.combine(
    ...     selector.element("div").id("main"), "+", selector.element("table")
    ... ).stringify()
    'div#main + table'
"""

from __future__ import annotations

from dataclasses import dataclass

from objectcraft.errors import DuplicateSelectorPartError, OutOfOrderSelectorError
from objectcraft.selector.model import Combinator, Fragment, PartKind

__all__ = ["SelectorBuilder", "SelectorExpression", "selector"]

SelectorPart = Fragment | Combinator


def _check_structure(parts: tuple[SelectorPart, ...]) -> None:
    if not parts:
        raise ValueError("A selector expression needs at least one fragment")
    if isinstance(parts[0], Combinator) or isinstance(parts[-1], Combinator):
        raise ValueError("A combinator must sit between two selectors")
    for prev, cur in zip(parts, parts[1:]):
        if isinstance(prev, Combinator) and isinstance(cur, Combinator):
            raise ValueError("Two combinators cannot be adjacent")


def _check_runs(parts: tuple[SelectorPart, ...]) -> None:
    """Enforce part order and multiplicity inside each compound selector."""
    seen: set[PartKind] = set()
    last: PartKind | None = None
    for part in parts:
        if isinstance(part, Combinator):
            seen.clear()
            last = None
            continue
        kind = part.kind
        if kind.unique and kind in seen:
            raise DuplicateSelectorPartError(kind)
        if last is not None and kind.rank < last.rank:
            raise OutOfOrderSelectorError(kind, last)
        seen.add(kind)
        last = kind


@dataclass(frozen=True)
class SelectorExpression:
    """An ordered, validated sequence of fragments and combinators."""

    parts: tuple[SelectorPart, ...]

    def __post_init__(self) -> None:
        _check_structure(self.parts)
        _check_runs(self.parts)

    @classmethod
    def of(cls, kind: PartKind, value: str) -> SelectorExpression:
        """Create an expression holding a single fragment."""
        return cls((Fragment(kind, value),))

    # --- continuations --------------------------------------------------------

    def _append(self, kind: PartKind, value: str) -> SelectorExpression:
        return SelectorExpression(self.parts + (Fragment(kind, value),))

    def element(self, value: str) -> SelectorExpression:
        return self._append(PartKind.ELEMENT, value)

    def id(self, value: str) -> SelectorExpression:
        return self._append(PartKind.ID, value)

    def class_(self, value: str) -> SelectorExpression:
        return self._append(PartKind.CLASS, value)

    def attr(self, value: str) -> SelectorExpression:
        return self._append(PartKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorExpression:
        return self._append(PartKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorExpression:
        return self._append(PartKind.PSEUDO_ELEMENT, value)

    # --- inspection -----------------------------------------------------------

    def runs(self) -> list[tuple[Fragment, ...]]:
        """Return the compound selectors between combinators."""
        runs: list[tuple[Fragment, ...]] = []
        current: list[Fragment] = []
        for part in self.parts:
            if isinstance(part, Combinator):
                runs.append(tuple(current))
                current = []
            else:
                current.append(part)
        runs.append(tuple(current))
        return runs

    def specificity(self) -> tuple[int, int, int]:
        """CSS specificity as (ids, classes/attributes/pseudo-classes, elements)."""
        ids = classes = elements = 0
        for part in self.parts:
            if isinstance(part, Combinator):
                continue
            if part.kind is PartKind.ID:
                ids += 1
            elif part.kind in (PartKind.ELEMENT, PartKind.PSEUDO_ELEMENT):
                elements += 1
            else:
                classes += 1
        return (ids, classes, elements)

    # --- rendering ------------------------------------------------------------

    def stringify(self) -> str:
        return "".join(part.render() for part in self.parts)

    def __str__(self) -> str:
        return self.stringify()


class SelectorBuilder:
    """Facade creating selector expressions.

    Each factory returns a one-fragment SelectorExpression; ``combine`` joins
    two existing expressions. The builder holds no state.
    """

    def element(self, value: str) -> SelectorExpression:
        return SelectorExpression.of(PartKind.ELEMENT, value)

    def id(self, value: str) -> SelectorExpression:
        return SelectorExpression.of(PartKind.ID, value)

    def class_(self, value: str) -> SelectorExpression:
        return SelectorExpression.of(PartKind.CLASS, value)

    def attr(self, value: str) -> SelectorExpression:
        return SelectorExpression.of(PartKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorExpression:
        return SelectorExpression.of(PartKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorExpression:
        return SelectorExpression.of(PartKind.PSEUDO_ELEMENT, value)

    def combine(
        self,
        left: SelectorExpression,
        combinator: str | Combinator,
        right: SelectorExpression,
    ) -> SelectorExpression:
        """Join *left* and *right* with *combinator*.

        Each side keeps its own part-order rules; none span the combinator.
        """
        comb = Combinator.from_symbol(combinator)
        return SelectorExpression(left.parts + (comb,) + right.parts)


selector = SelectorBuilder()
