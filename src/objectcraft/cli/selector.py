"""CLI command: objectcraft selector -- render a selector from tokens."""

from __future__ import annotations

import logging
import sys

import click

from objectcraft.errors import SelectorError
from objectcraft.selector import Combinator, SelectorExpression
from objectcraft.selector import selector as builder

logger = logging.getLogger("objectcraft.cli")

# Token kind -> builder/expression method name.
_METHODS = {
    "element": "element",
    "id": "id",
    "class": "class_",
    "attr": "attr",
    "pseudo-class": "pseudo_class",
    "pseudo-element": "pseudo_element",
}

_COMBINATOR_WORDS = {
    "descendant": " ",
    "child": ">",
    "adjacent": "+",
    "sibling": "~",
}

_SYMBOLS = {c.value for c in Combinator}


def build_selector(tokens: list[str] | tuple[str, ...]) -> SelectorExpression:
    """Build an expression from ``kind=value`` and combinator tokens.

    Combinators fold left: ``a > b + c`` is ``combine(combine(a, '>', b), '+', c)``,
    which renders the same as the right-nested form.
    """
    left: SelectorExpression | None = None
    pending: str | None = None
    current: SelectorExpression | None = None

    for token in tokens:
        symbol = _COMBINATOR_WORDS.get(token, token)
        if symbol in _SYMBOLS:
            if current is None:
                raise ValueError(f"Combinator {token!r} must follow a selector")
            left = current if left is None else builder.combine(left, pending, current)
            pending = symbol
            current = None
            continue

        name, sep, value = token.partition("=")
        if not sep or name not in _METHODS:
            raise ValueError(
                f"Malformed token {token!r}; expected kind=value or a combinator"
            )
        target = builder if current is None else current
        current = getattr(target, _METHODS[name])(value)

    if current is None:
        raise ValueError("Selector must end with a compound selector")
    if left is None:
        return current
    return builder.combine(left, pending, current)


@click.command()
@click.argument("tokens", nargs=-1, required=True)
def selector(tokens: tuple[str, ...]) -> None:
    """Render a CSS selector from TOKENS.

    Each token is either a part written as kind=value (element, id, class,
    attr, pseudo-class, pseudo-element) or a combinator: '>', '+', '~', ' ',
    or one of the words descendant, child, adjacent, sibling.

    Example: objectcraft selector element=a 'attr=href$=".png"' pseudo-class=focus
    """
    logger.debug("Building selector from %d token(s)", len(tokens))
    try:
        expr = build_selector(tokens)
    except (SelectorError, ValueError) as exc:
        click.echo(f"Selector error: {exc}", err=True)
        sys.exit(1)
    click.echo(expr.stringify())
