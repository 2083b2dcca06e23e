"""CLI command: objectcraft decode -- bind JSON text to a named shape."""

from __future__ import annotations

import sys

import click

from objectcraft.codec import deserialize
from objectcraft.errors import ParseError
from objectcraft.model import DESCRIPTORS, get_descriptor


@click.command()
@click.argument("kind", type=click.Choice(sorted(DESCRIPTORS), case_sensitive=False))
@click.argument("text")
def decode(kind: str, text: str) -> None:
    """Deserialize TEXT into a KIND shape and print its fields and area.

    Exits with code 1 if TEXT is not a JSON object or the shape cannot
    compute its area from the given fields.
    """
    try:
        shape = deserialize(get_descriptor(kind), text)
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    for name, value in vars(shape).items():
        click.echo(f"{name}: {value}")

    try:
        click.echo(f"area: {shape.area():g}")
    except (AttributeError, TypeError, ValueError) as exc:
        click.echo(f"Shape error: {exc}", err=True)
        sys.exit(1)
