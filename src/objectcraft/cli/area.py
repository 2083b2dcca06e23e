"""CLI command: objectcraft area -- build a rectangle and report it."""

from __future__ import annotations

import sys

import click

from objectcraft.codec import serialize
from objectcraft.config import CodecConfig
from objectcraft.errors import SerializationError
from objectcraft.model import make_shape


class _Number(click.ParamType):
    """Integer when the text is integral, float otherwise."""

    name = "number"

    def convert(
        self, value: object, param: click.Parameter | None, ctx: click.Context | None
    ) -> int | float:
        if isinstance(value, (int, float)):
            return value
        try:
            return int(value)
        except ValueError:
            pass
        try:
            return float(value)
        except ValueError:
            self.fail(f"{value!r} is not a number", param, ctx)


NUMBER = _Number()


@click.command()
@click.argument("width", type=NUMBER)
@click.argument("height", type=NUMBER)
@click.option("--json", "as_json", is_flag=True, help="Print the rectangle as JSON.")
@click.option("--indent", type=int, default=None, help="Pretty-print JSON with this indent.")
def area(width: float, height: float, as_json: bool, indent: int | None) -> None:
    """Build a WIDTH x HEIGHT rectangle and print its area.

    With --json, prints the rectangle's canonical JSON instead.
    """
    shape = make_shape(width, height)
    if as_json:
        try:
            text = serialize(shape, CodecConfig(indent=indent))
        except SerializationError as exc:
            click.echo(f"Serialization error: {exc}", err=True)
            sys.exit(1)
        click.echo(text)
        return
    click.echo(f"{shape.area():g}")
