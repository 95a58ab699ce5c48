"""CLI commands: katas selector / katas combine -- build CSS selectors."""

from __future__ import annotations

import sys

import click

from katas.selector import Selector, SelectorError, SelectorKind
from katas.selector import combine as combine_selectors


@click.command()
@click.option(
    "-p",
    "--part",
    "parts",
    multiple=True,
    required=True,
    nargs=2,
    type=(click.Choice([k.value for k in SelectorKind]), str),
    metavar="KIND VALUE",
    help="Selector part to append, in order (repeatable)",
)
def selector(parts: tuple[tuple[str, str], ...]) -> None:
    """Build a compound selector from parts and print it.

    Parts are appended in the order given and must follow element, id,
    class, attr, pseudo-class, pseudo-element. Exits with code 1 on an
    out-of-order or repeated unique part.
    """
    result = Selector()
    try:
        for kind, value in parts:
            result.add(SelectorKind(kind), value)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(result.stringify())


@click.command()
@click.argument("left")
@click.argument("combinator")
@click.argument("right")
def combine(left: str, combinator: str, right: str) -> None:
    """Join two rendered selectors with a combinator (' ', '+', '~', '>')."""
    combined = combine_selectors(
        Selector().element(left), combinator, Selector().element(right)
    )
    click.echo(combined.stringify())
