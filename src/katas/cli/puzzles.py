"""CLI commands for the exercise functions."""

from __future__ import annotations

import sys

import click

from katas.config import KatasConfig
from katas.objects import Rectangle
from katas.puzzles import numbers, text


@click.command()
@click.argument("n", type=int)
@click.option("--upto", is_flag=True, help="Print every value from 1 to N")
def fizzbuzz(n: int, upto: bool) -> None:
    """Print FizzBuzz for N (or for 1..N with --upto)."""
    values = range(1, n + 1) if upto else [n]
    for value in values:
        click.echo(numbers.fizzbuzz(value))


@click.command()
@click.argument("n", type=click.IntRange(min=0))
def factorial(n: int) -> None:
    """Print N!."""
    click.echo(numbers.factorial(n))


@click.command("digital-root")
@click.argument("n", type=click.IntRange(min=0))
def digital_root(n: int) -> None:
    """Print the digital root of N."""
    click.echo(numbers.digital_root(n))


@click.command()
@click.argument("num", type=int)
@click.argument("radix", type=click.IntRange(2, 36))
def nary(num: int, radix: int) -> None:
    """Print NUM written in base RADIX."""
    click.echo(numbers.to_nary_string(num, radix))


@click.command()
@click.argument("number")
def luhn(number: str) -> None:
    """Check a credit card NUMBER with the Luhn algorithm."""
    try:
        valid = numbers.is_credit_card_number(number)
    except ValueError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(2)
    if valid:
        click.echo("valid")
        sys.exit(0)
    click.echo("invalid")
    sys.exit(1)


@click.command()
@click.argument("source")
def brackets(source: str) -> None:
    """Check whether SOURCE has balanced [] () {} <> brackets."""
    if text.is_brackets_balanced(source):
        click.echo("balanced")
        sys.exit(0)
    click.echo("unbalanced")
    sys.exit(1)


@click.command("common-path")
@click.argument("paths", nargs=-1, required=True)
def common_path(paths: tuple[str, ...]) -> None:
    """Print the directory shared by all PATHS."""
    click.echo(text.get_common_directory_path(paths))


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
@click.pass_obj
def rectangle(config: KatasConfig, width: float, height: float) -> None:
    """Print a WIDTH x HEIGHT rectangle as JSON, followed by its area."""
    rect = Rectangle(width=width, height=height)
    click.echo(rect.to_json(indent=config.json_indent))
    click.echo(f"area: {rect.area():g}")
