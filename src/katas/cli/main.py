"""Katas CLI entry point: Click group with subcommands."""

import logging

import click

from katas import __version__
from katas.config import KatasConfig


@click.group()
@click.version_option(version=__version__, prog_name="katas")
@click.option(
    "--log-level",
    default=KatasConfig.log_level,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level for library diagnostics",
)
@click.option("--json-indent", default=None, type=int, help="Indent JSON output")
@click.pass_context
def cli(ctx: click.Context, log_level: str, json_indent: int | None) -> None:
    """Katas - algorithm exercises and a CSS selector builder."""
    config = KatasConfig(log_level=log_level.upper(), json_indent=json_indent)
    logging.basicConfig(
        level=config.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = config


# Import and register subcommands
from katas.cli.selector import combine, selector  # noqa: E402
from katas.cli.puzzles import (  # noqa: E402
    brackets,
    common_path,
    digital_root,
    factorial,
    fizzbuzz,
    luhn,
    nary,
    rectangle,
)

cli.add_command(selector)
cli.add_command(combine)
cli.add_command(fizzbuzz)
cli.add_command(factorial)
cli.add_command(digital_root)
cli.add_command(nary)
cli.add_command(luhn)
cli.add_command(brackets)
cli.add_command(common_path)
cli.add_command(rectangle)
