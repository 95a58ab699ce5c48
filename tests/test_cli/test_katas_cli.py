"""Tests for the katas CLI commands."""

from __future__ import annotations

import json

from click.testing import CliRunner

from katas import __version__
from katas.cli.main import cli


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help(self) -> None:
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "CSS selector builder" in result.output

    def test_lists_commands(self) -> None:
        result = CliRunner().invoke(cli, ["--help"])
        for name in ("selector", "combine", "fizzbuzz", "luhn", "common-path", "rectangle"):
            assert name in result.output

    def test_version(self) -> None:
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# selector / combine
# ---------------------------------------------------------------------------


class TestSelectorCommand:
    def test_builds_selector(self) -> None:
        result = CliRunner().invoke(
            cli,
            ["selector", "-p", "element", "a", "-p", "attr", 'href$=".png"', "-p", "pseudo-class", "focus"],
        )
        assert result.exit_code == 0
        assert result.output.strip() == 'a[href$=".png"]:focus'

    def test_order_violation_exits_1(self) -> None:
        result = CliRunner().invoke(cli, ["selector", "-p", "class", "x", "-p", "id", "main"])
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "arranged in the following order" in result.output

    def test_uniqueness_violation_exits_1(self) -> None:
        result = CliRunner().invoke(cli, ["selector", "-p", "id", "a", "-p", "id", "b"])
        assert result.exit_code == 1
        assert "more then one time" in result.output

    def test_unknown_kind_is_usage_error(self) -> None:
        result = CliRunner().invoke(cli, ["selector", "-p", "tag", "a"])
        assert result.exit_code == 2

    def test_debug_logging_option(self) -> None:
        result = CliRunner().invoke(cli, ["--log-level", "debug", "selector", "-p", "element", "div"])
        assert result.exit_code == 0
        assert "div" in result.output


class TestCombineCommand:
    def test_combine(self) -> None:
        result = CliRunner().invoke(cli, ["combine", "div#main", ">", "p.note"])
        assert result.exit_code == 0
        assert result.output.strip() == "div#main > p.note"

    def test_space_combinator_keeps_spacing(self) -> None:
        result = CliRunner().invoke(cli, ["combine", "tr", " ", "td"])
        assert result.output == "tr   td\n"


# ---------------------------------------------------------------------------
# puzzles
# ---------------------------------------------------------------------------


class TestPuzzleCommands:
    def test_fizzbuzz_single(self) -> None:
        result = CliRunner().invoke(cli, ["fizzbuzz", "15"])
        assert result.output.strip() == "FizzBuzz"

    def test_fizzbuzz_upto(self) -> None:
        result = CliRunner().invoke(cli, ["fizzbuzz", "5", "--upto"])
        assert result.output.split() == ["1", "2", "Fizz", "4", "Buzz"]

    def test_factorial(self) -> None:
        result = CliRunner().invoke(cli, ["factorial", "5"])
        assert result.output.strip() == "120"

    def test_factorial_rejects_negative(self) -> None:
        result = CliRunner().invoke(cli, ["factorial", "--", "-1"])
        assert result.exit_code == 2

    def test_digital_root(self) -> None:
        result = CliRunner().invoke(cli, ["digital-root", "165536"])
        assert result.output.strip() == "8"

    def test_nary(self) -> None:
        result = CliRunner().invoke(cli, ["nary", "365", "3"])
        assert result.output.strip() == "111112"

    def test_luhn_valid(self) -> None:
        result = CliRunner().invoke(cli, ["luhn", "4012888888881881"])
        assert result.exit_code == 0
        assert result.output.strip() == "valid"

    def test_luhn_invalid(self) -> None:
        result = CliRunner().invoke(cli, ["luhn", "4571234567890111"])
        assert result.exit_code == 1
        assert result.output.strip() == "invalid"

    def test_luhn_not_a_number(self) -> None:
        result = CliRunner().invoke(cli, ["luhn", "12ab"])
        assert result.exit_code == 2
        assert "non-empty digit string" in result.output

    def test_brackets(self) -> None:
        assert CliRunner().invoke(cli, ["brackets", "{[(<{[]}>)]}"]).exit_code == 0
        result = CliRunner().invoke(cli, ["brackets", "[[]"])
        assert result.exit_code == 1
        assert result.output.strip() == "unbalanced"

    def test_common_path(self) -> None:
        result = CliRunner().invoke(
            cli, ["common-path", "/web/images/image1.png", "/web/images/image2.png"]
        )
        assert result.output.strip() == "/web/images/"

    def test_rectangle(self) -> None:
        result = CliRunner().invoke(cli, ["rectangle", "10", "20"])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert json.loads(lines[0]) == {"width": 10.0, "height": 20.0}
        assert lines[1] == "area: 200"

    def test_rectangle_indent(self) -> None:
        result = CliRunner().invoke(cli, ["--json-indent", "2", "rectangle", "1", "2"])
        assert result.exit_code == 0
        assert '  "width": 1.0' in result.output
