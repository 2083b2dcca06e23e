"""Tests for the objectcraft CLI commands."""
from __future__ import annotations

import pytest
from click.testing import CliRunner

from objectcraft import __version__
from objectcraft.cli.main import cli
from objectcraft.cli.selector import build_selector
from objectcraft.errors import DuplicateSelectorPartError, InvalidCombinatorError


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "CSS selector builder" in result.output

    def test_lists_commands(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--help"])
        assert "area" in result.output
        assert "decode" in result.output
        assert "selector" in result.output

    def test_version(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# area command
# ---------------------------------------------------------------------------


class TestAreaCommand:
    def test_prints_area(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["area", "10", "20"])
        assert result.exit_code == 0
        assert result.output.strip() == "200"

    def test_float_dimensions(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["area", "2.5", "4"])
        assert result.output.strip() == "10"

    def test_json(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["area", "10", "20", "--json"])
        assert result.exit_code == 0
        assert result.output.strip() == '{"width":10,"height":20}'

    def test_json_indent(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["area", "1", "2", "--json", "--indent", "2"])
        assert result.output == '{\n  "width": 1,\n  "height": 2\n}\n'

    def test_json_non_finite(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["area", "nan", "1", "--json"])
        assert result.exit_code == 1
        assert "Serialization error" in result.output
        assert isinstance(result.exception, SystemExit)

    def test_rejects_non_number(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["area", "ten", "20"])
        assert result.exit_code == 2
        assert "is not a number" in result.output


# ---------------------------------------------------------------------------
# decode command
# ---------------------------------------------------------------------------


class TestDecodeCommand:
    def test_rectangle(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["decode", "rectangle", '{"width":3,"height":4}'])
        assert result.exit_code == 0
        assert "width: 3" in result.output
        assert "height: 4" in result.output
        assert "area: 12" in result.output

    def test_circle(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["decode", "circle", '{"radius":1}'])
        assert result.exit_code == 0
        assert "area: 3.14159" in result.output

    def test_parse_error(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["decode", "circle", '{"radius":'])
        assert result.exit_code == 1
        assert "Parse error" in result.output

    def test_missing_fields(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["decode", "rectangle", '{"width":3}'])
        assert result.exit_code == 1
        assert "Shape error" in result.output

    def test_unknown_kind(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["decode", "triangle", "{}"])
        assert result.exit_code == 2


# ---------------------------------------------------------------------------
# selector command
# ---------------------------------------------------------------------------


class TestSelectorCommand:
    def test_compound(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli, ["selector", "element=a", 'attr=href$=".png"', "pseudo-class=focus"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == 'a[href$=".png"]:focus'

    def test_combinators(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli, ["selector", "element=div", "id=main", "+", "element=table", "id=data"]
        )
        assert result.output.strip() == "div#main + table#data"

    def test_duplicate_part(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["selector", "id=a", "id=b"])
        assert result.exit_code == 1
        assert "Selector error" in result.output

    def test_malformed_token(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["selector", "div"])
        assert result.exit_code == 1
        assert "Malformed token" in result.output

    def test_requires_tokens(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["selector"])
        assert result.exit_code == 2

    def test_verbose_flag(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["-v", "selector", "element=p"])
        assert result.exit_code == 0
        assert result.output.splitlines()[-1] == "p"


class TestBuildSelector:
    def test_single_part(self) -> None:
        assert build_selector(["class=x"]).stringify() == ".x"

    def test_combinator_words(self) -> None:
        expr = build_selector(
            ["element=ul", "child", "element=li", "adjacent", "element=li", "sibling", "class=x"]
        )
        assert expr.stringify() == "ul > li + li ~ .x"

    def test_descendant_space(self) -> None:
        expr = build_selector(["element=tr", " ", "element=td"])
        assert expr.stringify() == "tr   td"

    def test_descendant_word(self) -> None:
        assert build_selector(["id=a", "descendant", "id=b"]).stringify() == "#a   #b"

    def test_value_may_contain_equals(self) -> None:
        assert build_selector(['attr=type="text"']).stringify() == '[type="text"]'

    def test_every_kind(self) -> None:
        expr = build_selector(
            [
                "element=input",
                "id=n",
                "class=c",
                "attr=required",
                "pseudo-class=invalid",
                "pseudo-element=placeholder",
            ]
        )
        assert expr.stringify() == "input#n.c[required]:invalid::placeholder"

    def test_leading_combinator(self) -> None:
        with pytest.raises(ValueError, match="must follow a selector"):
            build_selector([">", "element=a"])

    def test_trailing_combinator(self) -> None:
        with pytest.raises(ValueError, match="must end with"):
            build_selector(["element=a", ">"])

    def test_unknown_kind(self) -> None:
        with pytest.raises(ValueError, match="Malformed token"):
            build_selector(["tag=a"])

    def test_validation_errors_propagate(self) -> None:
        with pytest.raises(DuplicateSelectorPartError):
            build_selector(["element=a", "element=b"])

    def test_invalid_combinator_is_malformed_token(self) -> None:
        with pytest.raises(ValueError) as exc_info:
            build_selector(["element=a", "|", "element=b"])
        assert not isinstance(exc_info.value, InvalidCombinatorError)
