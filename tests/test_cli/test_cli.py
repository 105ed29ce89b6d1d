"""Tests for the selector-builder CLI commands."""
from __future__ import annotations

import json
import logging

from click.testing import CliRunner

from selector_builder import __version__
from selector_builder.cli.main import cli


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_cli_group_help(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "assemble CSS selectors" in result.output

    def test_cli_lists_commands(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert "build" in result.output
        assert "render" in result.output

    def test_version(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# build command
# ---------------------------------------------------------------------------


class TestBuildCommand:
    def test_build_chain(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli, ["build", "element=a", 'attr=href$=".png"', "pseudo-class=focus"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == 'a[href$=".png"]:focus'

    def test_build_classes(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["build", "id=main", "class=container", "class=editable"])
        assert result.exit_code == 0
        assert result.output.strip() == "#main.container.editable"

    def test_build_specificity(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["build", "element=a", "class=x", "--specificity"])
        assert result.exit_code == 0
        assert "Specificity: 0,1,1" in result.output

    def test_build_json(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["build", "element=li", "pseudo-element=marker", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.output) == {"element": "li", "pseudo_element": "marker"}

    def test_out_of_order_fails(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["build", "class=a", "id=b"])
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "following order" in result.output

    def test_permissive_reorders(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["build", "--permissive", "class=a", "id=b"])
        assert result.exit_code == 0
        assert result.output.strip() == "#b.a"

    def test_duplicate_fails(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["build", "id=a", "id=b"])
        assert result.exit_code == 1
        assert "more then one time" in result.output

    def test_malformed_step(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["build", "tag=div"])
        assert result.exit_code == 1
        assert "KIND=VALUE" in result.output

    def test_missing_steps(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["build"])
        assert result.exit_code != 0

    def test_verbose_enables_debug_logging(self, caplog) -> None:
        package_logger = logging.getLogger("selector_builder")
        previous = package_logger.level
        try:
            runner = CliRunner()
            result = runner.invoke(cli, ["--verbose", "build", "class=a", "id=b"])
            assert result.exit_code == 1
            assert package_logger.getEffectiveLevel() == logging.DEBUG
            assert "id after class" in caplog.text
        finally:
            package_logger.setLevel(previous)

    def test_quiet_by_default(self, caplog) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["build", "class=a", "id=b"])
        assert result.exit_code == 1
        assert "id after class" not in caplog.text

    def test_single_step(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["build", "pseudo-element=before"])
        assert result.exit_code == 0
        assert result.output.strip() == "::before"

    def test_malformed_later_step(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["build", "element=a", "class"])
        assert result.exit_code == 1
        assert "KIND=VALUE" in result.output


# ---------------------------------------------------------------------------
# render command
# ---------------------------------------------------------------------------


class TestRenderCommand:
    def test_render_file(self, tmp_path) -> None:
        path = tmp_path / "sel.json"
        path.write_text(
            json.dumps(
                {
                    "left": {"element": "div", "id": "main"},
                    "combinator": "+",
                    "right": {
                        "left": {"element": "tr"},
                        "combinator": " ",
                        "right": {"element": "td"},
                    },
                }
            ),
            encoding="utf-8",
        )
        runner = CliRunner()
        result = runner.invoke(cli, ["render", str(path)])
        assert result.exit_code == 0
        assert result.output.rstrip("\n") == "div#main + tr   td"

    def test_render_stdin(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli, ["render", "-", "--specificity"], input='{"id": "x", "classes": ["a", "b"]}'
        )
        assert result.exit_code == 0
        assert "#x.a.b" in result.output
        assert "Specificity: 1,2,0" in result.output

    def test_render_invalid_json(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["render", "-"], input="{oops")
        assert result.exit_code == 1
        assert "Invalid JSON" in result.output

    def test_render_bad_combinator(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["render", "-"],
            input='{"left": {"element": "a"}, "combinator": "|", "right": {"element": "b"}}',
        )
        assert result.exit_code == 1
        assert "Invalid combinator" in result.output
