"""Tests for the brisk CLI commands."""
from __future__ import annotations

import pytest
from click.testing import CliRunner

from brisk.cli.main import cli


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help_lists_commands(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "compile utility classes to CSS" in result.output
        assert "compile" in result.output
        assert "migrate" in result.output
        assert "check" in result.output

    def test_version(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "brisk, version 0.1.0" in result.output

    def test_invalid_dark_mode(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--dark-mode", "sometimes", "compile", "flex"])
        assert result.exit_code != 0


# ---------------------------------------------------------------------------
# compile
# ---------------------------------------------------------------------------


class TestCompileCommand:
    def test_pretty(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["compile", "flex", "p-4"])
        assert result.exit_code == 0
        assert result.output == ".flex {\n  display: flex;\n}\n\n.p-4 {\n  padding: 1rem;\n}\n"

    def test_minify(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["compile", "--minify", "flex"])
        assert result.exit_code == 0
        assert result.output == ".flex{display:flex}\n"

    def test_layers(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["compile", "--layers", "flex"])
        assert result.output.startswith("@layer utilities {\n")

    def test_comments(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["compile", "--comments", "flex"])
        assert result.output.startswith("/* flex */\n")

    def test_variant_group_argument(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["compile", "hover:(flex p-4)"])
        assert result.exit_code == 0
        assert ".hover\\:flex:hover {" in result.output
        assert ".hover\\:p-4:hover {" in result.output

    def test_unknown_tokens_skipped(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["compile", "wobble"])
        assert result.exit_code == 0
        assert result.output == ""

    def test_group_options_apply(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--prefix", "tw-", "--important", "compile", "tw-flex"])
        assert result.exit_code == 0
        assert result.output == ".tw-flex {\n  display: flex !important;\n}\n"

    def test_dark_mode_option(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--dark-mode", "media", "compile", "dark:flex"])
        assert result.output.startswith("@media (prefers-color-scheme: dark) {\n")

    def test_requires_tokens(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["compile"])
        assert result.exit_code != 0


# ---------------------------------------------------------------------------
# migrate
# ---------------------------------------------------------------------------


class TestMigrateCommand:
    def test_report(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["migrate", "p-4 divide-x-2 bg-red-500"])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0] == "OK           p-4"
        assert lines[1].startswith("DEPRECATED   divide-x-2 -> border-x-2  (")
        assert lines[2] == "OK           bg-red-500"
        assert "Summary: 2/3 compatible (67%), 1 deprecated, 1 incompatible, 0 with warnings" in result.output
        assert "  - divide-x-2 -> border-x-2" in result.output

    def test_warning_status(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["migrate", "foo-bar"])
        assert result.output.startswith("WARNING      foo-bar  (Unknown utility class")

    def test_hover_tip(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["migrate", "hover:p-4 hover:m-2", "hover:flex"])
        assert "Tip: Use variant groups for cleaner hover states:" in result.output


# ---------------------------------------------------------------------------
# check
# ---------------------------------------------------------------------------


class TestCheckCommand:
    def test_clean(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["check", "flex", "hover:p-4"])
        assert result.exit_code == 0
        assert "OK: 2 token(s) checked (0 diagnostics)" in result.output

    def test_errors_exit_one(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["check", "flex", "wobble"])
        assert result.exit_code == 1
        assert 'ERROR [token=wobble]: Unknown utility class: "wobble"' in result.output
        assert "Summary: 1 error(s), 0 warning(s), 0 info" in result.output

    def test_warnings_exit_zero(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["check", "p-4", "p-2"])
        assert result.exit_code == 0
        assert "Summary: 0 error(s), 1 warning(s), 0 info" in result.output

    def test_prefix_respected(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--prefix", "tw-", "check", "tw-flex"])
        assert result.exit_code == 0
