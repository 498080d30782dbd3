"""
Tests for mlscan - Scanner Command-Line Tool
============================================

These tests drive the click command through CliRunner.
"""

from click.testing import CliRunner

from minilang import __version__
from minilang.cli.errors import ExitCode
from minilang.cli.mlscan import main


CLEAN_SOURCE = "start\n    declare Total = 0 ;\n    output ( Total ) ;\nfinish\n"
BAD_SOURCE = "declare X = @ ;\n"


def write_source(tmp_path, text: str):
    """Write a source file and return its path as a string."""
    path = tmp_path / "prog.ml"
    path.write_text(text, encoding="utf-8")
    return str(path)


class TestArguments:
    """Tests for argument handling."""

    def test_no_argument_prints_usage(self):
        """Missing INPUT_FILE prints usage and succeeds."""
        runner = CliRunner()
        result = runner.invoke(main, [])

        assert result.exit_code == ExitCode.SUCCESS
        assert "Usage:" in result.output

    def test_help(self):
        """--help describes the tool."""
        runner = CliRunner()
        result = runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        assert "Scan a Minilang source file" in result.output

    def test_version(self):
        """--version prints the package version."""
        runner = CliRunner()
        result = runner.invoke(main, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_unreadable_file(self, tmp_path):
        """A missing file is reported as an input error."""
        runner = CliRunner()
        result = runner.invoke(main, [str(tmp_path / "missing.ml")])

        assert result.exit_code == ExitCode.INVALID_ARGS
        assert "Error: cannot read" in result.output

    def test_invalid_section(self, tmp_path):
        """Unknown sections are rejected by click."""
        runner = CliRunner()
        result = runner.invoke(main, ["-s", "bogus", write_source(tmp_path, CLEAN_SOURCE)])

        assert result.exit_code == 2


class TestReportOutput:
    """Tests for the printed report."""

    def test_full_report(self, tmp_path):
        """All sections are printed by default."""
        runner = CliRunner()
        result = runner.invoke(main, [write_source(tmp_path, CLEAN_SOURCE)])

        assert result.exit_code == 0
        assert '<KEYWORD, "start", Line: 1, Col: 1>' in result.output
        assert "Total Tokens: 12" in result.output
        assert "Total Unique Identifiers: 1" in result.output
        assert "No lexical errors found!" in result.output

    def test_selected_section(self, tmp_path):
        """Only the requested sections are printed."""
        runner = CliRunner()
        result = runner.invoke(main, ["-s", "symbols", write_source(tmp_path, CLEAN_SOURCE)])

        assert result.exit_code == 0
        assert "SYMBOL TABLE" in result.output
        assert "TOKENS" not in result.output

    def test_errors_without_strict(self, tmp_path):
        """Lexical errors are reported but do not fail the run."""
        runner = CliRunner()
        result = runner.invoke(main, [write_source(tmp_path, BAD_SOURCE)])

        assert result.exit_code == 0
        assert "ERROR [INVALID_CHARACTER] at Line 1, Col 13: '@'" in result.output


class TestStrictMode:
    """Tests for --strict."""

    def test_strict_with_errors(self, tmp_path):
        """Lexical errors fail the run in strict mode."""
        runner = CliRunner()
        result = runner.invoke(main, ["--strict", write_source(tmp_path, BAD_SOURCE)])

        assert result.exit_code == ExitCode.SCAN_ERROR
        assert "1 lexical error" in result.output

    def test_strict_clean_source(self, tmp_path):
        """A clean file passes strict mode."""
        runner = CliRunner()
        result = runner.invoke(main, ["--strict", write_source(tmp_path, CLEAN_SOURCE)])

        assert result.exit_code == 0
