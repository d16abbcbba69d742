"""
minicc CLI Tests
================

Tests for the minicc command-line tool and the shared CLI error handling.
"""

from pathlib import Path

import click
import pytest
from click.testing import CliRunner

from minic.cli.errors import ExitCode, handle_cli_exception
from minic.cli.minicc import main
from minic.errors import CompilationError


GOOD_SOURCE = """\
#include <stdio.h>

int count = 0;

int main() {
    count += 1;
    printf("%d", count);
    return 0;
}
"""

BAD_SOURCE = """\
int main() {
    return y;
}
"""


# =============================================================================
# Basic Invocation
# =============================================================================

class TestMiniccBasics:
    """Tests for help, version and plain compilation."""

    def test_help(self):
        """--help describes the tool."""
        runner = CliRunner()
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "Compile a Mini-C source file" in result.output

    def test_version(self):
        """--version prints the program name."""
        runner = CliRunner()
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "minicc" in result.output

    def test_compile_clean_file(self):
        """A clean file exits with SUCCESS."""
        runner = CliRunner()
        with runner.isolated_filesystem():
            Path("good.c").write_text(GOOD_SOURCE)
            result = runner.invoke(main, ["good.c"])

            assert result.exit_code == ExitCode.SUCCESS, result.output
            assert "Compiled good.c: no errors" in result.output

    def test_missing_file(self):
        """A missing input file is an argument error."""
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(main, ["missing.c"])
            assert result.exit_code == ExitCode.INVALID_ARGS


# =============================================================================
# Views
# =============================================================================

class TestMiniccViews:
    """Tests for --tokens, --symbols and --ast."""

    def test_tokens(self):
        """--tokens prints one line per token."""
        runner = CliRunner()
        with runner.isolated_filesystem():
            Path("x.c").write_text("int x = 5;")
            result = runner.invoke(main, ["x.c", "--tokens"])

            assert result.exit_code == 0
            assert "KEYWORD" in result.output
            assert "END_OF_INPUT" in result.output

    def test_symbols(self):
        """--symbols prints the symbol table."""
        runner = CliRunner()
        with runner.isolated_filesystem():
            Path("good.c").write_text(GOOD_SOURCE)
            result = runner.invoke(main, ["good.c", "--symbols"])

            assert result.exit_code == 0
            assert "count  variable (int)" in result.output
            assert "main   function (int)" in result.output

    def test_symbols_empty(self):
        """An empty table is shown as such."""
        runner = CliRunner()
        with runner.isolated_filesystem():
            Path("empty.c").write_text("// nothing here\n")
            result = runner.invoke(main, ["empty.c", "--symbols"])

            assert result.exit_code == 0
            assert "(no symbols)" in result.output

    def test_ast(self):
        """--ast prints the AST outline."""
        runner = CliRunner()
        with runner.isolated_filesystem():
            Path("good.c").write_text(GOOD_SOURCE)
            result = runner.invoke(main, ["good.c", "--ast"])

            assert result.exit_code == 0
            assert "Program" in result.output
            assert "Include <stdio.h>" in result.output
            assert "Function: int main()" in result.output


# =============================================================================
# Output and Errors
# =============================================================================

class TestMiniccOutput:
    """Tests for artifact output and error reporting."""

    def test_write_artifact(self):
        """-o writes the placeholder listing."""
        runner = CliRunner()
        with runner.isolated_filesystem():
            Path("good.c").write_text(GOOD_SOURCE)
            result = runner.invoke(main, ["good.c", "-o", "good.lst"])

            assert result.exit_code == 0, result.output
            assert Path("good.lst").exists()
            lines = Path("good.lst").read_text().splitlines()
            assert lines[0] == "// Generated Assembly-like Code"
            assert "    count: INT 0" in lines
            assert "Compiled good.c -> good.lst" in result.output

    def test_errors_reported(self):
        """A file with errors exits with BUILD_ERROR and shows the report."""
        runner = CliRunner()
        with runner.isolated_filesystem():
            Path("bad.c").write_text(BAD_SOURCE)
            result = runner.invoke(main, ["bad.c", "-o", "bad.lst"])

            assert result.exit_code == ExitCode.BUILD_ERROR
            assert "bad.c:2:11: semantic error: Undeclared variable: y" in result.output
            assert "hint: Declare variable before use" in result.output
            assert "1 error" in result.output
            assert not Path("bad.lst").exists()

    def test_views_printed_before_errors(self):
        """Requested views are still printed for a failing file."""
        runner = CliRunner()
        with runner.isolated_filesystem():
            Path("bad.c").write_text(BAD_SOURCE)
            result = runner.invoke(main, ["bad.c", "--symbols"])

            assert result.exit_code == ExitCode.BUILD_ERROR
            assert "main  function (int)" in result.output

    def test_verbose(self):
        """-v reports the phases that ran."""
        runner = CliRunner()
        with runner.isolated_filesystem():
            Path("good.c").write_text(GOOD_SOURCE)
            result = runner.invoke(main, ["-v", "good.c"])

            assert result.exit_code == 0
            assert "Compiling good.c..." in result.output
            assert "Phases run: lexical analysis, syntax analysis, semantic analysis, code generation" in result.output


# =============================================================================
# Error Handler
# =============================================================================

class TestHandleCliException:
    """Tests for the shared exception handler."""

    @pytest.mark.parametrize("error, code", [
        (CompilationError("report"), ExitCode.BUILD_ERROR),
        (FileNotFoundError("gone.c"), ExitCode.INVALID_ARGS),
        (PermissionError("locked.c"), ExitCode.INVALID_ARGS),
        (click.BadParameter("bad"), ExitCode.INVALID_ARGS),
        (RuntimeError("surprise"), ExitCode.INTERNAL_ERROR),
    ])
    def test_exit_codes(self, error, code):
        """Each error type maps to its exit code."""
        with pytest.raises(SystemExit) as exc_info:
            handle_cli_exception(error)
        assert exc_info.value.code == code

    def test_internal_error_message(self, capsys):
        """Unexpected errors are labelled as internal."""
        with pytest.raises(SystemExit):
            handle_cli_exception(RuntimeError("surprise"))
        assert "Internal error: surprise" in capsys.readouterr().err
