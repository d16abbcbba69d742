"""
Mini-C Diagnostics Tests
========================

Tests for the Diagnostic record, its factories, report formatting and the
DiagnosticCollector.
"""

import pytest

from minic.diagnostics import (
    Diagnostic,
    DiagnosticCollector,
    DiagnosticKind,
    expected_token,
    format_report,
    internal_error,
    invalid_character,
    invalid_number,
    syntax_error,
    undeclared_function,
    undeclared_variable,
    unterminated_string,
    void_variable,
)
from minic.errors import CompilationError, SourceLocation


# =============================================================================
# Diagnostic Record
# =============================================================================

class TestDiagnostic:
    """Tests for the Diagnostic data class."""

    def test_fields(self):
        """A diagnostic stores kind, message, position and suggestion."""
        d = Diagnostic(DiagnosticKind.SYNTAX, "Expected ';'", 3, 7, "Add ';'")
        assert d.kind == DiagnosticKind.SYNTAX
        assert d.message == "Expected ';'"
        assert (d.line, d.column) == (3, 7)
        assert d.suggestion == "Add ';'"

    def test_empty_suggestion_rejected(self):
        """Every diagnostic must carry a suggestion."""
        with pytest.raises(ValueError):
            Diagnostic(DiagnosticKind.SYNTAX, "Broken", 1, 0, "")

    def test_immutable(self):
        """Diagnostics cannot be modified after creation."""
        d = syntax_error("Broken", "Fix it", 1, 0)
        with pytest.raises(AttributeError):
            d.message = "Changed"

    def test_str(self):
        """str() gives position, kind and message."""
        d = undeclared_variable("y", 1, 20)
        assert str(d) == "1:20: semantic error: Undeclared variable: y"

    def test_location(self):
        """location() pairs the position with a filename."""
        d = invalid_character("@", 2, 5)
        assert d.location("a.c") == SourceLocation("a.c", 2, 5)
        assert str(d.location("a.c")) == "a.c:2:5"

    def test_format_with_source_line(self):
        """format() shows the source line, a caret and the hint."""
        d = undeclared_variable("y", 1, 8)
        assert d.format("hello.c", "int x = y;") == "\n".join([
            "hello.c:1:8: semantic error: Undeclared variable: y",
            "    int x = y;",
            "            ^",
            "hint: Declare variable before use",
        ])

    def test_format_without_source_line(self):
        """Without a source line only the message and hint are shown."""
        d = internal_error(RuntimeError("boom"))
        assert d.format() == "\n".join([
            "<input>:0:0: internal error: Internal compiler error: boom",
            "hint: Report this bug with the source that triggered it",
        ])


# =============================================================================
# Factories
# =============================================================================

class TestFactories:
    """Tests for the well-known diagnostic factories."""

    @pytest.mark.parametrize("diagnostic, kind, message, suggestion", [
        (unterminated_string(1, 0), DiagnosticKind.LEXICAL,
         "Unterminated string literal", 'Add closing quote "'),
        (invalid_number(1, 0), DiagnosticKind.LEXICAL,
         "Invalid number format", "Numbers can only have one decimal point"),
        (invalid_character("$", 1, 0), DiagnosticKind.LEXICAL,
         "Invalid character: '$'", "Remove or replace invalid character"),
        (expected_token(")", 1, 0), DiagnosticKind.SYNTAX,
         "Expected ')'", "Add ')'"),
        (undeclared_variable("n", 1, 0), DiagnosticKind.SEMANTIC,
         "Undeclared variable: n", "Declare variable before use"),
        (undeclared_function("f", 1, 0), DiagnosticKind.SEMANTIC,
         "Undeclared function: f", "Declare function before use"),
        (void_variable("v", 1, 0), DiagnosticKind.SEMANTIC,
         "Variable 'v' cannot be of type void", "Use int, float, or char instead"),
    ])
    def test_factory_wording(self, diagnostic, kind, message, suggestion):
        """Each factory builds its fixed message and suggestion."""
        assert diagnostic.kind == kind
        assert diagnostic.message == message
        assert diagnostic.suggestion == suggestion

    def test_internal_error_position(self):
        """Internal errors have no source position."""
        d = internal_error(KeyError("k"))
        assert d.kind == DiagnosticKind.INTERNAL
        assert (d.line, d.column) == (0, 0)
        assert d.message.startswith("Internal compiler error: ")


# =============================================================================
# Collector
# =============================================================================

class TestDiagnosticCollector:
    """Tests for DiagnosticCollector."""

    def test_empty(self):
        """A new collector has no errors."""
        collector = DiagnosticCollector()
        assert not collector.has_errors()
        assert collector.error_count() == 0
        assert len(collector) == 0
        assert collector.diagnostics == []

    def test_detection_order(self):
        """Diagnostics are kept in the order they were added."""
        collector = DiagnosticCollector()
        first = invalid_character("@", 1, 0)
        second = expected_token(";", 2, 0)
        collector.add(first)
        collector.add(second)
        assert collector.diagnostics == [first, second]
        assert list(collector) == [first, second]
        assert collector.error_count() == 2

    def test_diagnostics_is_a_copy(self):
        """Mutating the returned list does not affect the collector."""
        collector = DiagnosticCollector()
        collector.add(invalid_number(1, 1))
        collector.diagnostics.clear()
        assert collector.has_errors()

    def test_of_kind(self):
        """of_kind filters by kind."""
        collector = DiagnosticCollector()
        collector.add(invalid_number(1, 1))
        collector.add(undeclared_function("f", 1, 2))
        assert [d.message for d in collector.of_kind(DiagnosticKind.SEMANTIC)] == [
            "Undeclared function: f",
        ]

    def test_clear(self):
        """clear() removes all diagnostics."""
        collector = DiagnosticCollector()
        collector.add(invalid_number(1, 1))
        collector.clear()
        assert not collector.has_errors()

    def test_raise_if_errors(self):
        """raise_if_errors raises with the report and the diagnostics."""
        collector = DiagnosticCollector("bad.c")
        collector.add(expected_token(";", 1, 9))
        with pytest.raises(CompilationError) as exc_info:
            collector.raise_if_errors(["int x = 5"])
        error = exc_info.value
        assert error.diagnostics == collector.diagnostics
        assert error.report.startswith("bad.c:1:9: syntax error: Expected ';'")
        assert str(error) == error.report

    def test_raise_if_errors_when_clean(self):
        """No exception without diagnostics."""
        DiagnosticCollector().raise_if_errors()


# =============================================================================
# Report Formatting
# =============================================================================

class TestFormatReport:
    """Tests for format_report."""

    def test_summary_singular(self):
        """One diagnostic gives '1 error'."""
        report = format_report([invalid_number(1, 3)], "n.c", ["1.2.3"])
        assert report.splitlines()[-1] == "1 error"

    def test_summary_plural(self):
        """Several diagnostics give 'N errors'."""
        report = format_report([invalid_number(1, 3), invalid_character("@", 1, 5)])
        assert report.splitlines()[-1] == "2 errors"

    def test_empty_report(self):
        """No diagnostics gives just the summary."""
        assert format_report([]) == "0 errors"

    def test_out_of_range_line_has_no_context(self):
        """A line outside the source gets no caret."""
        report = format_report([expected_token(";", 5, 0)], "x.c", ["int x"])
        assert "^" not in report
