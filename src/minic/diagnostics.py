"""
Mini-C Diagnostics
==================

Typed, position-aware diagnostic records shared by every compiler stage.

A Diagnostic is pure data: a kind, a message, a 1-based line, a 0-based
column and a suggestion telling the user how to fix the problem. Every
diagnostic carries a non-empty suggestion.

Diagnostic Kinds
----------------
| Kind     | Raised by                   | Examples                          |
|----------|-----------------------------|-----------------------------------|
| LEXICAL  | lexer                       | unterminated string, bad char     |
| SYNTAX   | parser                      | missing ';', unexpected token     |
| SEMANTIC | parser, semantic sweep      | undeclared variable, void var     |
| INTERNAL | pipeline driver             | unexpected exception              |

The module-level factory functions build the well-known diagnostics with
their fixed messages and suggestions, so the wording lives in one place.

Example:
    collector = DiagnosticCollector()
    collector.add(unterminated_string(3, 10))
    if collector.has_errors():
        print(collector.report(source.split("\\n")))
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional

from minic.errors import CompilationError, SourceLocation


# =============================================================================
# Diagnostic Kinds
# =============================================================================

class DiagnosticKind(Enum):
    """Category of a diagnostic, by the stage that detects it."""
    LEXICAL = "lexical"
    SYNTAX = "syntax"
    SEMANTIC = "semantic"
    INTERNAL = "internal"


# =============================================================================
# Diagnostic Record
# =============================================================================

@dataclass(frozen=True)
class Diagnostic:
    """
    A single error reported during compilation.

    Attributes:
        kind: Which stage detected the problem
        message: Description of the problem
        line: Line number (1-indexed, 0 when no position applies)
        column: Column offset (0-indexed)
        suggestion: How to fix the problem (never empty)
    """
    kind: DiagnosticKind
    message: str
    line: int
    column: int
    suggestion: str

    def __post_init__(self):
        if not self.suggestion:
            raise ValueError(f"diagnostic '{self.message}' has no suggestion")

    def __str__(self) -> str:
        return f"{self.line}:{self.column}: {self.kind.value} error: {self.message}"

    def location(self, filename: str = "<input>") -> SourceLocation:
        """Return a SourceLocation for this diagnostic."""
        return SourceLocation(filename, self.line, self.column)

    def format(self, filename: str = "<input>", source_line: Optional[str] = None) -> str:
        """
        Format the diagnostic with location, source context, and hint.

            hello.c:5:11: semantic error: Undeclared variable: y
                int x = y;
                        ^
            hint: Declare variable before use
        """
        parts = [f"{self.location(filename)}: {self.kind.value} error: {self.message}"]

        if source_line is not None and self.line > 0:
            parts.append(f"    {source_line}")
            parts.append(" " * (4 + self.column) + "^")

        parts.append(f"hint: {self.suggestion}")
        return "\n".join(parts)


# =============================================================================
# Diagnostic Factories
# =============================================================================

def unterminated_string(line: int, column: int) -> Diagnostic:
    """String literal without a closing quote on its line."""
    return Diagnostic(
        DiagnosticKind.LEXICAL,
        "Unterminated string literal",
        line,
        column,
        'Add closing quote "',
    )


def invalid_number(line: int, column: int) -> Diagnostic:
    """Numeric literal with more than one decimal point."""
    return Diagnostic(
        DiagnosticKind.LEXICAL,
        "Invalid number format",
        line,
        column,
        "Numbers can only have one decimal point",
    )


def invalid_character(char: str, line: int, column: int) -> Diagnostic:
    """Character that cannot start any token."""
    return Diagnostic(
        DiagnosticKind.LEXICAL,
        f"Invalid character: '{char}'",
        line,
        column,
        "Remove or replace invalid character",
    )


def syntax_error(message: str, suggestion: str, line: int, column: int) -> Diagnostic:
    """Grammar violation at the given position."""
    return Diagnostic(DiagnosticKind.SYNTAX, message, line, column, suggestion)


def expected_token(text: str, line: int, column: int) -> Diagnostic:
    """A required token is missing."""
    return syntax_error(f"Expected '{text}'", f"Add '{text}'", line, column)


def undeclared_variable(name: str, line: int, column: int) -> Diagnostic:
    """Identifier used or assigned before it was declared."""
    return Diagnostic(
        DiagnosticKind.SEMANTIC,
        f"Undeclared variable: {name}",
        line,
        column,
        "Declare variable before use",
    )


def undeclared_function(name: str, line: int, column: int) -> Diagnostic:
    """Call to a name that is neither declared nor a built-in."""
    return Diagnostic(
        DiagnosticKind.SEMANTIC,
        f"Undeclared function: {name}",
        line,
        column,
        "Declare function before use",
    )


def void_variable(name: str, line: int, column: int) -> Diagnostic:
    """Variable declared with type void."""
    return Diagnostic(
        DiagnosticKind.SEMANTIC,
        f"Variable '{name}' cannot be of type void",
        line,
        column,
        "Use int, float, or char instead",
    )


def internal_error(error: BaseException) -> Diagnostic:
    """Unexpected fault inside the compiler itself."""
    return Diagnostic(
        DiagnosticKind.INTERNAL,
        f"Internal compiler error: {error}",
        0,
        0,
        "Report this bug with the source that triggered it",
    )


# =============================================================================
# Diagnostic Collection
# =============================================================================

class DiagnosticCollector:
    """
    Collects diagnostics in detection order for batch reporting.

    Each compilation owns its own collector, so independent compilations
    never share state.

    Example:
        collector = DiagnosticCollector()
        tokens = Lexer(source, collector).tokenize()
        if collector.has_errors():
            print(collector.report(source.split("\\n")))
    """

    def __init__(self, filename: str = "<input>"):
        """
        Initialize the collector.

        Args:
            filename: Source filename used when formatting the report
        """
        self.filename = filename
        self._diagnostics: list[Diagnostic] = []

    def add(self, diagnostic: Diagnostic) -> None:
        """Add a diagnostic to the collection."""
        self._diagnostics.append(diagnostic)

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """A copy of the collected diagnostics, in detection order."""
        return list(self._diagnostics)

    def has_errors(self) -> bool:
        """Return True if any diagnostics have been collected."""
        return len(self._diagnostics) > 0

    def error_count(self) -> int:
        """Return the number of collected diagnostics."""
        return len(self._diagnostics)

    def of_kind(self, kind: DiagnosticKind) -> list[Diagnostic]:
        """Return the collected diagnostics of one kind."""
        return [d for d in self._diagnostics if d.kind is kind]

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(list(self._diagnostics))

    def __len__(self) -> int:
        return len(self._diagnostics)

    def report(self, source_lines: Optional[list[str]] = None) -> str:
        """Format all diagnostics for display."""
        return format_report(self._diagnostics, self.filename, source_lines)

    def clear(self) -> None:
        """Clear all collected diagnostics."""
        self._diagnostics.clear()

    def raise_if_errors(self, source_lines: Optional[list[str]] = None) -> None:
        """Raise a CompilationError if any diagnostics were collected."""
        if self.has_errors():
            raise CompilationError(self.report(source_lines), self._diagnostics)


def format_report(
    diagnostics: list[Diagnostic],
    filename: str = "<input>",
    source_lines: Optional[list[str]] = None,
) -> str:
    """
    Format a list of diagnostics followed by a summary line.

    Args:
        diagnostics: Diagnostics to format, in order
        filename: Source filename for the location prefix
        source_lines: Original source lines for caret context

    Returns:
        The multi-line report
    """
    source_lines = source_lines or []
    lines = []

    for diagnostic in diagnostics:
        source_line = None
        if 0 < diagnostic.line <= len(source_lines):
            source_line = source_lines[diagnostic.line - 1]
        lines.append(diagnostic.format(filename, source_line))
        lines.append("")

    word = "error" if len(diagnostics) == 1 else "errors"
    lines.append(f"{len(diagnostics)} {word}")

    return "\n".join(lines)
