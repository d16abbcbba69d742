"""
Mini-C Error Hierarchy
======================

This module defines the exception hierarchy for the Mini-C front end and
the SourceLocation type used throughout for error reporting.

Compilation problems in user source are never raised as exceptions while
compiling: they are accumulated as Diagnostic records (see
minic.diagnostics). Exceptions are used only at the edges, when a caller
asks for a failed compilation to be turned into an error.

Exception Hierarchy
-------------------
MiniCError (base)
└── CompilationError - one or more diagnostics were reported

Error messages follow this format:
    filename:line:column: syntax error: description
        source_line_text
        ^ (pointer to error location)
    hint: suggestion for fixing
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class MiniCError(Exception):
    """
    Base exception for all Mini-C errors.

    Callers can catch every error raised by the package with a single
    except clause:

        try:
            compile_source(text).raise_if_errors()
        except MiniCError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column offset within the line (0-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Compilation Failure
# =============================================================================

class CompilationError(MiniCError):
    """
    Aggregate error for a compilation that reported diagnostics.

    The message is the formatted report produced by DiagnosticCollector,
    so it is passed through unchanged.

    Attributes:
        diagnostics: The diagnostics that caused the failure
        report: The formatted, human-readable report
    """

    def __init__(self, report: str, diagnostics: Optional[list] = None):
        self.report = report
        self.diagnostics = list(diagnostics or [])
        super().__init__(report)
