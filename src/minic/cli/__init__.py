"""
Mini-C Command-Line Interface
============================

This package provides the command-line tool for Mini-C:

- **minicc**: compile a Mini-C file and show its tokens, symbols or AST

The tool is a Click-based CLI application with help and error reporting.
"""

__all__ = ["minicc"]
