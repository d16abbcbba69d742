"""
Mini-C - Front End for a Small C-like Language
==============================================

This package turns Mini-C source text into classified tokens, validates
the token stream by recursive descent, tracks declared identifiers in a
symbol table and reports precise diagnostics with a suggested fix for
every lexical, syntax, semantic and internal error.

Main Components
---------------
- **lexer**: source text → tokens
- **parser**: tokens → AST, symbol table and inline declaration checks
- **semantic**: post-parse sweep over the symbol table
- **compiler**: the pipeline driver and CompileResult
- **cli**: the `minicc` command-line tool

Quick Start
-----------
    >>> from minic import compile_source
    >>> result = compile_source('int f(int a) { return a + 1; }')
    >>> result.success
    True
    >>> str(result.symbols["f"])
    'function (int)'

Or use the command-line tool:
    $ minicc program.c --tokens --symbols
"""

__version__ = "1.0.0"
__author__ = "Mini-C Contributors"

from minic.errors import MiniCError, CompilationError, SourceLocation
from minic.diagnostics import Diagnostic, DiagnosticKind, DiagnosticCollector
from minic.lexer import Lexer, Token, TokenKind, tokenize
from minic.symbols import Symbol, SymbolRole, SymbolTable
from minic.parser import Parser, ParseResult, parse, parse_source
from minic.compiler import (
    MiniCCompiler,
    CompilerOptions,
    CompileResult,
    Phase,
    compile_source,
)

__all__ = [
    # Version
    "__version__",
    # Main API
    "MiniCCompiler",
    "CompilerOptions",
    "CompileResult",
    "Phase",
    "compile_source",
    # Errors and diagnostics
    "MiniCError",
    "CompilationError",
    "SourceLocation",
    "Diagnostic",
    "DiagnosticKind",
    "DiagnosticCollector",
    # Lexer
    "Lexer",
    "Token",
    "TokenKind",
    "tokenize",
    # Symbols
    "Symbol",
    "SymbolRole",
    "SymbolTable",
    # Parser
    "Parser",
    "ParseResult",
    "parse",
    "parse_source",
]
