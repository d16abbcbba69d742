"""
Mini-C Compiler Main Module
===========================

This module provides the main compiler interface for Mini-C.
It orchestrates the complete front-end pipeline:

    Source → Lex → Parse → Semantic sweep → Placeholder artifact

Usage
-----
Command line:
    $ minicc hello.c --symbols

Programmatic:
    >>> from minic import compile_source
    >>> result = compile_source('int x = 5;')
    >>> result.success
    True

Compilation Pipeline
--------------------
1. **Lexical Analysis**: Convert source to tokens
2. **Syntax Analysis**: Build the AST, fill the symbol table and check
   use-before-declaration
3. **Semantic Analysis**: Reject variables declared void
4. **Code Generation**: Emit the placeholder listing

The run stops after lexical or syntax analysis if any diagnostic has been
reported by then. Semantic diagnostics do not stop code generation.

Error Handling
--------------
Problems in the source are collected as diagnostics, never raised. An
unexpected exception inside the compiler is logged and turned into a
single INTERNAL diagnostic, so compile() itself does not raise.

Every call to compile() builds its own collector and symbol table, so one
MiniCCompiler can be used for any number of independent compilations.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional
import logging

from minic.ast import ProgramNode
from minic.codegen import generate_artifact
from minic.diagnostics import (
    Diagnostic,
    DiagnosticCollector,
    DiagnosticKind,
    format_report,
    internal_error,
)
from minic.errors import CompilationError
from minic.lexer import Lexer, Token
from minic.parser import BUILTIN_FUNCTIONS, Parser
from minic.semantic import check_symbols
from minic.symbols import Symbol, SymbolTable

logger = logging.getLogger(__name__)


class Phase(Enum):
    """Compilation phases, in the order they run."""
    LEXICAL = "lexical analysis"
    SYNTAX = "syntax analysis"
    SEMANTIC = "semantic analysis"
    GENERATION = "code generation"


@dataclass
class CompilerOptions:
    """
    Compiler configuration options.

    Attributes:
        filename: Source filename used in reports and node locations
        builtin_functions: Function names callable without a declaration
        generate_artifact: Produce the placeholder listing when the
                           generation phase runs
    """
    filename: str = "<input>"
    builtin_functions: tuple[str, ...] = BUILTIN_FUNCTIONS
    generate_artifact: bool = True


@dataclass
class CompileResult:
    """
    Result of a compilation.

    Two compilations of the same source with the same options compare
    equal.

    Attributes:
        filename: Source filename
        success: True if no diagnostics were reported
        tokens: Tokens produced by the lexer
        diagnostics: All diagnostics in detection order
        symbols: Snapshot of the symbol table (name → Symbol)
        artifact: Placeholder listing lines (empty if generation did not run)
        phases_run: Phases that were started, in order
        program: The AST (None if syntax analysis did not run)
    """
    filename: str = "<input>"
    success: bool = False
    tokens: list[Token] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)
    symbols: dict[str, Symbol] = field(default_factory=dict)
    artifact: list[str] = field(default_factory=list)
    phases_run: list[Phase] = field(default_factory=list)
    program: Optional[ProgramNode] = None

    @property
    def errors(self) -> list[Diagnostic]:
        """Diagnostics that make the compilation fail (all of them)."""
        return list(self.diagnostics)

    @property
    def token_count(self) -> int:
        return len(self.tokens)

    def diagnostics_of_kind(self, kind: DiagnosticKind) -> list[Diagnostic]:
        """Return the diagnostics of one kind."""
        return [d for d in self.diagnostics if d.kind is kind]

    def report(self, source_lines: Optional[list[str]] = None) -> str:
        """Format the diagnostics for display."""
        return format_report(self.diagnostics, self.filename, source_lines)

    def raise_if_errors(self, source_lines: Optional[list[str]] = None) -> None:
        """
        Raise CompilationError if the compilation failed.

        Raises:
            CompilationError: Carrying the diagnostics and formatted report
        """
        if self.diagnostics:
            raise CompilationError(self.report(source_lines), self.diagnostics)


class MiniCCompiler:
    """
    Mini-C compiler front end.

    Example:
        compiler = MiniCCompiler()
        result = compiler.compile(source)
        if not result.success:
            print(result.report(source.split("\\n")))

    Attributes:
        options: Compiler configuration options
    """

    def __init__(self, options: Optional[CompilerOptions] = None):
        """
        Initialize the compiler.

        Args:
            options: Compiler configuration (uses defaults if None)
        """
        self.options = options or CompilerOptions()

    def compile(self, source: str) -> CompileResult:
        """
        Compile Mini-C source.

        Args:
            source: Mini-C source code string

        Returns:
            CompileResult with tokens, diagnostics, symbols and artifact
        """
        filename = self.options.filename
        collector = DiagnosticCollector(filename)
        symbols = SymbolTable()
        result = CompileResult(filename=filename)

        try:
            self._run(source, result, collector, symbols)
        except Exception as e:
            logger.error(f"Internal compiler error while compiling {filename}: {e}", exc_info=True)
            collector.add(internal_error(e))

        result.diagnostics = collector.diagnostics
        result.symbols = symbols.snapshot()
        result.success = not result.diagnostics
        return result

    def compile_file(self, filepath: str) -> CompileResult:
        """
        Compile a Mini-C source file.

        The file path replaces the configured filename in reports.

        Raises:
            FileNotFoundError: If source file not found
        """
        path = Path(filepath)
        if not path.exists():
            raise FileNotFoundError(f"Source file not found: {filepath}")

        source = path.read_text(encoding="utf-8")
        options = CompilerOptions(
            filename=str(filepath),
            builtin_functions=self.options.builtin_functions,
            generate_artifact=self.options.generate_artifact,
        )
        return MiniCCompiler(options).compile(source)

    def _run(
        self,
        source: str,
        result: CompileResult,
        collector: DiagnosticCollector,
        symbols: SymbolTable,
    ) -> None:
        """Run the phases in order, stopping after a failed lex or parse."""
        # Phase 1: Lexical analysis
        self._start(Phase.LEXICAL, result)
        result.tokens = Lexer(source, collector).tokenize()
        if collector.has_errors():
            return

        # Phase 2: Syntax analysis
        self._start(Phase.SYNTAX, result)
        parser = Parser(
            result.tokens,
            collector,
            symbols,
            builtins=self.options.builtin_functions,
            filename=self.options.filename,
        )
        result.program = parser.parse()
        if collector.has_errors():
            return

        # Phase 3: Semantic analysis
        self._start(Phase.SEMANTIC, result)
        check_symbols(symbols, collector)

        # Phase 4: Code generation
        self._start(Phase.GENERATION, result)
        if self.options.generate_artifact:
            result.artifact = generate_artifact(symbols)

    def _start(self, phase: Phase, result: CompileResult) -> None:
        logger.debug(f"{result.filename}: starting {phase.value}")
        result.phases_run.append(phase)


# =============================================================================
# Convenience Functions
# =============================================================================

def compile_source(
    source: str,
    filename: str = "<input>",
    options: Optional[CompilerOptions] = None,
) -> CompileResult:
    """
    Compile Mini-C source code.

    This is the primary high-level interface for Mini-C.

    Args:
        source: Mini-C source code
        filename: Source filename for reports (overrides options.filename
                  unless left at its default)
        options: Compiler configuration (uses defaults if None)

    Returns:
        The CompileResult

    Example:
        >>> result = compile_source('void x;')
        >>> [d.message for d in result.diagnostics]
        ["Variable 'x' cannot be of type void"]
    """
    options = options or CompilerOptions()
    if filename != "<input>":
        options = CompilerOptions(
            filename=filename,
            builtin_functions=options.builtin_functions,
            generate_artifact=options.generate_artifact,
        )
    return MiniCCompiler(options).compile(source)
