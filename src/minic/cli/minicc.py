"""
minicc - Mini-C Compiler Command-Line Interface
===============================================

This module implements the command-line interface for the Mini-C front
end. It compiles one source file and prints whichever views of the result
were asked for.

Usage Examples
--------------
Check a file:
    $ minicc hello.c

Show tokens and the symbol table:
    $ minicc hello.c --tokens --symbols

Write the placeholder listing:
    $ minicc hello.c -o hello.lst

Verbose mode (debug logging):
    $ minicc -v hello.c

Exit Codes
----------
0 - Success
1 - The source has errors
2 - Invalid arguments or unreadable input file
3 - Internal error
"""

import logging
from pathlib import Path
from typing import Optional

import click

from minic import __version__
from minic.ast import ASTPrinter
from minic.cli.errors import handle_cli_exception
from minic.compiler import CompileResult, CompilerOptions, MiniCCompiler

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


# =============================================================================
# Output Formatting
# =============================================================================

def format_tokens(result: CompileResult) -> str:
    """One line per token: line:column, kind and text."""
    lines = []
    for token in result.tokens:
        lines.append(f"{token.line:>4}:{token.column:<4} {token.kind.name:<15} {token.text}")
    return "\n".join(lines)


def format_symbols(result: CompileResult) -> str:
    """One line per symbol: name, role and type."""
    if not result.symbols:
        return "(no symbols)"
    width = max(len(name) for name in result.symbols)
    return "\n".join(
        f"{name:<{width}}  {symbol}" for name, symbol in result.symbols.items()
    )


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the generated listing to this file",
)
@click.option(
    "--tokens",
    is_flag=True,
    help="Print the token list",
)
@click.option(
    "--symbols",
    is_flag=True,
    help="Print the symbol table",
)
@click.option(
    "--ast",
    is_flag=True,
    help="Print the AST (for debugging)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="minicc")
def main(
    input_file: Path,
    output: Optional[Path],
    tokens: bool,
    symbols: bool,
    ast: bool,
    verbose: bool,
) -> None:
    """
    Compile a Mini-C source file.

    INPUT_FILE is the Mini-C source file to compile.

    Every error is reported with its position and a suggested fix.

    \b
    Examples:
        minicc hello.c                  # Check for errors
        minicc hello.c --symbols        # Show declared names
        minicc hello.c -o hello.lst     # Write the listing
        minicc -v hello.c               # Debug logging

    \b
    Supported language:
        - int, float, char, void declarations
        - functions with parameters
        - if/else, while, for, return
        - printf and scanf calls
        - #include <header>
    """
    setup_logging(verbose)

    try:
        if verbose:
            click.echo(f"Compiling {input_file}...")

        source = input_file.read_text(encoding="utf-8")
        compiler = MiniCCompiler(CompilerOptions(filename=str(input_file)))
        result = compiler.compile(source)

        if tokens:
            click.echo(format_tokens(result))
        if symbols:
            click.echo(format_symbols(result))
        if ast and result.program is not None:
            click.echo(ASTPrinter().print(result.program))

        if verbose:
            phases = ", ".join(phase.value for phase in result.phases_run)
            click.echo(f"Phases run: {phases}")
            click.echo(f"Tokenized: {result.token_count} tokens")

        result.raise_if_errors(source.split("\n"))

        if output is not None:
            output.write_text("\n".join(result.artifact) + "\n", encoding="utf-8")
            click.echo(f"Compiled {input_file} -> {output}")
        else:
            click.echo(f"Compiled {input_file}: no errors")

    except Exception as e:
        handle_cli_exception(e, verbose)


if __name__ == "__main__":
    main()
