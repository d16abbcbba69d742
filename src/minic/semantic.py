"""
Mini-C Semantic Sweep
=====================

Checks that need the complete symbol table, run once after parsing.

Use-before-declaration is checked inline by the parser; the only check
left for this pass is that no variable is declared with type void.
"""

import logging

from minic.diagnostics import DiagnosticCollector, void_variable
from minic.symbols import SymbolRole, SymbolTable

logger = logging.getLogger(__name__)


def check_symbols(symbols: SymbolTable, collector: DiagnosticCollector) -> int:
    """
    Report every variable whose declared type is void.

    Diagnostics are positioned at the variable's declaring identifier
    and added in symbol-table order.

    Args:
        symbols: The symbol table filled by the parser
        collector: Where diagnostics are recorded

    Returns:
        Number of diagnostics added
    """
    found = 0
    for symbol in symbols.of_role(SymbolRole.VARIABLE):
        if symbol.declared_type == "void":
            collector.add(void_variable(symbol.name, symbol.line, symbol.column))
            found += 1

    logger.debug(f"Semantic sweep checked {len(symbols)} symbols, {found} void variables")
    return found
