"""
Mini-C Symbol Table
===================

A single flat mapping from identifier name to its declaration record.

The table is filled by the parser as declarations, parameters and
functions are recognised, and read by the parser's use-before-declaration
checks and by the semantic sweep.

There is no scoping: a name declared twice (for example a parameter that
reuses a global variable's name) overwrites the earlier entry.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional


class SymbolRole(Enum):
    """What kind of entity a symbol names."""
    VARIABLE = "variable"
    PARAMETER = "parameter"
    FUNCTION = "function"


@dataclass(frozen=True)
class Symbol:
    """
    Declaration record for one identifier.

    Attributes:
        name: The identifier
        role: Variable, parameter or function
        declared_type: Type keyword for variables and parameters
        return_type: Return type keyword for functions
        line: Line of the declaring identifier (1-indexed)
        column: Column of the declaring identifier (0-indexed)
    """
    name: str
    role: SymbolRole
    declared_type: Optional[str] = None
    return_type: Optional[str] = None
    line: int = 0
    column: int = 0

    @classmethod
    def variable(cls, name: str, declared_type: str, line: int = 0, column: int = 0) -> "Symbol":
        return cls(name, SymbolRole.VARIABLE, declared_type=declared_type, line=line, column=column)

    @classmethod
    def parameter(cls, name: str, declared_type: str, line: int = 0, column: int = 0) -> "Symbol":
        return cls(name, SymbolRole.PARAMETER, declared_type=declared_type, line=line, column=column)

    @classmethod
    def function(cls, name: str, return_type: str, line: int = 0, column: int = 0) -> "Symbol":
        return cls(name, SymbolRole.FUNCTION, return_type=return_type, line=line, column=column)

    @property
    def type_name(self) -> str:
        """The declared type, or the return type for functions."""
        if self.role is SymbolRole.FUNCTION:
            return self.return_type or ""
        return self.declared_type or ""

    def __str__(self) -> str:
        return f"{self.role.value} ({self.type_name})"


class SymbolTable:
    """
    Flat identifier table for one compilation.

    Iteration yields symbols in first-declaration order.

    Example:
        table = SymbolTable()
        table.declare(Symbol.variable("x", "int"))
        assert "x" in table
        assert table.lookup("x").declared_type == "int"
    """

    def __init__(self):
        self._symbols: dict[str, Symbol] = {}

    def declare(self, symbol: Symbol) -> None:
        """Record a symbol, replacing any earlier entry with the same name."""
        self._symbols[symbol.name] = symbol

    def lookup(self, name: str) -> Optional[Symbol]:
        """Return the symbol for name, or None if it was never declared."""
        return self._symbols.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._symbols

    def __iter__(self) -> Iterator[Symbol]:
        return iter(list(self._symbols.values()))

    def __len__(self) -> int:
        return len(self._symbols)

    def of_role(self, role: SymbolRole) -> list[Symbol]:
        """Return all symbols with the given role."""
        return [s for s in self._symbols.values() if s.role is role]

    def snapshot(self) -> dict[str, Symbol]:
        """Return an independent copy of the table contents."""
        return dict(self._symbols)

    def clear(self) -> None:
        """Remove all symbols."""
        self._symbols.clear()
