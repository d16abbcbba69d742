"""
Mini-C Symbol Table Tests
=========================

Tests for Symbol, SymbolTable, the post-parse semantic sweep and the
placeholder listing built from the table.
"""

from minic.codegen import HEADER, generate_artifact
from minic.diagnostics import DiagnosticCollector, DiagnosticKind
from minic.semantic import check_symbols
from minic.symbols import Symbol, SymbolRole, SymbolTable


# =============================================================================
# Symbols
# =============================================================================

class TestSymbol:
    """Tests for the Symbol record."""

    def test_variable(self):
        """Variables carry a declared type."""
        s = Symbol.variable("x", "int", 1, 4)
        assert s.role == SymbolRole.VARIABLE
        assert s.declared_type == "int"
        assert s.return_type is None
        assert s.type_name == "int"
        assert str(s) == "variable (int)"

    def test_parameter(self):
        """Parameters carry a declared type."""
        s = Symbol.parameter("a", "float")
        assert s.role == SymbolRole.PARAMETER
        assert str(s) == "parameter (float)"

    def test_function(self):
        """Functions carry a return type."""
        s = Symbol.function("main", "void")
        assert s.role == SymbolRole.FUNCTION
        assert s.declared_type is None
        assert s.type_name == "void"
        assert str(s) == "function (void)"

    def test_equality(self):
        """Symbols compare by value."""
        assert Symbol.variable("x", "int", 1, 4) == Symbol.variable("x", "int", 1, 4)
        assert Symbol.variable("x", "int", 1, 4) != Symbol.variable("x", "int", 2, 4)


# =============================================================================
# Symbol Table
# =============================================================================

class TestSymbolTable:
    """Tests for the flat symbol table."""

    def test_declare_and_lookup(self):
        """Declared names can be looked up."""
        table = SymbolTable()
        table.declare(Symbol.variable("x", "int"))
        assert "x" in table
        assert table.lookup("x").declared_type == "int"
        assert table.lookup("y") is None
        assert "y" not in table

    def test_redeclaration_overwrites(self):
        """There is no scoping: a later declaration replaces an earlier one."""
        table = SymbolTable()
        table.declare(Symbol.variable("a", "int"))
        table.declare(Symbol.parameter("a", "char"))
        assert len(table) == 1
        assert table.lookup("a").role == SymbolRole.PARAMETER

    def test_iteration_order(self):
        """Iteration follows first-declaration order."""
        table = SymbolTable()
        for name in ["c", "a", "b"]:
            table.declare(Symbol.variable(name, "int"))
        table.declare(Symbol.variable("c", "float"))
        assert [s.name for s in table] == ["c", "a", "b"]

    def test_of_role(self):
        """of_role filters by role."""
        table = SymbolTable()
        table.declare(Symbol.function("f", "int"))
        table.declare(Symbol.parameter("p", "int"))
        table.declare(Symbol.variable("v", "int"))
        assert [s.name for s in table.of_role(SymbolRole.FUNCTION)] == ["f"]
        assert [s.name for s in table.of_role(SymbolRole.VARIABLE)] == ["v"]

    def test_snapshot_is_independent(self):
        """A snapshot does not change when the table does."""
        table = SymbolTable()
        table.declare(Symbol.variable("x", "int"))
        snapshot = table.snapshot()
        table.declare(Symbol.variable("y", "int"))
        table.clear()
        assert list(snapshot) == ["x"]
        assert len(table) == 0


# =============================================================================
# Semantic Sweep
# =============================================================================

class TestSemanticSweep:
    """Tests for check_symbols."""

    def test_void_variables_reported(self):
        """Each void variable yields one diagnostic at its declaration."""
        table = SymbolTable()
        table.declare(Symbol.variable("ok", "int", 1, 4))
        table.declare(Symbol.variable("bad", "void", 2, 5))
        collector = DiagnosticCollector()

        assert check_symbols(table, collector) == 1
        [diagnostic] = collector.diagnostics
        assert diagnostic.kind == DiagnosticKind.SEMANTIC
        assert diagnostic.message == "Variable 'bad' cannot be of type void"
        assert (diagnostic.line, diagnostic.column) == (2, 5)

    def test_void_functions_and_parameters_allowed(self):
        """Only variables are checked."""
        table = SymbolTable()
        table.declare(Symbol.function("main", "void"))
        table.declare(Symbol.parameter("p", "void"))
        collector = DiagnosticCollector()
        assert check_symbols(table, collector) == 0
        assert not collector.has_errors()

    def test_sweep_does_not_modify_table(self):
        """The sweep only reads the table."""
        table = SymbolTable()
        table.declare(Symbol.variable("v", "void"))
        before = table.snapshot()
        check_symbols(table, DiagnosticCollector())
        assert table.snapshot() == before


# =============================================================================
# Placeholder Listing
# =============================================================================

class TestArtifact:
    """Tests for the placeholder listing."""

    def test_data_section_lists_variables_only(self):
        """Functions and parameters are not listed."""
        table = SymbolTable()
        table.declare(Symbol.function("main", "int"))
        table.declare(Symbol.parameter("argc", "int"))
        table.declare(Symbol.variable("total", "float"))
        lines = generate_artifact(table)
        assert lines[0] == HEADER
        assert lines[1] == "SECTION .data"
        assert lines[2] == "    total: FLOAT 0"
        assert lines[3] == "SECTION .text"

    def test_text_section_is_fixed(self):
        """The text section does not depend on the program."""
        empty = generate_artifact(SymbolTable())
        table = SymbolTable()
        table.declare(Symbol.variable("x", "int"))
        assert generate_artifact(table)[3:] == empty[2:]
