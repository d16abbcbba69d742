"""
Mini-C Placeholder Artifact Generator
=====================================

Mini-C does not lower programs to target code. A successful compilation
instead produces a short assembly-like listing:

    // Generated Assembly-like Code
    SECTION .data
        count: INT 0
    SECTION .text
    GLOBAL _start
    _start:
        ...

The data section names every declared variable with its type; the text
section is the same for every program.
"""

from minic.symbols import SymbolRole, SymbolTable


HEADER = "// Generated Assembly-like Code"

TEXT_SECTION = [
    "SECTION .text",
    "GLOBAL _start",
    "_start:",
    "    ; Program execution starts here",
    "    MOV EAX, 1    ; sys_exit",
    "    MOV EBX, 0    ; exit status",
    "    INT 0x80      ; system call",
]


class ArtifactGenerator:
    """
    Builds the placeholder listing from a symbol table.

    Example:
        lines = ArtifactGenerator().generate(symbols)
        print("\\n".join(lines))
    """

    def generate(self, symbols: SymbolTable) -> list[str]:
        """
        Generate the listing.

        Args:
            symbols: Symbol table of a compiled program

        Returns:
            The listing as a list of lines
        """
        lines = [HEADER, "SECTION .data"]

        for symbol in symbols.of_role(SymbolRole.VARIABLE):
            lines.append(f"    {symbol.name}: {symbol.declared_type.upper()} 0")

        lines.extend(TEXT_SECTION)
        return lines


def generate_artifact(symbols: SymbolTable) -> list[str]:
    """Generate the placeholder listing for a symbol table."""
    return ArtifactGenerator().generate(symbols)
