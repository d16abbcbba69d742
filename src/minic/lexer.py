"""
Mini-C Lexer (Tokenizer)
========================

This module implements the lexer for Mini-C. It converts source text into
an ordered list of tokens for the parser.

Token Categories
----------------
- Keywords: int, float, char, void, if, else, while, for, return,
  printf, scanf, include
- Identifiers: variable and function names
- Integers: 42
- Floats: 3.14 (exactly one decimal point)
- Strings: "double quoted", no escape processing
- Operators: == != <= >= && || ++ -- += -= + - * / = < > !
- Delimiters: ( ) { } [ ] ; , #

Source is processed one physical line at a time. Lines are 1-indexed and
columns are 0-indexed offsets of a token's first character.

Comments
--------
- Single-line: // comment

Error Handling
--------------
The lexer never raises for bad input. Problems are recorded in the shared
DiagnosticCollector and scanning continues:
- an unterminated string drops the rest of the line
- a second decimal point ends the number and is skipped
- an invalid character is skipped

Example Usage
-------------
>>> from minic.lexer import tokenize
>>> tokens, diagnostics = tokenize('int x = 5;')
>>> for token in tokens:
...     print(token)
Token(KEYWORD, 'int', 1:0)
Token(IDENTIFIER, 'x', 1:4)
Token(OPERATOR, '=', 1:6)
Token(INTEGER, '5', 1:8)
Token(DELIMITER, ';', 1:9)
Token(END_OF_INPUT, '', 1:10)
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional
import string

from minic.errors import SourceLocation
from minic.diagnostics import (
    Diagnostic,
    DiagnosticCollector,
    unterminated_string,
    invalid_number,
    invalid_character,
)


# =============================================================================
# Token Kind Enumeration
# =============================================================================

class TokenKind(Enum):
    """
    Lexical classes of Mini-C tokens.

    Keywords share their spelling rules with identifiers and are only
    told apart by looking the text up in KEYWORDS.
    """
    KEYWORD = auto()
    IDENTIFIER = auto()
    INTEGER = auto()
    FLOAT = auto()
    STRING_LITERAL = auto()
    OPERATOR = auto()
    DELIMITER = auto()
    END_OF_INPUT = auto()


# =============================================================================
# Lexical Tables
# =============================================================================

KEYWORDS = frozenset({
    # Types
    "int", "float", "char", "void",
    # Control flow
    "if", "else", "while", "for", "return",
    # Built-in I/O
    "printf", "scanf",
    # Preprocessor
    "include",
})

TYPE_KEYWORDS = frozenset({"int", "float", "char", "void"})

# Must be tried before ONE_CHAR_OPERATORS so "<=" is never "<" then "="
TWO_CHAR_OPERATORS = frozenset({
    "==", "!=", "<=", ">=", "&&", "||", "++", "--", "+=", "-=",
})

ONE_CHAR_OPERATORS = frozenset({"+", "-", "*", "/", "=", "<", ">", "!"})

DELIMITERS = frozenset({"(", ")", "{", "}", "[", "]", ";", ",", "#"})


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single classified lexical unit.

    Attributes:
        kind: The TokenKind classification
        text: The token text (string literals exclude their quotes)
        line: Line number in source (1-indexed)
        column: Offset of the first character within its line (0-indexed)
    """
    kind: TokenKind
    text: str
    line: int
    column: int

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.text!r}, {self.line}:{self.column})"

    def location(self, filename: str = "<input>") -> SourceLocation:
        """Return a SourceLocation for error reporting."""
        return SourceLocation(filename, self.line, self.column)

    def is_type_keyword(self) -> bool:
        """Return True if this token is int, float, char or void."""
        return self.kind == TokenKind.KEYWORD and self.text in TYPE_KEYWORDS

    def is_assignment_operator(self) -> bool:
        """Return True if this token is =, += or -=."""
        return self.kind == TokenKind.OPERATOR and self.text in ("=", "+=", "-=")

    def matches(self, kind: TokenKind, text: Optional[str] = None) -> bool:
        """Return True if the token has this kind (and text, when given)."""
        return self.kind == kind and (text is None or self.text == text)


# =============================================================================
# Lexer Implementation
# =============================================================================

class Lexer:
    """
    Tokenizes Mini-C source code.

    Usage:
        collector = DiagnosticCollector()
        tokens = Lexer(source_text, collector).tokenize()

    Attributes:
        source: The source code being tokenized
        collector: Where lexical diagnostics are recorded
    """

    # Characters that can start an identifier
    IDENT_START = string.ascii_letters + "_"

    # Characters that can continue an identifier
    IDENT_CHARS = string.ascii_letters + string.digits + "_"

    def __init__(self, source: str, collector: Optional[DiagnosticCollector] = None):
        """
        Initialize the lexer with source code.

        Args:
            source: The Mini-C source code to tokenize
            collector: Shared diagnostic collector (a new one if None)
        """
        self.source = source
        self.collector = collector if collector is not None else DiagnosticCollector()

        # Per-line scanning state
        self._line_text = ""
        self._line = 0
        self._col = 0
        self._line_tokens: list[Token] = []

    def tokenize(self) -> list[Token]:
        """
        Convert the whole source into tokens.

        Returns:
            The token list, always terminated by one END_OF_INPUT token
        """
        tokens: list[Token] = []
        lines = self.source.split("\n")

        for line_number, line_text in enumerate(lines, start=1):
            tokens.extend(self._scan_line(line_number, line_text))

        tokens.append(Token(TokenKind.END_OF_INPUT, "", len(lines), len(lines[-1])))
        return tokens

    # =========================================================================
    # Line Scanning
    # =========================================================================

    def _scan_line(self, line_number: int, line_text: str) -> list[Token]:
        """Scan one physical line left to right."""
        self._line_text = line_text
        self._line = line_number
        self._col = 0
        self._line_tokens = []

        while self._col < len(line_text):
            char = line_text[self._col]

            if char.isspace():
                self._col += 1
                continue

            # Line comment: discard the rest of the line
            if char == "/" and self._peek(1) == "/":
                break

            if char == '"':
                self._scan_string()
            elif char in string.digits:
                self._scan_number()
            elif char in self.IDENT_START:
                self._scan_identifier()
            elif char == "<" and self._after_include():
                self._scan_header_name()
            else:
                self._scan_operator()

        return self._line_tokens

    def _peek(self, offset: int = 0) -> str:
        """Character at cursor + offset on the current line, or ''."""
        pos = self._col + offset
        if pos >= len(self._line_text):
            return ""
        return self._line_text[pos]

    def _emit(self, kind: TokenKind, text: str, column: int) -> None:
        self._line_tokens.append(Token(kind, text, self._line, column))

    def _report(self, diagnostic: Diagnostic) -> None:
        self.collector.add(diagnostic)

    # =========================================================================
    # Token Scanners
    # =========================================================================

    def _scan_string(self) -> None:
        """
        Scan a double-quoted string literal.

        Characters are taken verbatim up to the closing quote. A string
        left open at end of line is reported at its opening quote and
        produces no token.
        """
        start = self._col
        end = self._line_text.find('"', start + 1)

        if end == -1:
            self._report(unterminated_string(self._line, start))
            self._col = len(self._line_text)
            return

        self._emit(TokenKind.STRING_LITERAL, self._line_text[start + 1:end], start)
        self._col = end + 1

    def _scan_number(self) -> None:
        """Scan an integer or float literal (digits and at most one '.')."""
        start = self._col
        chars = []
        is_float = False

        while self._peek() and (self._peek() in string.digits or self._peek() == "."):
            if self._peek() == ".":
                if is_float:
                    self._report(invalid_number(self._line, self._col))
                    break
                is_float = True
            chars.append(self._peek())
            self._col += 1

        kind = TokenKind.FLOAT if is_float else TokenKind.INTEGER
        self._emit(kind, "".join(chars), start)

    def _scan_identifier(self) -> None:
        """Scan an identifier, classifying it as a keyword if it is one."""
        start = self._col
        while self._peek() and self._peek() in self.IDENT_CHARS:
            self._col += 1

        name = self._line_text[start:self._col]
        kind = TokenKind.KEYWORD if name in KEYWORDS else TokenKind.IDENTIFIER
        self._emit(kind, name, start)

    def _scan_operator(self) -> None:
        """Scan an operator or delimiter, preferring two-character operators."""
        start = self._col
        pair = self._line_text[start:start + 2]

        if len(pair) == 2 and pair in TWO_CHAR_OPERATORS:
            self._emit(TokenKind.OPERATOR, pair, start)
            self._col += 2
            return

        char = self._line_text[start]
        if char in DELIMITERS:
            self._emit(TokenKind.DELIMITER, char, start)
        elif char in ONE_CHAR_OPERATORS:
            self._emit(TokenKind.OPERATOR, char, start)
        else:
            self._report(invalid_character(char, self._line, start))
        self._col += 1

    # =========================================================================
    # Include Headers
    # =========================================================================

    def _after_include(self) -> bool:
        """True if '#' 'include' are the last two tokens on this line."""
        if len(self._line_tokens) < 2:
            return False
        hash_token, include_token = self._line_tokens[-2:]
        return (hash_token.matches(TokenKind.DELIMITER, "#")
                and include_token.matches(TokenKind.KEYWORD, "include"))

    def _scan_header_name(self) -> None:
        """
        Scan '<name.h>' after #include as '<', header identifier, '>'.

        Header names may contain characters such as '.' and '/' that are
        not otherwise valid, so they are taken whole. Without a closing
        '>' the '<' is scanned as an ordinary operator.
        """
        start = self._col
        end = self._line_text.find(">", start + 1)
        header = self._line_text[start + 1:end].strip() if end != -1 else ""

        if not header:
            self._scan_operator()
            return

        self._emit(TokenKind.OPERATOR, "<", start)
        self._emit(TokenKind.IDENTIFIER, header, self._line_text.index(header, start + 1))
        self._emit(TokenKind.OPERATOR, ">", end)
        self._col = end + 1


# =============================================================================
# Convenience Functions
# =============================================================================

def tokenize(
    source: str,
    collector: Optional[DiagnosticCollector] = None,
) -> tuple[list[Token], list[Diagnostic]]:
    """
    Tokenize Mini-C source.

    Args:
        source: The source text
        collector: Shared collector to append to (a new one if None)

    Returns:
        Tuple of (tokens, diagnostics collected so far)
    """
    collector = collector if collector is not None else DiagnosticCollector()
    tokens = Lexer(source, collector).tokenize()
    return tokens, collector.diagnostics
