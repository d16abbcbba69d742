"""
Mini-C Recursive Descent Parser
===============================

This module implements a recursive descent parser for Mini-C. It takes the
token list produced by the lexer, builds an Abstract Syntax Tree (AST),
fills the symbol table as declarations are recognised and checks that
identifiers and callees are declared before use.

Grammar (Simplified EBNF)
-------------------------
program         ::= (include | decl_or_function)*
include         ::= '#' 'include' '<' HEADER '>'
decl_or_function::= type IDENTIFIER (function | variable_decl)
function        ::= '(' params? ')' (block | ';')
params          ::= 'void' | type IDENTIFIER (',' type IDENTIFIER)*
variable_decl   ::= ('=' expr)? (',' IDENTIFIER ('=' expr)?)* ';'
type            ::= 'int' | 'float' | 'char' | 'void'

block           ::= '{' statement* '}'
body            ::= block | statement
statement       ::= decl_or_function | if_stmt | while_stmt | for_stmt
                  | return_stmt | call_stmt | assign_stmt
if_stmt         ::= 'if' '(' expr ')' body ('else' body)?
while_stmt      ::= 'while' '(' expr ')' body
for_stmt        ::= 'for' '(' (statement | ';') expr? ';' update? ')' body
update          ::= IDENTIFIER ('=' | '+=' | '-=') expr
                  | IDENTIFIER ('++' | '--')
                  | expr
return_stmt     ::= 'return' expr? ';'
call_stmt       ::= call ';'
call            ::= (IDENTIFIER | 'printf' | 'scanf') '(' (expr (',' expr)*)? ')'
assign_stmt     ::= IDENTIFIER ('=' | '+=' | '-=') expr ';'

Expression Precedence (lowest to highest)
-----------------------------------------
1. logical_or      ||
2. logical_and     &&
3. equality        == !=
4. relational      < > <= >=
5. additive        + -
6. multiplicative  * /
7. unary           ! - + (prefix, right-associative)
8. primary         literal, IDENTIFIER, call, '(' expr ')'

Error Recovery
--------------
The parser never raises for bad input. Every problem is recorded in the
shared DiagnosticCollector and parsing carries on:
- a missing required token is reported and NOT consumed, so the caller
  looks at the same token again
- an unusable token at top level or in statement position is reported
  and skipped
- an undeclared variable or function is reported and the construct is
  still parsed

Symbol Table
------------
There is one flat table for the whole compilation. Functions are recorded
before their parameters and body (so recursion resolves), variables before
their initialiser. Re-declaring a name overwrites the earlier entry.

Example Usage
-------------
>>> from minic.lexer import tokenize
>>> from minic.parser import parse
>>> tokens, _ = tokenize('int f(int a) { return a + 1; }')
>>> result = parse(tokens)
>>> result.diagnostics
[]
>>> str(result.symbols.lookup('a'))
'parameter (int)'
"""

from dataclasses import dataclass
from typing import Callable, Optional
import logging

from minic.errors import SourceLocation
from minic.lexer import Lexer, Token, TokenKind
from minic.symbols import Symbol, SymbolTable
from minic.diagnostics import (
    Diagnostic,
    DiagnosticCollector,
    syntax_error,
    expected_token,
    undeclared_variable,
    undeclared_function,
)
from minic.ast import (
    ProgramNode,
    Declaration,
    IncludeDirective,
    FunctionNode,
    ParameterNode,
    VariableDeclaration,
    Statement,
    BlockStatement,
    DeclarationStatement,
    ExpressionStatement,
    IfStatement,
    WhileStatement,
    ForStatement,
    ReturnStatement,
    Expression,
    BinaryExpression,
    UnaryExpression,
    AssignmentExpression,
    CallExpression,
    IdentifierExpression,
    IntegerLiteral,
    FloatLiteral,
    StringLiteral,
    BinaryOperator,
    UnaryOperator,
    AssignmentOperator,
)

logger = logging.getLogger(__name__)

# Functions that may be called without being declared
BUILTIN_FUNCTIONS = ("printf", "scanf")


@dataclass
class ParseResult:
    """
    Outcome of parsing one token list.

    Attributes:
        program: The AST root (always present, possibly partial)
        diagnostics: Diagnostics in detection order
        symbols: The populated symbol table
    """
    program: ProgramNode
    diagnostics: list[Diagnostic]
    symbols: SymbolTable


class Parser:
    """
    Recursive descent parser for Mini-C.

    Uses one token of lookahead plus an explicit peek at the following
    token to tell a call (`name (`) from an assignment.

    Attributes:
        tokens: List of tokens to parse
        collector: Where syntax and semantic diagnostics are recorded
        symbols: Symbol table filled while parsing
        filename: Source filename used in node locations
    """

    def __init__(
        self,
        tokens: list[Token],
        collector: Optional[DiagnosticCollector] = None,
        symbols: Optional[SymbolTable] = None,
        builtins: tuple[str, ...] = BUILTIN_FUNCTIONS,
        filename: str = "<input>",
    ):
        """
        Initialize the parser.

        Args:
            tokens: Tokens from the lexer
            collector: Shared diagnostic collector (a new one if None)
            symbols: Symbol table to populate (a new one if None)
            builtins: Function names that need no declaration
            filename: Source filename for node locations
        """
        self.tokens = list(tokens)
        self.collector = collector if collector is not None else DiagnosticCollector(filename)
        self.symbols = symbols if symbols is not None else SymbolTable()
        self.builtins = frozenset(builtins)
        self.filename = filename

        if not self.tokens or self.tokens[-1].kind != TokenKind.END_OF_INPUT:
            self.tokens.append(self._end_token())

        # Current position in token stream
        self._pos = 0

    def _end_token(self) -> Token:
        """Build an END_OF_INPUT token just past the last token."""
        if not self.tokens:
            return Token(TokenKind.END_OF_INPUT, "", 1, 0)
        last = self.tokens[-1]
        return Token(TokenKind.END_OF_INPUT, "", last.line, last.column + len(last.text))

    def parse(self) -> ProgramNode:
        """
        Parse the whole token list.

        Returns:
            ProgramNode containing every recognised top-level item
        """
        declarations: list[Declaration] = []

        while not self._at_end():
            token = self._peek()

            if token.matches(TokenKind.DELIMITER, "#") or token.matches(TokenKind.KEYWORD, "include"):
                declarations.append(self._parse_include())
            elif token.kind == TokenKind.KEYWORD:
                declarations.extend(self._parse_declaration_or_function(is_global=True))
            else:
                self._syntax_error(
                    "Expected declaration or function",
                    "Add proper function or variable declaration",
                )
                self._advance()

        return ProgramNode(
            location=SourceLocation(self.filename, 1, 0),
            declarations=declarations,
        )

    # =========================================================================
    # Token Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        """Check if we've reached the end of tokens."""
        return self._peek().kind == TokenKind.END_OF_INPUT

    def _peek(self, offset: int = 0) -> Token:
        """Look at token at current position + offset."""
        pos = self._pos + offset
        if pos >= len(self.tokens):
            return self.tokens[-1]
        return self.tokens[pos]

    def _advance(self) -> Token:
        """Consume and return the current token (never moves past the end)."""
        token = self._peek()
        if not self._at_end():
            self._pos += 1
        return token

    def _check(self, kind: TokenKind, text: Optional[str] = None) -> bool:
        """Check the current token without consuming it."""
        return self._peek().matches(kind, text)

    def _consume(self, kind: TokenKind, text: str) -> Optional[Token]:
        """
        Consume a required token.

        On mismatch an "Expected" diagnostic is recorded at the current
        token, which is left in place for the caller to look at.

        Returns:
            The consumed token, or None if it was missing
        """
        if self._check(kind, text):
            return self._advance()
        current = self._peek()
        self.collector.add(expected_token(text, current.line, current.column))
        return None

    def _location(self, token: Token) -> SourceLocation:
        return token.location(self.filename)

    def _syntax_error(self, message: str, suggestion: str, token: Optional[Token] = None) -> None:
        """Record a syntax diagnostic at token (default: the current token)."""
        token = token or self._peek()
        self.collector.add(syntax_error(message, suggestion, token.line, token.column))

    def _require_variable(self, token: Token) -> None:
        """Report token's name if it is not in the symbol table."""
        if token.text not in self.symbols:
            self.collector.add(undeclared_variable(token.text, token.line, token.column))

    # =========================================================================
    # Top-Level Parsing
    # =========================================================================

    def _parse_include(self) -> IncludeDirective:
        """Parse #include <header>."""
        location = self._location(self._peek())
        self._consume(TokenKind.DELIMITER, "#")
        self._consume(TokenKind.KEYWORD, "include")

        header = ""
        if self._check(TokenKind.OPERATOR, "<"):
            self._advance()
            if self._check(TokenKind.IDENTIFIER):
                header = self._advance().text
            else:
                self._syntax_error("Expected header name", "Add header name like stdio.h")
            self._consume(TokenKind.OPERATOR, ">")
        else:
            self._syntax_error("Expected < after #include", "Use format: #include <stdio.h>")

        logger.debug(f"Parsed include <{header}>")
        return IncludeDirective(location=location, header=header)

    def _parse_declaration_or_function(self, is_global: bool) -> list[Declaration]:
        """
        Parse a declaration starting with a keyword.

        The keyword is always consumed. Returns one FunctionNode, one
        VariableDeclaration per declarator, or nothing after an error.
        """
        type_token = self._advance()
        if not type_token.is_type_keyword():
            self._syntax_error(
                f"Expected type specifier, found '{type_token.text}'",
                "Start the declaration with int, float, char, or void",
                type_token,
            )
            return []

        if not self._check(TokenKind.IDENTIFIER):
            self._syntax_error("Expected identifier", "Add variable or function name")
            return []

        name_token = self._advance()

        if self._check(TokenKind.DELIMITER, "("):
            return [self._parse_function(type_token, name_token)]
        if (self._check(TokenKind.OPERATOR, "=")
                or self._check(TokenKind.DELIMITER, ";")
                or self._check(TokenKind.DELIMITER, ",")):
            return self._parse_variable_declaration(type_token.text, name_token, is_global)

        self._syntax_error("Expected (, =, or ;", "Add proper syntax for declaration or function")
        return []

    def _parse_function(self, type_token: Token, name_token: Token) -> FunctionNode:
        """Parse a function definition or prototype after its name."""
        self.symbols.declare(Symbol.function(
            name_token.text, type_token.text, name_token.line, name_token.column,
        ))
        logger.debug(f"Parsing function '{name_token.text}' returning {type_token.text}")

        self._consume(TokenKind.DELIMITER, "(")

        parameters = []
        if self._check(TokenKind.KEYWORD, "void") and self._peek(1).matches(TokenKind.DELIMITER, ")"):
            self._advance()
        elif not self._check(TokenKind.DELIMITER, ")"):
            parameters = self._parse_parameter_list()

        self._consume(TokenKind.DELIMITER, ")")

        # Prototype: int f(int a);
        if self._check(TokenKind.DELIMITER, ";"):
            self._advance()
            return FunctionNode(
                location=self._location(type_token),
                name=name_token.text,
                return_type=type_token.text,
                parameters=parameters,
                is_forward_decl=True,
            )

        body = self._parse_block()

        return FunctionNode(
            location=self._location(type_token),
            name=name_token.text,
            return_type=type_token.text,
            parameters=parameters,
            body=body,
        )

    def _parse_parameter_list(self) -> list[ParameterNode]:
        """Parse comma-separated `type name` parameters."""
        parameters = []

        while True:
            if not self._peek().is_type_keyword():
                self._syntax_error("Expected parameter type", "Add parameter type (int, float, etc.)")
                break

            type_token = self._advance()
            if self._check(TokenKind.IDENTIFIER):
                name_token = self._advance()
                self.symbols.declare(Symbol.parameter(
                    name_token.text, type_token.text, name_token.line, name_token.column,
                ))
                parameters.append(ParameterNode(
                    location=self._location(type_token),
                    name=name_token.text,
                    param_type=type_token.text,
                ))
            else:
                self._syntax_error("Expected parameter name", "Add parameter name after type")

            if not self._check(TokenKind.DELIMITER, ","):
                break
            self._advance()

        return parameters

    def _parse_variable_declaration(
        self,
        var_type: str,
        name_token: Token,
        is_global: bool,
    ) -> list[VariableDeclaration]:
        """
        Parse the rest of a variable declaration after its first name.

        Supports chained declarators:
            int a = 1, b, c = 3;
        """
        declarations = [self._parse_declarator(var_type, name_token, is_global)]

        while self._check(TokenKind.DELIMITER, ","):
            self._advance()
            if self._check(TokenKind.IDENTIFIER):
                declarations.append(self._parse_declarator(var_type, self._advance(), is_global))
            else:
                self._syntax_error("Expected identifier", "Add variable name after comma")

        self._consume(TokenKind.DELIMITER, ";")
        return declarations

    def _parse_declarator(self, var_type: str, name_token: Token, is_global: bool) -> VariableDeclaration:
        """Record one declared variable and parse its optional initializer."""
        self.symbols.declare(Symbol.variable(
            name_token.text, var_type, name_token.line, name_token.column,
        ))
        logger.debug(f"Declared variable '{name_token.text}' of type {var_type}")

        initializer = None
        if self._check(TokenKind.OPERATOR, "="):
            self._advance()
            initializer = self._parse_expression()

        return VariableDeclaration(
            location=self._location(name_token),
            name=name_token.text,
            var_type=var_type,
            initializer=initializer,
            is_global=is_global,
        )

    # =========================================================================
    # Statement Parsing
    # =========================================================================

    def _parse_block(self) -> BlockStatement:
        """Parse a block statement { ... }."""
        location = self._location(self._peek())
        self._consume(TokenKind.DELIMITER, "{")

        statements = []
        while not self._check(TokenKind.DELIMITER, "}") and not self._at_end():
            stmt = self._parse_statement()
            if stmt:
                statements.append(stmt)

        self._consume(TokenKind.DELIMITER, "}")

        return BlockStatement(location=location, statements=statements)

    def _parse_body(self) -> Optional[Statement]:
        """Parse a loop or branch body: a block or a single statement."""
        if self._check(TokenKind.DELIMITER, "{"):
            return self._parse_block()
        return self._parse_statement()

    def _parse_statement(self) -> Optional[Statement]:
        """
        Parse any statement.

        Returns None for a statement that produced nothing usable; the
        offending token has then been consumed.
        """
        token = self._peek()

        if token.kind == TokenKind.KEYWORD:
            if token.is_type_keyword():
                declarations = self._parse_declaration_or_function(is_global=False)
                return DeclarationStatement(location=self._location(token), declarations=declarations)
            if token.text == "if":
                return self._parse_if_statement()
            if token.text == "while":
                return self._parse_while_statement()
            if token.text == "for":
                return self._parse_for_statement()
            if token.text == "return":
                return self._parse_return_statement()
            if token.text in ("printf", "scanf"):
                return self._parse_call_statement()

            self._syntax_error(f"Unexpected keyword: {token.text}", "Use valid C keywords")
            self._advance()
            return None

        if token.kind == TokenKind.IDENTIFIER:
            following = self._peek(1)
            if following.matches(TokenKind.DELIMITER, "("):
                return self._parse_call_statement()
            if following.is_assignment_operator():
                return self._parse_assignment_statement()

            self._advance()
            self._syntax_error(
                "Expected assignment or function call",
                "Add = for assignment or () for function call",
            )
            return None

        self._syntax_error("Expected statement", "Add valid C statement")
        self._advance()
        return None

    def _parse_if_statement(self) -> IfStatement:
        """Parse if statement."""
        location = self._location(self._peek())
        self._consume(TokenKind.KEYWORD, "if")
        self._consume(TokenKind.DELIMITER, "(")
        condition = self._parse_expression()
        self._consume(TokenKind.DELIMITER, ")")

        then_branch = self._parse_body()

        else_branch = None
        if self._check(TokenKind.KEYWORD, "else"):
            self._advance()
            else_branch = self._parse_body()

        return IfStatement(
            location=location,
            condition=condition,
            then_branch=then_branch,
            else_branch=else_branch,
        )

    def _parse_while_statement(self) -> WhileStatement:
        """Parse while statement."""
        location = self._location(self._peek())
        self._consume(TokenKind.KEYWORD, "while")
        self._consume(TokenKind.DELIMITER, "(")
        condition = self._parse_expression()
        self._consume(TokenKind.DELIMITER, ")")

        body = self._parse_body()

        return WhileStatement(location=location, condition=condition, body=body)

    def _parse_for_statement(self) -> ForStatement:
        """
        Parse for statement.

        The initializer is a full statement and so consumes its own ';'.
        """
        location = self._location(self._peek())
        self._consume(TokenKind.KEYWORD, "for")
        self._consume(TokenKind.DELIMITER, "(")

        # Initializer (optional)
        initializer = None
        if self._check(TokenKind.DELIMITER, ";"):
            self._advance()
        else:
            initializer = self._parse_statement()

        # Condition (optional)
        condition = None
        if not self._check(TokenKind.DELIMITER, ";"):
            condition = self._parse_expression()
        self._consume(TokenKind.DELIMITER, ";")

        # Update (optional)
        update = None
        if not self._check(TokenKind.DELIMITER, ")"):
            update = self._parse_for_update()
        self._consume(TokenKind.DELIMITER, ")")

        body = self._parse_body()

        return ForStatement(
            location=location,
            initializer=initializer,
            condition=condition,
            update=update,
            body=body,
        )

    def _parse_for_update(self) -> Optional[Expression]:
        """Parse the update clause: assignment, i++ / i--, or expression."""
        token = self._peek()
        following = self._peek(1)

        if token.kind == TokenKind.IDENTIFIER and following.is_assignment_operator():
            return self._parse_assignment(self._advance())

        if token.kind == TokenKind.IDENTIFIER and following.kind == TokenKind.OPERATOR \
                and following.text in ("++", "--"):
            self._advance()
            self._require_variable(token)
            op_token = self._advance()
            return UnaryExpression(
                location=self._location(token),
                operator=UnaryOperator(op_token.text),
                operand=IdentifierExpression(location=self._location(token), name=token.text),
            )

        return self._parse_expression()

    def _parse_return_statement(self) -> ReturnStatement:
        """Parse return statement."""
        location = self._location(self._peek())
        self._consume(TokenKind.KEYWORD, "return")

        value = None
        if not self._check(TokenKind.DELIMITER, ";"):
            value = self._parse_expression()

        self._consume(TokenKind.DELIMITER, ";")

        return ReturnStatement(location=location, value=value)

    def _parse_call_statement(self) -> ExpressionStatement:
        """Parse a call followed by ';'."""
        call = self._parse_call()
        self._consume(TokenKind.DELIMITER, ";")
        return ExpressionStatement(location=call.location, expression=call)

    def _parse_assignment_statement(self) -> ExpressionStatement:
        """Parse `name op expr ;`."""
        assignment = self._parse_assignment(self._advance())
        self._consume(TokenKind.DELIMITER, ";")
        return ExpressionStatement(location=assignment.location, expression=assignment)

    def _parse_assignment(self, target: Token) -> AssignmentExpression:
        """Parse the operator and value of an assignment to target."""
        self._require_variable(target)
        op_token = self._advance()
        value = self._parse_expression()

        return AssignmentExpression(
            location=self._location(target),
            operator=AssignmentOperator(op_token.text),
            target=target.text,
            value=value,
        )

    def _parse_call(self) -> CallExpression:
        """
        Parse a function call. The callee must be declared or built in.

        No ';' is required here; call statements add it.
        """
        name_token = self._advance()
        if name_token.text not in self.symbols and name_token.text not in self.builtins:
            self.collector.add(undeclared_function(name_token.text, name_token.line, name_token.column))

        self._consume(TokenKind.DELIMITER, "(")

        arguments = []
        if not self._check(TokenKind.DELIMITER, ")"):
            while True:
                arguments.append(self._parse_expression())
                if not self._check(TokenKind.DELIMITER, ","):
                    break
                self._advance()

        self._consume(TokenKind.DELIMITER, ")")

        return CallExpression(
            location=self._location(name_token),
            function_name=name_token.text,
            arguments=arguments,
        )

    # =========================================================================
    # Expression Parsing
    # =========================================================================

    def _parse_expression(self) -> Optional[Expression]:
        """Parse an expression, starting at the lowest precedence."""
        return self._parse_logical_or()

    def _parse_logical_or(self) -> Optional[Expression]:
        """Parse logical OR expression (||)."""
        return self._parse_binary(
            self._parse_logical_and,
            {"||": BinaryOperator.LOGICAL_OR},
        )

    def _parse_logical_and(self) -> Optional[Expression]:
        """Parse logical AND expression (&&)."""
        return self._parse_binary(
            self._parse_equality,
            {"&&": BinaryOperator.LOGICAL_AND},
        )

    def _parse_equality(self) -> Optional[Expression]:
        """Parse equality expression (== !=)."""
        return self._parse_binary(
            self._parse_relational,
            {
                "==": BinaryOperator.EQUAL,
                "!=": BinaryOperator.NOT_EQUAL,
            },
        )

    def _parse_relational(self) -> Optional[Expression]:
        """Parse relational expression (< > <= >=)."""
        return self._parse_binary(
            self._parse_additive,
            {
                "<": BinaryOperator.LESS,
                ">": BinaryOperator.GREATER,
                "<=": BinaryOperator.LESS_EQ,
                ">=": BinaryOperator.GREATER_EQ,
            },
        )

    def _parse_additive(self) -> Optional[Expression]:
        """Parse additive expression (+ -)."""
        return self._parse_binary(
            self._parse_multiplicative,
            {
                "+": BinaryOperator.ADD,
                "-": BinaryOperator.SUBTRACT,
            },
        )

    def _parse_multiplicative(self) -> Optional[Expression]:
        """Parse multiplicative expression (* /)."""
        return self._parse_binary(
            self._parse_unary,
            {
                "*": BinaryOperator.MULTIPLY,
                "/": BinaryOperator.DIVIDE,
            },
        )

    def _parse_binary(
        self,
        operand_parser: Callable[[], Optional[Expression]],
        operators: dict[str, BinaryOperator],
    ) -> Optional[Expression]:
        """
        Generic left-associative binary expression parser.

        Args:
            operand_parser: Function to parse operands
            operators: Map of operator spellings to binary operators
        """
        expr = operand_parser()

        while self._peek().kind == TokenKind.OPERATOR and self._peek().text in operators:
            op_token = self._advance()
            right = operand_parser()
            expr = BinaryExpression(
                location=expr.location if expr else self._location(op_token),
                operator=operators[op_token.text],
                left=expr,
                right=right,
            )

        return expr

    def _parse_unary(self) -> Optional[Expression]:
        """Parse unary expression (! - +)."""
        token = self._peek()

        unary_ops = {
            "-": UnaryOperator.NEGATE,
            "+": UnaryOperator.POSITIVE,
            "!": UnaryOperator.LOGICAL_NOT,
        }

        if token.kind == TokenKind.OPERATOR and token.text in unary_ops:
            self._advance()
            operand = self._parse_unary()  # Right-associative
            return UnaryExpression(
                location=self._location(token),
                operator=unary_ops[token.text],
                operand=operand,
            )

        return self._parse_primary()

    def _parse_primary(self) -> Optional[Expression]:
        """
        Parse primary expression (literals, identifiers, calls, parenthesized).

        Returns None after reporting "Expected expression"; the offending
        token is not consumed.
        """
        token = self._peek()

        if token.kind == TokenKind.INTEGER:
            self._advance()
            return IntegerLiteral(location=self._location(token), value=int(token.text))

        if token.kind == TokenKind.FLOAT:
            self._advance()
            return FloatLiteral(location=self._location(token), value=float(token.text))

        if token.kind == TokenKind.STRING_LITERAL:
            self._advance()
            return StringLiteral(location=self._location(token), value=token.text)

        if token.kind == TokenKind.IDENTIFIER:
            self._require_variable(token)
            if self._peek(1).matches(TokenKind.DELIMITER, "("):
                return self._parse_call()
            self._advance()
            return IdentifierExpression(location=self._location(token), name=token.text)

        if token.matches(TokenKind.DELIMITER, "("):
            self._advance()
            expr = self._parse_expression()
            self._consume(TokenKind.DELIMITER, ")")
            return expr

        self._syntax_error("Expected expression", "Add number, variable, or parenthesized expression")
        return None


# =============================================================================
# Convenience Functions
# =============================================================================

def parse(
    tokens: list[Token],
    collector: Optional[DiagnosticCollector] = None,
    symbols: Optional[SymbolTable] = None,
    builtins: tuple[str, ...] = BUILTIN_FUNCTIONS,
    filename: str = "<input>",
) -> ParseResult:
    """
    Parse a token list.

    Args:
        tokens: Tokens from the lexer
        collector: Shared collector to append to (a new one if None)
        symbols: Symbol table to populate (a new one if None)
        builtins: Function names that need no declaration
        filename: Source filename for node locations

    Returns:
        ParseResult with the AST, the diagnostics collected so far and
        the populated symbol table
    """
    parser = Parser(tokens, collector, symbols, builtins, filename)
    program = parser.parse()
    return ParseResult(program, parser.collector.diagnostics, parser.symbols)


def parse_source(source: str, filename: str = "<input>") -> ParseResult:
    """
    Lex and parse Mini-C source.

    This is a convenience function that combines lexing and parsing;
    lexical diagnostics come first in the result.

    Args:
        source: The Mini-C source code
        filename: Source filename for node locations

    Returns:
        ParseResult for the source
    """
    collector = DiagnosticCollector(filename)
    tokens = Lexer(source, collector).tokenize()
    return parse(tokens, collector, filename=filename)
