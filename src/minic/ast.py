"""
Mini-C Abstract Syntax Tree (AST) Definitions
=============================================

This module defines the AST node types built by the Mini-C parser.

Node Hierarchy
--------------
ASTNode (base)
├── ProgramNode - root node containing all top-level items
├── Declarations
│   ├── IncludeDirective - #include <header>
│   ├── FunctionNode - function definition or prototype
│   ├── VariableDeclaration - one declared variable
│   └── ParameterNode - function parameter
├── Statements
│   ├── BlockStatement - compound statement { ... }
│   ├── DeclarationStatement - declaration inside a block
│   ├── ExpressionStatement - call or assignment followed by ';'
│   ├── IfStatement - if/else statement
│   ├── WhileStatement - while loop
│   ├── ForStatement - for loop
│   └── ReturnStatement - return statement
└── Expressions
    ├── BinaryExpression - || && == != < > <= >= + - * /
    ├── UnaryExpression - prefix ! - +, postfix ++ -- (for updates)
    ├── AssignmentExpression - = += -=
    ├── CallExpression - function call
    ├── IdentifierExpression - variable reference
    ├── IntegerLiteral / FloatLiteral / StringLiteral - constants

Design Notes
------------
- All nodes are dataclasses and record their source location
- Types are kept as their keyword spelling ("int", "float", ...)
- After a syntax error the parser still returns a tree; slots it could
  not fill are None
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from minic.errors import SourceLocation


# =============================================================================
# AST Node Base Classes
# =============================================================================

@dataclass
class ASTNode:
    """
    Base class for all AST nodes.

    Attributes:
        location: Source location where this node appears
    """
    location: SourceLocation

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}@{self.location.line}:{self.location.column}"


@dataclass
class Expression(ASTNode):
    """Base class for all expression nodes."""
    pass


@dataclass
class Statement(ASTNode):
    """Base class for all statement nodes."""
    pass


@dataclass
class Declaration(ASTNode):
    """
    Base class for all declaration nodes.

    Declarations introduce new names (variables, functions, parameters)
    into the symbol table.
    """
    pass


# =============================================================================
# Program Root Node
# =============================================================================

@dataclass
class ProgramNode(ASTNode):
    """
    Root node of the AST.

    Attributes:
        declarations: Top-level includes, functions and variables
    """
    declarations: list[Declaration] = field(default_factory=list)


# =============================================================================
# Declaration Nodes
# =============================================================================

@dataclass
class IncludeDirective(Declaration):
    """
    Include directive: #include <header>.

    Attributes:
        header: Header name, e.g. "stdio.h" (empty if missing)
    """
    header: str = ""


@dataclass
class ParameterNode(Declaration):
    """
    Function parameter declaration.

    Attributes:
        name: Parameter name
        param_type: Type keyword
    """
    name: str = ""
    param_type: str = ""


@dataclass
class VariableDeclaration(Declaration):
    """
    Variable declaration (global or local).

    A chained declaration such as `int a = 1, b;` yields one node
    per declared name.

    Attributes:
        name: Variable name
        var_type: Type keyword
        initializer: Optional initialization expression
        is_global: True for top-level variables
    """
    name: str = ""
    var_type: str = ""
    initializer: Optional[Expression] = None
    is_global: bool = False


@dataclass
class FunctionNode(Declaration):
    """
    Function definition.

    Attributes:
        name: Function name
        return_type: Return type keyword
        parameters: List of parameter declarations
        body: The function body (None for a prototype)
        is_forward_decl: True for a prototype ending in ';'
    """
    name: str = ""
    return_type: str = ""
    parameters: list[ParameterNode] = field(default_factory=list)
    body: Optional["BlockStatement"] = None
    is_forward_decl: bool = False


# =============================================================================
# Statement Nodes
# =============================================================================

@dataclass
class BlockStatement(Statement):
    """
    Compound statement { ... }.

    Attributes:
        statements: Statements in source order
    """
    statements: list[Statement] = field(default_factory=list)


@dataclass
class DeclarationStatement(Statement):
    """
    Declaration appearing where a statement is expected.

    Attributes:
        declarations: The variables (or nested function) declared
    """
    declarations: list[Declaration] = field(default_factory=list)


@dataclass
class ExpressionStatement(Statement):
    """
    Expression evaluated for its effect: a call or an assignment.

    Attributes:
        expression: The call or assignment expression
    """
    expression: Optional[Expression] = None


@dataclass
class IfStatement(Statement):
    """
    if/else statement.

    Attributes:
        condition: Condition expression
        then_branch: Block or single statement
        else_branch: Optional block or single statement
    """
    condition: Optional[Expression] = None
    then_branch: Optional[Statement] = None
    else_branch: Optional[Statement] = None


@dataclass
class WhileStatement(Statement):
    """
    while loop.

    Attributes:
        condition: Loop condition
        body: Block or single statement
    """
    condition: Optional[Expression] = None
    body: Optional[Statement] = None


@dataclass
class ForStatement(Statement):
    """
    for loop.

    Attributes:
        initializer: Optional statement (declaration, assignment or call)
        condition: Optional condition expression
        update: Optional update expression
        body: Block or single statement
    """
    initializer: Optional[Statement] = None
    condition: Optional[Expression] = None
    update: Optional[Expression] = None
    body: Optional[Statement] = None


@dataclass
class ReturnStatement(Statement):
    """
    return statement.

    Attributes:
        value: Optional return value
    """
    value: Optional[Expression] = None


# =============================================================================
# Expression Nodes
# =============================================================================

class BinaryOperator(Enum):
    """Binary operators, valued by their spelling."""
    LOGICAL_OR = "||"
    LOGICAL_AND = "&&"
    EQUAL = "=="
    NOT_EQUAL = "!="
    LESS = "<"
    GREATER = ">"
    LESS_EQ = "<="
    GREATER_EQ = ">="
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"


class UnaryOperator(Enum):
    """Unary operators, valued by their spelling."""
    NEGATE = "-"
    POSITIVE = "+"
    LOGICAL_NOT = "!"
    POST_INCREMENT = "++"
    POST_DECREMENT = "--"


class AssignmentOperator(Enum):
    """Assignment operators, valued by their spelling."""
    ASSIGN = "="
    ADD_ASSIGN = "+="
    SUB_ASSIGN = "-="


@dataclass
class BinaryExpression(Expression):
    """
    Binary operation expression (a op b).

    Attributes:
        operator: The binary operator
        left: Left operand expression
        right: Right operand expression
    """
    operator: BinaryOperator = None
    left: Optional[Expression] = None
    right: Optional[Expression] = None


@dataclass
class UnaryExpression(Expression):
    """
    Unary operation expression (op x, or x op for ++/--).

    Attributes:
        operator: The unary operator
        operand: The operand expression
    """
    operator: UnaryOperator = None
    operand: Optional[Expression] = None


@dataclass
class AssignmentExpression(Expression):
    """
    Assignment (name op value).

    Attributes:
        operator: =, += or -=
        target: Name of the assigned variable
        value: The value to assign
    """
    operator: AssignmentOperator = None
    target: str = ""
    value: Optional[Expression] = None


@dataclass
class CallExpression(Expression):
    """
    Function call expression.

    Attributes:
        function_name: Name of the function to call
        arguments: List of argument expressions
    """
    function_name: str = ""
    arguments: list[Optional[Expression]] = field(default_factory=list)


@dataclass
class IdentifierExpression(Expression):
    """
    Variable reference expression.

    Attributes:
        name: The variable name
    """
    name: str = ""


@dataclass
class IntegerLiteral(Expression):
    """Integer constant."""
    value: int = 0


@dataclass
class FloatLiteral(Expression):
    """Floating-point constant."""
    value: float = 0.0


@dataclass
class StringLiteral(Expression):
    """String constant (contents without quotes)."""
    value: str = ""


# =============================================================================
# AST Visitor Pattern
# =============================================================================

class ASTVisitor:
    """
    Base class for AST visitors.

    Subclasses override visit_<NodeClass> methods for the node types
    they care about; every other node has its children visited.

    Usage:
        class CallCounter(ASTVisitor):
            def __init__(self):
                self.count = 0

            def visit_CallExpression(self, node):
                self.count += 1
                self.generic_visit(node)
    """

    def visit(self, node: Optional[ASTNode]) -> Any:
        """Visit a node by dispatching to the matching visit_ method."""
        if node is None:
            return None
        method_name = f"visit_{node.__class__.__name__}"
        visitor = getattr(self, method_name, self.generic_visit)
        return visitor(node)

    def generic_visit(self, node: ASTNode) -> None:
        """Visit all child nodes of node."""
        for field_value in node.__dict__.values():
            if isinstance(field_value, ASTNode):
                self.visit(field_value)
            elif isinstance(field_value, list):
                for item in field_value:
                    if isinstance(item, ASTNode):
                        self.visit(item)


# =============================================================================
# AST Pretty Printer
# =============================================================================

class ASTPrinter(ASTVisitor):
    """
    Pretty printer for AST debugging.

    Usage:
        printer = ASTPrinter()
        print(printer.print(program))
    """

    def __init__(self):
        self.output: list[str] = []
        self.indent_level = 0

    def print(self, node: ASTNode) -> str:
        """Print the AST and return it as a string."""
        self.output = []
        self.indent_level = 0
        self.visit(node)
        return "\n".join(self.output)

    def _emit(self, text: str) -> None:
        indent = "  " * self.indent_level
        self.output.append(f"{indent}{text}")

    def _nested(self, node: Optional[ASTNode]) -> None:
        self.indent_level += 1
        self.visit(node)
        self.indent_level -= 1

    def visit_ProgramNode(self, node: ProgramNode):
        self._emit("Program")
        for decl in node.declarations:
            self._nested(decl)

    def visit_IncludeDirective(self, node: IncludeDirective):
        self._emit(f"Include <{node.header}>")

    def visit_FunctionNode(self, node: FunctionNode):
        params = ", ".join(f"{p.param_type} {p.name}" for p in node.parameters)
        suffix = " (prototype)" if node.is_forward_decl else ""
        self._emit(f"Function: {node.return_type} {node.name}({params}){suffix}")
        self._nested(node.body)

    def visit_VariableDeclaration(self, node: VariableDeclaration):
        scope = "global" if node.is_global else "local"
        init = f" = {self._expr_str(node.initializer)}" if node.initializer else ""
        self._emit(f"Variable ({scope}): {node.var_type} {node.name}{init}")

    def visit_BlockStatement(self, node: BlockStatement):
        self._emit("Block")
        for stmt in node.statements:
            self._nested(stmt)

    def visit_DeclarationStatement(self, node: DeclarationStatement):
        for decl in node.declarations:
            self.visit(decl)

    def visit_IfStatement(self, node: IfStatement):
        self._emit(f"If ({self._expr_str(node.condition)})")
        self._nested(node.then_branch)
        if node.else_branch:
            self._emit("Else")
            self._nested(node.else_branch)

    def visit_WhileStatement(self, node: WhileStatement):
        self._emit(f"While ({self._expr_str(node.condition)})")
        self._nested(node.body)

    def visit_ForStatement(self, node: ForStatement):
        cond = self._expr_str(node.condition) if node.condition else ""
        update = self._expr_str(node.update) if node.update else ""
        self._emit(f"For (; {cond}; {update})")
        if node.initializer:
            self.indent_level += 1
            self._emit("Init:")
            self._nested(node.initializer)
            self.indent_level -= 1
        self._nested(node.body)

    def visit_ReturnStatement(self, node: ReturnStatement):
        if node.value:
            self._emit(f"Return {self._expr_str(node.value)}")
        else:
            self._emit("Return")

    def visit_ExpressionStatement(self, node: ExpressionStatement):
        self._emit(f"Expr: {self._expr_str(node.expression)}")

    def _expr_str(self, expr: Optional[Expression]) -> str:
        """Convert expression to string representation."""
        if expr is None:
            return "<error>"
        if isinstance(expr, (IntegerLiteral, FloatLiteral)):
            return str(expr.value)
        if isinstance(expr, StringLiteral):
            return f'"{expr.value}"'
        if isinstance(expr, IdentifierExpression):
            return expr.name
        if isinstance(expr, BinaryExpression):
            return f"({self._expr_str(expr.left)} {expr.operator.value} {self._expr_str(expr.right)})"
        if isinstance(expr, UnaryExpression):
            if expr.operator in (UnaryOperator.POST_INCREMENT, UnaryOperator.POST_DECREMENT):
                return f"({self._expr_str(expr.operand)}{expr.operator.value})"
            return f"({expr.operator.value}{self._expr_str(expr.operand)})"
        if isinstance(expr, AssignmentExpression):
            return f"({expr.target} {expr.operator.value} {self._expr_str(expr.value)})"
        if isinstance(expr, CallExpression):
            args = ", ".join(self._expr_str(a) for a in expr.arguments)
            return f"{expr.function_name}({args})"
        return f"<{type(expr).__name__}>"
