"""
C-Style Target Abstract Syntax Tree
===================================

This module defines the tree produced by the transformer and consumed by
the code generator.

Node Hierarchy
--------------
CNode (base)
├── Program - root, a list of statements
├── Statement
│   └── ExpressionStatement - an expression followed by ';'
└── Expression
    ├── CallExpression - ``callee(arguments)``
    ├── Identifier - a bare name
    └── NumberLiteral - integer literal text

Each node is owned by exactly one parent; there are no shared or back
references.
"""

from dataclasses import dataclass, field


# =============================================================================
# AST Node Base Classes
# =============================================================================

@dataclass
class CNode:
    """Base class for all target AST nodes."""

    @property
    def kind(self) -> str:
        return self.__class__.__name__


@dataclass
class Statement(CNode):
    """Base class for statements, the entries of a Program body."""
    pass


@dataclass
class Expression(CNode):
    """Base class for expressions, which render to a value."""
    pass


# =============================================================================
# Expression Nodes
# =============================================================================

@dataclass
class Identifier(Expression):
    name: str


@dataclass
class NumberLiteral(Expression):
    """
    Integer literal.

    The value is the source text; the code generator emits it verbatim.
    """
    value: str


@dataclass
class CallExpression(Expression):
    """
    Function call.

    Attributes:
        callee: The function being called
        arguments: Argument expressions, in order
    """
    callee: Identifier
    arguments: list[Expression] = field(default_factory=list)


# =============================================================================
# Statement and Program Nodes
# =============================================================================

@dataclass
class ExpressionStatement(Statement):
    expression: Expression


@dataclass
class Program(CNode):
    """
    Root node of the target tree.

    Attributes:
        body: Statements in output order
    """
    body: list[Statement] = field(default_factory=list)


# =============================================================================
# AST Pretty Printer
# =============================================================================

class CASTPrinter:
    """
    Pretty printer for target AST debugging.

    Usage:
        printer = CASTPrinter()
        print(printer.print(c_program))
    """

    def __init__(self):
        self.output: list[str] = []

    def print(self, node: CNode) -> str:
        """Print the AST and return as string."""
        self.output = []
        pending: list[tuple[CNode, int]] = [(node, 0)]

        while pending:
            current, depth = pending.pop()
            text, children = self._describe(current)
            self._emit(text, depth)
            for child in reversed(children):
                pending.append((child, depth + 1))

        return "\n".join(self.output)

    def _emit(self, text: str, depth: int) -> None:
        indent = "  " * depth
        self.output.append(f"{indent}{text}")

    def _describe(self, node: CNode) -> tuple[str, list[CNode]]:
        """Return the line for node and the children to print beneath it."""
        if isinstance(node, Program):
            return "Program", node.body
        if isinstance(node, ExpressionStatement):
            return "ExpressionStatement", [node.expression]
        if isinstance(node, CallExpression):
            return "CallExpression", [node.callee, *node.arguments]
        if isinstance(node, Identifier):
            return f"Identifier {node.name}", []
        if isinstance(node, NumberLiteral):
            return f"NumberLiteral {node.value}", []
        return f"<{type(node).__name__}>", []
