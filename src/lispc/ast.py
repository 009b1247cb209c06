"""
S-Expression Abstract Syntax Tree (Source AST)
==============================================

This module defines the tree produced by the parser.

Node Hierarchy
--------------
SourceNode (base)
├── Program - root node, one per compilation
├── CallExpression - ``(callee arg*)``
└── NumberLiteral - a run of digits, always a leaf

Only Program and CallExpression have children. Every node records the
source location it was parsed from; locations do not take part in
equality, so trees built by hand compare equal to parsed ones.
"""

from dataclasses import dataclass, field
from typing import Optional

from lispc.errors import SourceLocation


# =============================================================================
# AST Node Classes
# =============================================================================

@dataclass
class SourceNode:
    """
    Base class for all source AST nodes.

    Attributes:
        location: Source location where this node appears
    """
    location: Optional[SourceLocation] = field(default=None, compare=False, kw_only=True)

    @property
    def kind(self) -> str:
        return self.__class__.__name__


@dataclass
class Program(SourceNode):
    """
    Root node holding the top-level expressions in source order.

    Attributes:
        children: Top-level expressions
    """
    children: list[SourceNode] = field(default_factory=list)


@dataclass
class CallExpression(SourceNode):
    """
    A call ``(callee arg*)``.

    Attributes:
        callee: Name of the called function
        children: Argument expressions, in order
    """
    callee: str = ""
    children: list[SourceNode] = field(default_factory=list)


@dataclass
class NumberLiteral(SourceNode):
    """
    A number literal, kept as its source text.

    Attributes:
        value: The digits exactly as written
    """
    value: str = ""


# =============================================================================
# AST Pretty Printer
# =============================================================================

class ASTPrinter:
    """
    Pretty printer for source AST debugging.

    Usage:
        printer = ASTPrinter()
        print(printer.print(program))
    """

    def __init__(self):
        self.output: list[str] = []

    def print(self, node: SourceNode) -> str:
        """Print the AST and return as string."""
        self.output = []
        pending: list[tuple[SourceNode, int]] = [(node, 0)]

        while pending:
            current, depth = pending.pop()
            self._emit(self._describe(current), depth)
            if isinstance(current, (Program, CallExpression)):
                for child in reversed(current.children):
                    pending.append((child, depth + 1))

        return "\n".join(self.output)

    def _emit(self, text: str, depth: int) -> None:
        indent = "  " * depth
        self.output.append(f"{indent}{text}")

    def _describe(self, node: SourceNode) -> str:
        if isinstance(node, Program):
            return "Program"
        if isinstance(node, CallExpression):
            return f"CallExpression {node.callee}"
        if isinstance(node, NumberLiteral):
            return f"NumberLiteral {node.value}"
        return f"<{type(node).__name__}>"
