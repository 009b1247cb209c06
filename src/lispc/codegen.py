"""
C-Style Code Generator
======================

This module renders the target AST (lispc.c_ast) as text.

Rendering Rules
---------------
| Node                | Output                                 |
|---------------------|----------------------------------------|
| Program             | statements joined by newlines          |
| ExpressionStatement | expression followed by ';'             |
| CallExpression      | ``callee(arg1, arg2, ...)``            |
| Identifier          | the name                               |
| NumberLiteral       | the literal text, verbatim             |

An empty Program renders as the empty string.
"""

from lispc.c_ast import (
    CNode,
    Program,
    ExpressionStatement,
    CallExpression,
    Identifier,
    NumberLiteral,
)
from lispc.errors import CodeGenError


class CodeGenerator:
    """
    Generates C-style source text from a target AST.

    Usage:
        generator = CodeGenerator()
        text = generator.generate(c_program)
    """

    def generate(self, node: CNode) -> str:
        """
        Render node and its subtree.

        Nodes are rendered bottom-up from an explicit stack, so nesting
        depth is not limited by the interpreter's call stack.

        Raises:
            CodeGenError: If an unrecognized node type is encountered
        """
        rendered: list[str] = []
        # (node, children already rendered)
        pending: list[tuple[CNode, bool]] = [(node, False)]

        while pending:
            current, expanded = pending.pop()

            if isinstance(current, Identifier):
                rendered.append(current.name)
                continue
            if isinstance(current, NumberLiteral):
                rendered.append(current.value)
                continue

            children = self._children(current)
            if not expanded:
                pending.append((current, True))
                for child in reversed(children):
                    pending.append((child, False))
                continue

            split = len(rendered) - len(children)
            parts = rendered[split:]
            del rendered[split:]
            rendered.append(self._render(current, parts))

        return rendered[0]

    def _children(self, node: CNode) -> list[CNode]:
        if isinstance(node, Program):
            return node.body
        if isinstance(node, ExpressionStatement):
            return [node.expression]
        if isinstance(node, CallExpression):
            return [node.callee, *node.arguments]
        raise CodeGenError(type(node).__name__)

    def _render(self, node: CNode, parts: list[str]) -> str:
        """Render node given the text of its children, in order."""
        if isinstance(node, Program):
            return "\n".join(parts)
        if isinstance(node, ExpressionStatement):
            return f"{parts[0]};"
        callee, args = parts[0], parts[1:]
        return f"{callee}({', '.join(args)})"


def generate(node: CNode) -> str:
    """Render a target AST as text."""
    return CodeGenerator().generate(node)
