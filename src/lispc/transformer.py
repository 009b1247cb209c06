"""
Source-to-Target AST Transformer
================================

This module lowers the S-expression tree (lispc.ast) into the C-style
tree (lispc.c_ast) in a single depth-first, pre-order traversal.

Visitor Protocol
----------------
Each source node class has exactly one visitor in a closed dispatch
table. A visitor implements:

    enter(node, parent, context) -> new context or None
    leave(node, parent, context) -> None

``enter`` runs before the node's children are visited and ``leave``
after them. The context is the target node that new nodes attach to:
the target Program for top-level expressions, or the target
CallExpression whose arguments are being built. The context returned by
``enter`` is handed to the node's children.

Attachment Rules
----------------
- A call whose source parent is a call becomes an argument of the
  parent's target call.
- A call whose source parent is the Program is wrapped in an
  ExpressionStatement and appended to the Program body.
- A number literal is always an argument. One directly under the Program
  has nothing to attach to and raises TransformError.
"""

import logging
from typing import Optional, Union

from lispc import ast, c_ast
from lispc.errors import TransformError

logger = logging.getLogger(__name__)


# Target node that receives the nodes built for a source node's children
Context = Union[c_ast.Program, c_ast.CallExpression]


# =============================================================================
# Visitors
# =============================================================================

class NodeVisitor:
    """Enter/leave hooks for one source node class."""

    def enter(
        self,
        node: ast.SourceNode,
        parent: Optional[ast.SourceNode],
        context: Optional[Context],
    ) -> Optional[Context]:
        raise NotImplementedError

    def leave(
        self,
        node: ast.SourceNode,
        parent: Optional[ast.SourceNode],
        context: Optional[Context],
    ) -> None:
        pass


class ProgramVisitor(NodeVisitor):

    def enter(self, node, parent, context):
        if parent is not None:
            raise TransformError(
                f"Program nested inside {parent.kind}",
                kind=node.kind,
                location=node.location,
            )
        return c_ast.Program(body=[])


class CallExpressionVisitor(NodeVisitor):

    def enter(self, node, parent, context):
        call = c_ast.CallExpression(
            callee=c_ast.Identifier(name=node.callee),
            arguments=[],
        )

        # Attachment depends on the source parent, not on the call itself
        if isinstance(parent, ast.CallExpression):
            context.arguments.append(call)
        else:
            context.body.append(c_ast.ExpressionStatement(expression=call))

        return call


class NumberLiteralVisitor(NodeVisitor):

    def enter(self, node, parent, context):
        if not isinstance(context, c_ast.CallExpression):
            raise TransformError(
                f"number literal '{node.value}' is not a valid top-level statement",
                kind=node.kind,
                location=node.location,
                hint=f"use it as an argument, e.g. (print {node.value})",
            )
        context.arguments.append(c_ast.NumberLiteral(value=node.value))
        return None


# Closed dispatch table: one visitor per source node class
VISITORS: dict[type, NodeVisitor] = {
    ast.Program: ProgramVisitor(),
    ast.CallExpression: CallExpressionVisitor(),
    ast.NumberLiteral: NumberLiteralVisitor(),
}


# =============================================================================
# Traversal
# =============================================================================

class Transformer:
    """
    Lowers a source Program into a target Program.

    Usage:
        target = Transformer().transform(program)

    ``visitors`` replaces the visitor instances, e.g. to wrap them for
    tracing in tests. The table must still cover exactly the three
    source node classes.
    """

    def __init__(self, visitors: Optional[dict[type, NodeVisitor]] = None):
        if visitors is None:
            visitors = VISITORS
        elif set(visitors) != set(VISITORS):
            names = sorted(cls.__name__ for cls in visitors)
            raise ValueError(
                f"visitor table must cover exactly Program, CallExpression "
                f"and NumberLiteral, got {names}"
            )
        self.visitors = visitors

    def transform(self, program: ast.Program) -> c_ast.Program:
        """
        Transform a source AST into a target AST.

        Raises:
            TransformError: If the tree cannot be lowered
        """
        if not isinstance(program, ast.Program):
            raise TransformError(
                f"expected a Program at the root, got {type(program).__name__}",
                kind=type(program).__name__,
                location=getattr(program, "location", None),
            )

        target = self._traverse(program)
        logger.debug(f"Transformed {len(target.body)} top-level statements")
        return target

    def _traverse(self, root: ast.SourceNode) -> Optional[Context]:
        """
        Visit root and its subtree in pre-order.

        Pending work is kept on an explicit stack: an enter item runs the
        visitor's enter hook and schedules the node's leave hook beneath
        its children, so leave fires once the whole subtree is done.

        Returns:
            The context produced by entering root
        """
        root_context = None
        # (is_leave, node, parent, context)
        stack: list[tuple[bool, ast.SourceNode, Optional[ast.SourceNode], Optional[Context]]] = [
            (False, root, None, None),
        ]

        while stack:
            is_leave, node, parent, context = stack.pop()
            visitor = self._visitor_for(node)

            if is_leave:
                visitor.leave(node, parent, context)
                continue

            child_context = visitor.enter(node, parent, context)
            if node is root:
                root_context = child_context

            stack.append((True, node, parent, context))
            if isinstance(node, (ast.Program, ast.CallExpression)):
                for child in reversed(node.children):
                    stack.append((False, child, node, child_context))

        return root_context

    def _visitor_for(self, node: ast.SourceNode) -> NodeVisitor:
        visitor = self.visitors.get(type(node))
        if visitor is None:
            raise TransformError(
                f"no visitor for node type '{type(node).__name__}'",
                kind=type(node).__name__,
                location=getattr(node, "location", None),
            )
        return visitor


# =============================================================================
# Convenience Function
# =============================================================================

def transform(program: ast.Program) -> c_ast.Program:
    """Transform a source AST into a target AST."""
    return Transformer().transform(program)
