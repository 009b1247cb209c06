"""
S-Expression Parser
===================

This module builds the source AST from the token list produced by the
lexer.

Grammar (EBNF)
--------------
program     ::= expr*
expr        ::= NUMBER | call
call        ::= '(' IDENTIFIER expr* ')'

Cursor Handling
---------------
The parser holds only the token list. The read position is an integer
passed into _parse_expression and returned alongside the node it
produced, so each call to parse() owns its cursor and repeated or
concurrent parses of the same tokens never interfere.

The grammar is parsed top-down, with the calls still awaiting their
')' held on an explicit stack instead of the Python call stack.

Example Usage
-------------
>>> from lispc.lexer import tokenize
>>> from lispc.parser import parse
>>> program = parse(tokenize("(add 1 2)"))
>>> program.children[0].callee
'add'
"""

import logging
from typing import Optional

from lispc.errors import ParseError, SourceLocation
from lispc.lexer import Token, TokenType
from lispc.ast import Program, CallExpression, NumberLiteral, SourceNode

logger = logging.getLogger(__name__)


class Parser:
    """
    Top-down parser for S-expressions.

    Attributes:
        tokens: Tokens to parse
        filename: Source filename for error reporting
        source_lines: Original source lines for error context
    """

    def __init__(
        self,
        tokens: list[Token],
        filename: str = "<input>",
        source_lines: Optional[list[str]] = None,
    ):
        self.tokens = tuple(tokens)
        self.filename = filename
        self.source_lines = source_lines or []

    def parse(self) -> Program:
        """
        Parse the whole token list into a Program.

        Raises:
            ParseError: On an unexpected token or premature end of input
        """
        children: list[SourceNode] = []
        pos = 0

        while pos < len(self.tokens):
            node, pos = self._parse_expression(pos)
            children.append(node)

        logger.debug(f"Parsed {len(children)} top-level expressions")
        return Program(
            children=children,
            location=SourceLocation(self.filename, 1, 1),
        )

    # =========================================================================
    # Grammar Rules
    # =========================================================================

    def _parse_expression(self, pos: int) -> tuple[SourceNode, int]:
        """
        Parse one expression starting at pos.

        Calls still waiting for their ')' are kept on an explicit stack,
        so nesting depth is not limited by the interpreter's call stack.

        Returns:
            The parsed node and the position of the next unread token
        """
        # (call, its opening paren) for every call not yet closed
        open_calls: list[tuple[CallExpression, Token]] = []

        while True:
            if open_calls:
                # Only ')' ends an argument list; a nested '(' opens a new call.
                call, open_paren = open_calls[-1]
                token = self._expect_token(pos, "')'", opened_by=open_paren)
                if token.is_close_paren():
                    open_calls.pop()
                    node, pos = call, pos + 1
                    if not open_calls:
                        return node, pos
                    open_calls[-1][0].children.append(node)
                    continue
            else:
                token = self._expect_token(pos, "a number or '('")

            if token.type == TokenType.NUMBER:
                node = NumberLiteral(value=token.value, location=token.location)
                pos += 1
                if not open_calls:
                    return node, pos
                open_calls[-1][0].children.append(node)
                continue

            if token.is_open_paren():
                open_calls.append((self._open_call(pos), token))
                pos += 2
                continue

            hint = None
            if token.type == TokenType.IDENTIFIER:
                hint = f"wrap the name in parentheses to call it: ({token.value} ...)"
            elif token.is_close_paren():
                hint = "remove the unmatched ')'"
            raise self._error(token, "a number or '('", hint=hint)

    def _open_call(self, pos: int) -> CallExpression:
        """Start a call with pos on its '('; the callee must follow."""
        open_paren = self.tokens[pos]

        callee = self._expect_token(pos + 1, "a function name", opened_by=open_paren)
        if callee.type != TokenType.IDENTIFIER:
            raise self._error(
                callee,
                "a function name",
                hint="a call must start with a name, e.g. (add 1 2)",
            )

        return CallExpression(callee=callee.value, location=open_paren.location)

    # =========================================================================
    # Token Access Methods
    # =========================================================================

    def _expect_token(
        self,
        pos: int,
        expected: str,
        opened_by: Optional[Token] = None,
    ) -> Token:
        """
        Return the token at pos, or raise if the token list has ended.

        Args:
            pos: Position to read
            expected: Description of what the grammar wants here
            opened_by: The '(' of the call being parsed, for the hint
        """
        if pos < len(self.tokens):
            return self.tokens[pos]

        location = None
        source_line = None
        if self.tokens:
            last = self.tokens[-1]
            location = SourceLocation(
                self.filename, last.line, last.column + len(last.value)
            )
            source_line = self._source_line(last.line)

        hint = None
        if opened_by is not None:
            hint = f"add ')' to close the call opened at {opened_by.location}"

        raise ParseError(
            None,
            expected,
            location=location,
            source_line=source_line,
            hint=hint,
        )

    def _error(self, token: Token, expected: str, hint: Optional[str] = None) -> ParseError:
        return ParseError(
            token.value,
            expected,
            location=token.location,
            source_line=self._source_line(token.line),
            hint=hint,
        )

    def _source_line(self, line: int) -> Optional[str]:
        if 1 <= line <= len(self.source_lines):
            return self.source_lines[line - 1]
        return None


# =============================================================================
# Convenience Function
# =============================================================================

def parse(
    tokens: list[Token],
    filename: str = "<input>",
    source_lines: Optional[list[str]] = None,
) -> Program:
    """Parse tokens into a source AST."""
    return Parser(tokens, filename, source_lines).parse()
