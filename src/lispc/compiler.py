"""
lispc Compiler Main Module
==========================

This module provides the main compiler interface. It runs the complete
pipeline:

    Source → Lex → Parse → Transform → Generate → C-style calls

Usage
-----
Command line:
    $ lispc program.lisp -o program.c

Programmatic:
    >>> from lispc import compile_lisp
    >>> compile_lisp("(add 1 (subtract 2 3))")
    'add(1, subtract(2, 3));'

Error Handling
--------------
The first failing stage aborts the compilation. Its CompileError
propagates to the caller unchanged and no partial output is produced.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from lispc import ast, c_ast
from lispc.lexer import Lexer, Token
from lispc.parser import Parser
from lispc.transformer import Transformer
from lispc.codegen import CodeGenerator

logger = logging.getLogger(__name__)


@dataclass
class CompilerOptions:
    """
    Compiler configuration options.

    Attributes:
        trailing_newline: Append a final newline to non-empty output.
                          Used when the output is written to a file.
        keep_intermediates: Keep the token list and both trees on the
                            CompilerResult for inspection.
    """
    trailing_newline: bool = False
    keep_intermediates: bool = True


@dataclass
class CompilerResult:
    """
    Result of a compilation.

    Attributes:
        filename: Source filename
        success: True if compilation succeeded
        output: Generated C-style text
        tokens: Token list (if keep_intermediates)
        token_count: Number of tokens lexed
        source_ast: S-expression tree (if keep_intermediates)
        target_ast: C-style tree (if keep_intermediates)
    """
    filename: str = ""
    success: bool = False
    output: str = ""
    tokens: list[Token] = field(default_factory=list)
    token_count: int = 0
    source_ast: Optional[ast.Program] = None
    target_ast: Optional[c_ast.Program] = None


class LispCompiler:
    """
    S-expression to C-call compiler.

    Example:
        compiler = LispCompiler()
        result = compiler.compile_source("(add 1 2)")
        print(result.output)

    Attributes:
        options: Compiler configuration options
    """

    def __init__(self, options: Optional[CompilerOptions] = None):
        self.options = options or CompilerOptions()

    def compile_source(self, source: str, filename: str = "<input>") -> CompilerResult:
        """
        Compile S-expression source text.

        Args:
            source: Source text
            filename: Source filename for error messages

        Returns:
            CompilerResult with the generated output

        Raises:
            CompileError: If any stage fails
        """
        result = CompilerResult(filename=filename)

        # Stage 1: Lexical analysis
        tokens = self._lex(source, filename)
        result.token_count = len(tokens)

        # Stage 2: Parsing
        source_ast = self._parse(tokens, filename, source.splitlines())

        # Stage 3: Lowering to the C-style tree
        target_ast = self._transform(source_ast)

        # Stage 4: Code generation
        output = self._generate(target_ast)
        if self.options.trailing_newline and output:
            output += "\n"

        result.output = output
        result.success = True
        if self.options.keep_intermediates:
            result.tokens = tokens
            result.source_ast = source_ast
            result.target_ast = target_ast

        logger.debug(f"Compiled {filename}: {result.token_count} tokens, {len(output)} bytes")
        return result

    def compile_file(self, filepath: str) -> CompilerResult:
        """
        Compile an S-expression source file.

        Raises:
            CompileError: If any stage fails
            FileNotFoundError: If source file not found
        """
        path = Path(filepath)
        if not path.exists():
            raise FileNotFoundError(f"Source file not found: {filepath}")

        source = path.read_text(encoding="utf-8")
        return self.compile_source(source, str(filepath))

    def _lex(self, source: str, filename: str) -> list[Token]:
        tokens = list(Lexer(source, filename).tokenize())
        logger.debug(f"Lexed {len(tokens)} tokens from {filename}")
        return tokens

    def _parse(self, tokens: list[Token], filename: str, source_lines: list[str]) -> ast.Program:
        return Parser(tokens, filename, source_lines).parse()

    def _transform(self, program: ast.Program) -> c_ast.Program:
        return Transformer().transform(program)

    def _generate(self, program: c_ast.Program) -> str:
        return CodeGenerator().generate(program)


# =============================================================================
# Convenience Function
# =============================================================================

def compile_lisp(source: str, filename: str = "<input>") -> str:
    """
    Compile S-expression source text to C-style call statements.

    Raises:
        CompileError: If any stage fails
    """
    return LispCompiler().compile_source(source, filename).output
