"""
lispc - S-Expression to C-Call Transpiler
=========================================

This package compiles a small S-expression language into C-style
function-call statements, showing the four classic compiler stages on a
deliberately small grammar.

Pipeline
--------
    Source → Lexer → Parser → Transformer → Code Generator → Output

- **lexer**: text to tokens (parens, numbers, identifiers)
- **parser**: tokens to the S-expression tree (lispc.ast)
- **transformer**: S-expression tree to C-style tree (lispc.c_ast)
- **codegen**: C-style tree to text

Usage
-----
>>> from lispc import compile_lisp
>>> print(compile_lisp("(add 1 2)\\n(subtract 3 4)"))
add(1, 2);
subtract(3, 4);

Or use the command-line tool:
    $ lispc -e "(add 1 (subtract 2 3))"
    add(1, subtract(2, 3));
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from lispc.errors import (
    LispcError,
    SourceLocation,
    CompileError,
    LexError,
    ParseError,
    TransformError,
    CodeGenError,
)
from lispc.lexer import Lexer, Token, TokenType, tokenize
from lispc.parser import Parser, parse
from lispc.transformer import Transformer, transform
from lispc.codegen import CodeGenerator, generate
from lispc.compiler import (
    LispCompiler,
    CompilerOptions,
    CompilerResult,
    compile_lisp,
)

__all__ = [
    "__version__",
    # Errors
    "LispcError",
    "SourceLocation",
    "CompileError",
    "LexError",
    "ParseError",
    "TransformError",
    "CodeGenError",
    # Stages
    "Lexer",
    "Token",
    "TokenType",
    "tokenize",
    "Parser",
    "parse",
    "Transformer",
    "transform",
    "CodeGenerator",
    "generate",
    # Driver
    "LispCompiler",
    "CompilerOptions",
    "CompilerResult",
    "compile_lisp",
]
