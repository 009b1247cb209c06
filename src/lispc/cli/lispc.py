"""
lispc - S-Expression Compiler Command-Line Interface
====================================================

Usage Examples
--------------
Compile a file to stdout:
    $ lispc program.lisp

With output file:
    $ lispc program.lisp -o program.c

Inline source:
    $ lispc -e "(add 1 (subtract 2 3))"

From stdin:
    $ echo "(add 1 2)" | lispc

Inspect a stage:
    $ lispc --tokens -e "(add 1 2)"
    $ lispc --ast -e "(add 1 2)"
    $ lispc --c-ast -e "(add 1 2)"
"""

import logging
from pathlib import Path
from typing import Optional

import click

from lispc import __version__
from lispc.compiler import LispCompiler, CompilerOptions
from lispc.lexer import tokenize
from lispc.parser import parse
from lispc.ast import ASTPrinter
from lispc.c_ast import CASTPrinter
from lispc.cli.errors import handle_cli_exception

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


def read_source(input_file: Optional[Path], expr: Optional[str]) -> tuple[str, str]:
    """
    Pick the source text from the file, the -e option or stdin.

    Returns:
        Tuple of (source, filename used in error messages)
    """
    if input_file is not None and expr is not None:
        raise click.BadParameter("give either INPUT_FILE or --expr, not both")
    if expr is not None:
        return expr, "<expr>"
    if input_file is not None:
        return input_file.read_text(encoding="utf-8"), str(input_file)
    with click.open_file("-") as stream:
        return stream.read(), "<stdin>"


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    required=False,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-e", "--expr",
    help="Compile this source text instead of a file",
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write output to this file (default: stdout)",
)
@click.option(
    "--tokens",
    is_flag=True,
    help="Print the token list and exit",
)
@click.option(
    "--ast",
    is_flag=True,
    help="Print the S-expression tree and exit",
)
@click.option(
    "--c-ast",
    "c_ast",
    is_flag=True,
    help="Print the C-style tree and exit",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="lispc")
def main(
    input_file: Optional[Path],
    expr: Optional[str],
    output: Optional[Path],
    tokens: bool,
    ast: bool,
    c_ast: bool,
    verbose: bool,
) -> None:
    """
    Compile S-expressions into C-style function calls.

    INPUT_FILE is the source file to compile. Without it, the source is
    taken from --expr or read from stdin.

    \b
    Examples:
        lispc program.lisp               # Print to stdout
        lispc program.lisp -o out.c      # Write to a file
        lispc -e "(add 1 2)"             # Compile inline source
        lispc --ast -e "(add 1 2)"       # Dump the S-expression tree
    """
    setup_logging(verbose)

    try:
        source, filename = read_source(input_file, expr)

        if tokens:
            for token in tokenize(source, filename):
                click.echo(repr(token))
            return

        if ast:
            program = parse(tokenize(source, filename), filename, source.splitlines())
            click.echo(ASTPrinter().print(program))
            return

        options = CompilerOptions(trailing_newline=output is not None)
        result = LispCompiler(options).compile_source(source, filename)

        if c_ast:
            click.echo(CASTPrinter().print(result.target_ast))
            return

        if output is not None:
            output.write_text(result.output, encoding="utf-8")
            logger.info(f"Wrote {len(result.output)} bytes to {output}")
        elif result.output:
            click.echo(result.output)

    except Exception as e:
        handle_cli_exception(e, verbose=verbose)


if __name__ == "__main__":
    main()
