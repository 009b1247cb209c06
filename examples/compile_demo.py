#!/usr/bin/env python3
"""
lispc Compilation Demo
======================

Compiles a few S-expression programs and prints each stage's result.

Usage:
    python examples/compile_demo.py
"""

from lispc import LispCompiler, CompileError
from lispc.ast import ASTPrinter


PROGRAMS = [
    "(add 1 (subtract 2 3))",
    "(add 1 2)\n(subtract 3 4)",
    "(add 1",
]


def main():
    compiler = LispCompiler()

    for source in PROGRAMS:
        print(f"Input:\n{source}")
        try:
            result = compiler.compile_source(source, "<demo>")
        except CompileError as e:
            print(f"Failed:\n{e}\n")
            continue

        print(f"Tree:\n{ASTPrinter().print(result.source_ast)}")
        print(f"Output:\n{result.output}\n")


if __name__ == "__main__":
    main()
