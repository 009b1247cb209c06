"""
lispc Command-Line Interface
============================

This package provides the ``lispc`` command-line tool, a Click-based
front end to the transpiler with debugging dumps of each stage.
"""

__all__ = ["lispc"]
