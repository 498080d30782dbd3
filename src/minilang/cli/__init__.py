"""
Minilang Command-Line Interface
===============================

This package provides the command-line tools for Minilang:

- **mlscan**: scan a source file and print the lexical report

Each tool is implemented as a Click-based CLI application.
"""

__all__ = ["mlscan"]
