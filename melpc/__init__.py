"""Lexer, syntax tree classes and LLVM IR generator for the MELP language."""

__version__ = "0.1.0"