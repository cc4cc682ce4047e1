"""Lexer, parser, HTML converter, formatter and command-line tools for the JTML markup language."""

__version__ = "0.1.0"
__all__ = ["ast", "cli", "converter", "errors", "lexer", "parser"]