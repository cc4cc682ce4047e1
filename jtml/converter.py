"""High-level entry points: JTML to HTML, and JTML reformatting."""

from __future__ import annotations

from .ast import Document
from .errors import ConversionError, ParserError
from .lexer import LexerError, tokenize
from .parser import parse


def _parse_document(text: str) -> Document:
    try:
        tokens = tokenize(text)
    except LexerError as error:
        raise ConversionError(error) from error
    try:
        return parse(tokens)
    except ParserError as error:
        raise ConversionError(error) from error


def convert(jtml: str, ignore_comment: bool = False) -> str:
    """Render JTML source as HTML.

    Comments become HTML comments unless ``ignore_comment`` is true.
    Raises ConversionError if the source cannot be tokenized or parsed.
    """
    return _parse_document(jtml).to_html(ignore_comment)


def format_jtml(text: str) -> str:
    """Return JTML source re-printed in canonical, indented form.

    Raises ConversionError if the source cannot be tokenized or parsed.
    """
    return _parse_document(text).to_jtml(False)