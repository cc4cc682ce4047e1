"""Tokenizer for JTML source text."""

from __future__ import annotations

import enum
import json
import re
from collections.abc import Iterator
from dataclasses import dataclass


class Kind(enum.Enum):
    """The kinds of token the lexer can produce."""

    STRING_LITERAL = "StringLiteral"
    COMMENT = "Comment"
    IDENTIFIER = "Identifier"
    LEFT_BRACKET = "LeftBracket"
    RIGHT_BRACKET = "RightBracket"
    LEFT_PAREN = "LeftParen"
    RIGHT_PAREN = "RightParen"
    EQUAL = "Equal"
    WHITESPACE = "Whitespace"

    def __repr__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Token:
    """A single lexical token; ``value`` is set for text-carrying kinds only."""

    kind: Kind
    value: str | None = None

    def __str__(self) -> str:
        match self.kind:
            case Kind.STRING_LITERAL:
                return f"Text({self.value})"
            case Kind.COMMENT:
                return f"Comment({self.value})"
            case Kind.IDENTIFIER:
                return f"Id({self.value})"
            case Kind.LEFT_BRACKET:
                return "LeftBracket '{'"
            case Kind.RIGHT_BRACKET:
                return "RightBracket '}'"
            case Kind.LEFT_PAREN:
                return "LeftBrace '('"
            case Kind.RIGHT_PAREN:
                return "RightBrace ')'"
            case Kind.EQUAL:
                return "Equal '='"
            case _:
                return ""

    def __repr__(self) -> str:
        if self.value is None:
            return self.kind.value
        return f"{self.kind.value}({json.dumps(self.value, ensure_ascii=False)})"


class LexerError(Exception):
    """Raised when the input holds text that forms no valid token."""

    def __init__(self, text: str) -> None:
        super().__init__(text)
        self.text = text

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LexerError):
            return NotImplemented
        return self.text == other.text

    def __hash__(self) -> int:
        return hash((LexerError, self.text))

    def __repr__(self) -> str:
        return f"InvalidToken({json.dumps(self.text, ensure_ascii=False)})"

    def __str__(self) -> str:
        return repr(self)


_TOKEN_PATTERN = re.compile(
    r'(?P<string>"(?:[^"\\]|\\[tun"])*")'
    r"|(?P<comment>//[^\n]*)"
    r"|(?P<identifier>[0-9A-Za-z\-]+)"
    r"|(?P<punct>[{}()=])"
    r"|(?P<space>\s+)"
)

# The longest prefix an unterminated string literal can reach before failing.
_STRING_PREFIX = re.compile(r'"(?:[^"\\]|\\[tun"])*\\?')

_PUNCTUATION = {
    "{": Kind.LEFT_BRACKET,
    "}": Kind.RIGHT_BRACKET,
    "(": Kind.LEFT_PAREN,
    ")": Kind.RIGHT_PAREN,
    "=": Kind.EQUAL,
}


def _comment_text(raw: str) -> str:
    text = raw[2:]
    while text.startswith("//"):
        text = text[2:]
    return text.lstrip(" ")


def _invalid_slice(text: str, pos: int) -> str:
    if text[pos] == '"':
        prefix = _STRING_PREFIX.match(text, pos)
        if prefix:
            return prefix.group()
    return text[pos]


def _iter_tokens(text: str) -> Iterator[Token]:
    pos = 0
    while pos < len(text):
        match = _TOKEN_PATTERN.match(text, pos)
        if match is None:
            raise LexerError(_invalid_slice(text, pos))
        pos = match.end()
        group = match.lastgroup
        lexeme = match.group()
        if group == "string":
            yield Token(Kind.STRING_LITERAL, lexeme.strip('"'))
        elif group == "comment":
            yield Token(Kind.COMMENT, _comment_text(lexeme))
        elif group == "identifier":
            yield Token(Kind.IDENTIFIER, lexeme)
        elif group == "punct":
            yield Token(_PUNCTUATION[lexeme])


def tokenize(text: str) -> list[Token]:
    """Split ``text`` into tokens, skipping whitespace.

    Raises LexerError carrying the offending slice of input.
    """
    return list(_iter_tokens(text))