"""Errors raised while parsing and converting JTML."""

from __future__ import annotations

from collections.abc import Iterable

from .lexer import Kind, LexerError, Token


class ParserError(Exception):
    """Base class for errors found while parsing a token stream."""


class UnexpectedToken(ParserError):
    """A token of one kind was expected but another was found.

    ``remaining`` holds the tokens left at the point of failure, when known.
    Two errors compare equal on expected kind and actual token; the remaining
    tokens only matter when both sides carry them.
    """

    def __init__(
        self,
        expected: Kind,
        actual: Token,
        remaining: Iterable[Token] | None = None,
    ) -> None:
        self.expected = expected
        self.actual = actual
        self.remaining = tuple(remaining) if remaining is not None else None
        super().__init__(expected, actual, self.remaining)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnexpectedToken):
            return NotImplemented
        if self.expected != other.expected or self.actual != other.actual:
            return False
        if self.remaining is not None and other.remaining is not None:
            return self.remaining == other.remaining
        return True

    def __hash__(self) -> int:
        return hash((UnexpectedToken, self.expected, self.actual))

    def _remaining_repr(self) -> str:
        if self.remaining is None:
            return "None"
        return "[" + ", ".join(repr(token) for token in self.remaining) + "]"

    def __repr__(self) -> str:
        return (
            f"UnexpectedToken({self.expected!r}, {self.actual!r}, "
            f"{self._remaining_repr()})"
        )

    def __str__(self) -> str:
        return (
            f"Unexpected token: expect {self.expected!r}, actual {self.actual} "
            f"state {self._remaining_repr()}"
        )


class TokenIsNotEnough(ParserError):
    """The token stream ended while one of ``expected`` was still needed."""

    def __init__(self, expected: Iterable[Kind]) -> None:
        self.expected = list(expected)
        super().__init__(self.expected)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TokenIsNotEnough):
            return NotImplemented
        return self.expected == other.expected

    def __hash__(self) -> int:
        return hash((TokenIsNotEnough, tuple(self.expected)))

    def __repr__(self) -> str:
        return f"TokenIsNotEnough({self.expected!r})"

    def __str__(self) -> str:
        return f"Token is not enough: expect {self.expected!r}"


class EmptyTokens(ParserError):
    """There were no tokens at all."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EmptyTokens):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(EmptyTokens)

    def __repr__(self) -> str:
        return "EmptyTokens"

    def __str__(self) -> str:
        return "Token is empty"


class ConversionError(Exception):
    """Conversion failed because of a lexer or parser error, kept as ``cause``."""

    def __init__(self, cause: ParserError | LexerError) -> None:
        super().__init__(cause)
        self.cause = cause

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConversionError):
            return NotImplemented
        return self.cause == other.cause

    def __hash__(self) -> int:
        return hash((ConversionError, type(self.cause)))

    def __str__(self) -> str:
        return repr(self.cause)