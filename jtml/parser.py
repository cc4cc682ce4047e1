"""Recursive-descent parser turning JTML tokens into a syntax tree.

The helpers consume tokens from the front of a ``collections.deque``.
Each one leaves the tokens it used removed and the rest in place.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from .ast import Comment, Document, Element, Node, Text, is_self_terminating_tag
from .errors import ParserError, TokenIsNotEnough, UnexpectedToken
from .lexer import Kind, Token

_LEFT_PAREN = Token(Kind.LEFT_PAREN)
_RIGHT_PAREN = Token(Kind.RIGHT_PAREN)
_LEFT_BRACKET = Token(Kind.LEFT_BRACKET)
_RIGHT_BRACKET = Token(Kind.RIGHT_BRACKET)


def expect_token(expected: Token, tokens: deque[Token]) -> None:
    """Remove the front token and check that it equals ``expected``.

    The token is removed even when it does not match.
    """
    if not tokens:
        raise TokenIsNotEnough([expected.kind])
    token = tokens.popleft()
    if token != expected:
        raise UnexpectedToken(expected.kind, token, tokens)


def parse_attribute(tokens: deque[Token]) -> tuple[str, str]:
    """Parse one ``key="value"`` attribute.

    Tokens are consumed only when the whole attribute is present.
    """
    if len(tokens) < 1:
        raise TokenIsNotEnough([Kind.IDENTIFIER])
    key_token = tokens[0]
    if key_token.kind is not Kind.IDENTIFIER:
        raise UnexpectedToken(Kind.IDENTIFIER, key_token)

    if len(tokens) < 2:
        raise TokenIsNotEnough([Kind.EQUAL])
    if tokens[1].kind is not Kind.EQUAL:
        raise UnexpectedToken(Kind.EQUAL, tokens[1])

    if len(tokens) < 3:
        raise TokenIsNotEnough([Kind.STRING_LITERAL])
    value_token = tokens[2]
    if value_token.kind is not Kind.STRING_LITERAL:
        raise UnexpectedToken(Kind.STRING_LITERAL, value_token)

    for _ in range(3):
        tokens.popleft()
    return key_token.value or "", value_token.value or ""


def parse_attributes(tokens: deque[Token]) -> list[tuple[str, str]]:
    """Parse as many attributes as follow; possibly none."""
    attributes: list[tuple[str, str]] = []
    while True:
        try:
            attributes.append(parse_attribute(tokens))
        except ParserError:
            return attributes


def parse_node(tokens: deque[Token]) -> Node:
    """Parse a text literal, a comment or an element with its children."""
    if not tokens:
        raise TokenIsNotEnough([Kind.STRING_LITERAL, Kind.COMMENT, Kind.IDENTIFIER])

    front = tokens[0]
    if front.kind is Kind.STRING_LITERAL:
        tokens.popleft()
        return Text(front.value or "")
    if front.kind is Kind.COMMENT:
        tokens.popleft()
        return Comment(front.value or "")
    if front.kind is not Kind.IDENTIFIER:
        raise UnexpectedToken(Kind.IDENTIFIER, front, tokens)

    tag_name = front.value or ""
    tokens.popleft()

    expect_token(_LEFT_PAREN, tokens)
    attributes = parse_attributes(tokens)
    expect_token(_RIGHT_PAREN, tokens)

    if is_self_terminating_tag(tag_name):
        return Element(tag_name, attributes, [])

    expect_token(_LEFT_BRACKET, tokens)
    children, _ = parse_nodes(tokens)
    expect_token(_RIGHT_BRACKET, tokens)
    return Element(tag_name, attributes, children)


def parse_nodes(tokens: deque[Token]) -> tuple[list[Node], ParserError]:
    """Parse nodes until one fails.

    Returns the nodes parsed and the error that stopped the sequence.
    """
    nodes: list[Node] = []
    while True:
        try:
            nodes.append(parse_node(tokens))
        except ParserError as error:
            return nodes, error


def parse(tokens: Iterable[Token]) -> Document:
    """Parse a whole document.

    Raises the error that stopped parsing if any tokens are left unused.
    """
    queue = tokens if isinstance(tokens, deque) else deque(tokens)
    nodes, error = parse_nodes(queue)
    if queue:
        raise error
    return Document(nodes)