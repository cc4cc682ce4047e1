"""Syntax tree for JTML documents and its HTML and JTML renderings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

_INDENT = "    "

_SELF_TERMINATING_TAGS = frozenset(
    {
        "br",
        "hr",
        "img",
        "input",
        "meta",
        "area",
        "base",
        "col",
        "embed",
        "keygen",
        "link",
        "param",
        "source",
    }
)


def is_self_terminating_tag(tag_name: str) -> bool:
    """Return True if ``tag_name`` is an HTML void element with no children."""
    return tag_name in _SELF_TERMINATING_TAGS


@dataclass(frozen=True)
class Text:
    """A run of literal text."""

    text: str

    def to_html(self, ignore_comment: bool = False) -> str:
        return self.text

    def to_jtml(self, ignore_comment: bool = False, indent_depth: int = 0) -> str:
        return f'{_INDENT * indent_depth}"{self.text}"'


@dataclass(frozen=True)
class Comment:
    """A line comment."""

    text: str

    def to_html(self, ignore_comment: bool = False) -> str:
        if ignore_comment:
            return ""
        return f"<!--{self.text}-->"

    def to_jtml(self, ignore_comment: bool = False, indent_depth: int = 0) -> str:
        if ignore_comment:
            return ""
        return f"{_INDENT * indent_depth}// {self.text}"


Node = Union["Element", Text, Comment]


def _attributes_text(attributes: list[tuple[str, str]]) -> str:
    return " ".join(f'{key}="{value}"' for key, value in attributes)


@dataclass
class Element:
    """An element with a tag name, ordered attributes and child nodes."""

    tag_name: str
    attributes: list[tuple[str, str]] = field(default_factory=list)
    children: list[Node] = field(default_factory=list)

    def to_html(self, ignore_comment: bool = False) -> str:
        attributes = _attributes_text(self.attributes)
        if attributes:
            attributes = " " + attributes
        if is_self_terminating_tag(self.tag_name):
            return f"<{self.tag_name}{attributes}/>"
        inner = "".join(child.to_html(ignore_comment) for child in self.children)
        return f"<{self.tag_name}{attributes}>{inner}</{self.tag_name}>"

    def to_jtml(self, ignore_comment: bool = False, indent_depth: int = 0) -> str:
        indent = _INDENT * indent_depth
        head = f"{indent}{self.tag_name}({_attributes_text(self.attributes)})"
        if is_self_terminating_tag(self.tag_name):
            return head
        body = ""
        if self.children:
            body = "\n" + "\n".join(
                child.to_jtml(ignore_comment, indent_depth + 1)
                for child in self.children
            )
        return f"{head}{{{body}\n{indent}}}"


@dataclass
class Document:
    """The top-level sequence of nodes."""

    elements: list[Node] = field(default_factory=list)

    def to_html(self, ignore_comment: bool = False) -> str:
        return "".join(node.to_html(ignore_comment) for node in self.elements)

    def to_jtml(self, ignore_comment: bool = False) -> str:
        return "\n".join(node.to_jtml(ignore_comment, 0) for node in self.elements)