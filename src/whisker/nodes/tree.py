"""Component tree nodes: literal text, tags, and the root."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from whisker._types import TagType
from whisker.delimiters import DelimiterSet
from whisker.nodes.base import Node


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Literal text between tags, emitted verbatim."""

    value: str


@dataclass(frozen=True, slots=True)
class Tag(Node):
    """A delimited directive: ``{{name}}``, ``{{#name}}...{{/name}}``, ...

    Attributes:
        type: Which directive this is.
        name: Trimmed name with the marker character removed.
        section_text: Raw body between a section's open and close tags,
            passed to lambdas bound to the section name.
        delimiters: The new delimiters for a SetDelimiter tag.
        children: Body of a section.
    """

    type: TagType
    name: str
    section_text: str | None = None
    delimiters: DelimiterSet | None = None
    children: Sequence[Node] = ()


@dataclass(frozen=True, slots=True)
class Root(Node):
    """Top of a parsed template. Carries no tag, only children."""

    children: Sequence[Node] = ()
