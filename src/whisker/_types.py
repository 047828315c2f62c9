"""Enumerations shared by the Whisker parser and renderer."""

from __future__ import annotations

from enum import Enum


class TagType(Enum):
    """Kinds of tag, keyed by the marker character that introduces them.

    Variable tags have no marker; set-delimiter tags are recognised by a
    leading and trailing ``=`` before this table is consulted.
    """

    VARIABLE = "variable"
    UNESCAPED_VARIABLE = "&"
    SECTION_BEGIN = "#"
    SECTION_END = "/"
    SECTION_BEGIN_INVERTED = "^"
    COMMENT = "!"
    PARTIAL = ">"
    SET_DELIMITER = "="

    @property
    def opens_section(self) -> bool:
        return self is TagType.SECTION_BEGIN or self is TagType.SECTION_BEGIN_INVERTED


# First content character -> tag type
MARKER_TYPES: dict[str, TagType] = {
    "#": TagType.SECTION_BEGIN,
    "^": TagType.SECTION_BEGIN_INVERTED,
    "/": TagType.SECTION_END,
    ">": TagType.PARTIAL,
    "&": TagType.UNESCAPED_VARIABLE,
    "!": TagType.COMMENT,
}


class WalkControl(Enum):
    """Result of visiting one node during a tree walk.

    CONTINUE descends into the node's children and moves on; SKIP moves on
    without descending (the visitor handled the children itself); STOP
    abandons the rest of the walk.
    """

    CONTINUE = "continue"
    SKIP = "skip"
    STOP = "stop"
