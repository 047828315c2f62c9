"""Section stack handling for the Whisker parser.

Open sections are mutable pending nodes. When a section's end tag arrives
its children are complete, so it is frozen into an immutable ``Tag`` on the
spot and replaces the pending node in its parent. Nesting depth therefore
costs no Python stack, however deep the template nests.

Balance errors are reported after the scan, so an unopened end tag later
in the source still wins over an earlier unclosed section.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from whisker._types import TagType
from whisker.delimiters import DelimiterSet
from whisker.environment.exceptions import UnclosedSectionError, UnopenedSectionError
from whisker.nodes import Node, Root, Tag


@dataclass(slots=True)
class PendingTag:
    """A section whose children may still grow during the scan."""

    position: int
    type: TagType
    name: str
    delimiters: DelimiterSet | None = None
    section_text: str | None = None
    children: list[Node | PendingTag] = field(default_factory=list)


class SectionStackMixin:
    """Mixin tracking open sections.

    The stack always holds the root at the bottom; ``_section_starts``
    holds, for every open section, the offset where its body begins.
    Sections closed by a differently named end tag are kept in
    ``_mismatched`` until the scan ends.

    Required Host Attributes:
        - _source: str
        - _error: method
    """

    _source: str
    _sections: list[PendingTag]
    _section_starts: list[int]
    _mismatched: list[PendingTag]

    def _init_sections(self) -> None:
        self._sections = [PendingTag(0, TagType.SECTION_BEGIN, "")]
        self._section_starts = []
        self._mismatched = []

    def _append(self, node: Node | PendingTag) -> None:
        self._sections[-1].children.append(node)

    def _push_section(self, tag: PendingTag, body_start: int) -> None:
        self._sections.append(tag)
        self._section_starts.append(body_start)

    def _pop_section(self, end_tag: Tag) -> None:
        """Close the innermost section at ``end_tag`` and freeze it."""
        if len(self._sections) == 1:
            raise self._error(UnopenedSectionError, end_tag.name, end_tag.position)
        body_start = self._section_starts.pop()
        section = self._sections.pop()
        section.section_text = self._source[body_start : end_tag.position]
        if end_tag.name != section.name:
            self._mismatched.append(section)
        # The section is the last child of its parent until it closes
        self._sections[-1].children[-1] = Tag(
            position=section.position,
            type=section.type,
            name=section.name,
            section_text=section.section_text,
            delimiters=section.delimiters,
            # The end tag has no render behaviour of its own
            children=tuple(section.children[:-1]),
        )

    def _finalize(self) -> Root:
        """Report the first unbalanced section, or return the frozen root."""
        unclosed = self._mismatched + self._sections[1:]
        if unclosed:
            first = min(unclosed, key=lambda section: section.position)
            raise self._error(UnclosedSectionError, first.name, first.position)
        return Root(position=0, children=tuple(self._sections[0].children))
