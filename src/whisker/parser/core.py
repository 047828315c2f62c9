"""Whisker parser: template text to component tree in one forward scan."""

from __future__ import annotations

import logging

from whisker._types import TagType
from whisker.delimiters import DEFAULT_DELIMITERS, DelimiterSet
from whisker.environment.exceptions import TemplateSyntaxError, UnclosedTagError
from whisker.nodes import Root, Tag, Text
from whisker.parser.sections import PendingTag, SectionStackMixin
from whisker.parser.tags import TagContentsMixin

logger = logging.getLogger(__name__)

_UNESCAPED_END = "}}}"


class Parser(SectionStackMixin, TagContentsMixin):
    """Scan template source into an immutable ``Root``.

    The scan runs left to right with the active delimiter set, which a
    set-delimiter tag may replace part way through. Calling ``parse`` again
    rescans the source from a clean section stack.

    Example:
            >>> root = Parser("Hi {{name}}").parse()
            >>> [type(child).__name__ for child in root.children]
            ['Text', 'Tag']

    Raises:
        UnclosedTagError: A begin marker has no matching end marker.
        InvalidSetDelimiterError: A ``{{=...=}}`` tag is malformed.
        UnopenedSectionError: ``{{/name}}`` with no open section.
        UnclosedSectionError: A section is not closed by its own end tag.

    """

    def __init__(
        self,
        source: str,
        *,
        delimiters: DelimiterSet = DEFAULT_DELIMITERS,
        name: str | None = None,
    ):
        self._source = source
        self._delimiters = delimiters
        self._name = name

    def parse(self) -> Root:
        self._init_sections()
        source = self._source
        size = len(source)
        delimiters = self._delimiters
        # {{{name}}} is only recognised while the braces are in effect
        brace_shorthand = delimiters.is_default()

        position = 0
        while position != size:
            tag_start = source.find(delimiters.begin, position)
            if tag_start == -1:
                self._append(Text(position, source[position:]))
                break
            if tag_start != position:
                self._append(Text(position, source[position:tag_start]))

            contents_start = tag_start + len(delimiters.begin)
            unescaped = brace_shorthand and source.startswith(delimiters.begin[0], contents_start)
            end_marker = _UNESCAPED_END if unescaped else delimiters.end
            if unescaped:
                contents_start += 1
            tag_end = source.find(end_marker, contents_start)
            if tag_end == -1:
                raise self._error(UnclosedTagError, tag_start)

            contents = source[contents_start:tag_end].strip()
            if contents.startswith("="):
                delimiters = self._parse_set_delimiter(contents, tag_start)
                brace_shorthand = delimiters.is_default()
                tag: Tag | PendingTag = Tag(
                    tag_start, TagType.SET_DELIMITER, "", delimiters=delimiters
                )
            else:
                tag_type, name = self._classify(contents, unescaped)
                if tag_type.opens_section:
                    tag = PendingTag(tag_start, tag_type, name)
                else:
                    tag = Tag(tag_start, tag_type, name)
            self._append(tag)

            position = tag_end + len(end_marker)
            if isinstance(tag, PendingTag):
                self._push_section(tag, position)
            elif tag.type is TagType.SECTION_END:
                self._pop_section(tag)

        root = self._finalize()
        logger.debug(
            "Parsed %s (%d chars, %d top-level nodes)",
            self._name or "<template>",
            size,
            len(root.children),
        )
        return root

    def _error(self, error_cls: type[TemplateSyntaxError], *args: object) -> TemplateSyntaxError:
        """Build ``error_cls`` with this template's name and source attached."""
        return error_cls(*args, name=self._name, source=self._source)


def parse(
    source: str,
    *,
    delimiters: DelimiterSet = DEFAULT_DELIMITERS,
    name: str | None = None,
) -> Root:
    """Parse ``source`` into a component tree.

    Raises:
        TemplateSyntaxError: If the source is malformed.
    """
    return Parser(source, delimiters=delimiters, name=name).parse()
