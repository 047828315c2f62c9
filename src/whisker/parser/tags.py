"""Tag content classification for the Whisker parser.

Provides the mixin that turns trimmed tag contents into a tag type and name.
"""

from __future__ import annotations

from whisker._types import MARKER_TYPES, TagType
from whisker.delimiters import DelimiterSet, parse_set_delimiter
from whisker.environment.exceptions import InvalidSetDelimiterError


class TagContentsMixin:
    """Mixin for classifying tag contents.

    Required Host Attributes:
        - _error: method
    """

    def _classify(self, contents: str, unescaped: bool) -> tuple[TagType, str]:
        """Map trimmed contents to (type, name).

        ``{{{name}}}`` arrives with ``unescaped`` set and is taken whole.
        Otherwise the first character picks the type; unmarked contents are
        a variable named by the full text.
        """
        if unescaped:
            return TagType.UNESCAPED_VARIABLE, contents
        if not contents:
            return TagType.VARIABLE, ""
        tag_type = MARKER_TYPES.get(contents[0])
        if tag_type is None:
            return TagType.VARIABLE, contents
        return tag_type, contents[1:].strip()

    def _parse_set_delimiter(self, contents: str, position: int) -> DelimiterSet:
        """Parse ``=BEGIN END=`` or raise InvalidSetDelimiterError."""
        delimiters = parse_set_delimiter(contents)
        if delimiters is None:
            raise self._error(InvalidSetDelimiterError, position)
        return delimiters
