"""Tag delimiters.

Templates start with ``{{`` / ``}}``. A set-delimiter tag swaps them for
the rest of the scan::

    {{=<% %>=}} Hello, <%name%>! <%={{ }}=%> back to braces

``DelimiterSet`` is immutable; a change produces a new set, which the
parser keeps as the snapshot on the SetDelimiter node.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_BEGIN = "{{"
DEFAULT_END = "}}"


@dataclass(frozen=True, slots=True)
class DelimiterSet:
    """Open/close markers recognised as tag boundaries."""

    begin: str = DEFAULT_BEGIN
    end: str = DEFAULT_END

    def is_default(self) -> bool:
        return self.begin == DEFAULT_BEGIN and self.end == DEFAULT_END

    @staticmethod
    def reset() -> DelimiterSet:
        """Return the default ``{{`` / ``}}`` set."""
        return DEFAULT_DELIMITERS


DEFAULT_DELIMITERS = DelimiterSet()


def is_valid_delimiter(marker: str) -> bool:
    """Markers may not be empty or contain whitespace or ``=``."""
    return bool(marker) and not any(ch == "=" or ch.isspace() for ch in marker)


def parse_set_delimiter(contents: str) -> DelimiterSet | None:
    """Parse trimmed tag contents of the form ``=BEGIN END=``.

    Returns the new DelimiterSet, or None when ``contents`` does not follow
    the grammar. The smallest legal tag is ``=X X=``.

    Example:
        >>> parse_set_delimiter("=<% %>=")
        DelimiterSet(begin='<%', end='%>')
        >>> parse_set_delimiter("=<%%>=") is None
        True
    """
    if len(contents) < 5 or not contents.startswith("=") or not contents.endswith("="):
        return None
    inner = contents[1:-1].strip()
    begin, sep, rest = inner.partition(" ")
    if not sep:
        return None
    end = rest.lstrip(" ")
    if not is_valid_delimiter(begin) or not is_valid_delimiter(end):
        return None
    return DelimiterSet(begin, end)
