"""HTML escaping for Whisker.

Escaped variable tags (``{{ name }}``) pass their text through
``html_escape()``. The escape set is fixed at five characters::

    &  ->  &amp;
    <  ->  &lt;
    >  ->  &gt;
    "  ->  &quot;
    '  ->  &apos;

Complexity:
    O(n) single pass via ``str.translate()``.

"""

from __future__ import annotations

_ESCAPE_TABLE = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&apos;",
    }
)

ESCAPED_CHARS: frozenset[str] = frozenset("&<>\"'")


def html_escape(value: str) -> str:
    """Escape the five HTML-significant characters in ``value``.

    Example:
        >>> html_escape("A&B <b>")
        'A&amp;B &lt;b&gt;'
    """
    # Fast path: most variable text has nothing to escape
    if not any(ch in value for ch in ESCAPED_CHARS):
        return value
    return value.translate(_ESCAPE_TABLE)
