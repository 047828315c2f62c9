"""Whisker Context — the scope stack names are resolved against.

One Context exists per top-level render. Sections push the value they
iterate or enter; partial bodies and lambda results render against the
same Context object, so they see every enclosing scope.

The renderer pushes and pops section scopes itself as it walks. Other
callers use the context manager, which pops on every exit path::

    with ctx.scope(item):
        value = ctx.get("name")

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from whisker.data import Data
from whisker.delimiters import DEFAULT_DELIMITERS, DelimiterSet


class Context:
    """Stack of Data scopes plus the live delimiter set for one render.

    Attributes:
        delimiters: Delimiters in effect; set-delimiter tags replace it
            and lambda sections parse their result with it.
        depth: Current partial/lambda nesting depth.
        max_depth: Nesting depth at which expansion fails.
    """

    __slots__ = ("_scopes", "delimiters", "depth", "max_depth")

    def __init__(self, data: Data | None = None, *, max_depth: int = 50):
        # Innermost scope last
        self._scopes: list[Data] = []
        self.delimiters: DelimiterSet = DEFAULT_DELIMITERS
        self.depth = 0
        self.max_depth = max_depth
        if data is not None:
            self._scopes.append(data)

    def push(self, data: Data) -> None:
        self._scopes.append(data)

    def pop(self) -> Data:
        return self._scopes.pop()

    @contextmanager
    def scope(self, data: Data) -> Iterator[Data]:
        """Push ``data`` as the innermost scope for the ``with`` block."""
        self._scopes.append(data)
        try:
            yield data
        finally:
            self._scopes.pop()

    @contextmanager
    def nested(self) -> Iterator[int]:
        """Count one level of partial/lambda nesting for the ``with`` block."""
        self.depth += 1
        try:
            yield self.depth
        finally:
            self.depth -= 1

    @property
    def scopes(self) -> tuple[Data, ...]:
        """Scopes innermost first."""
        return tuple(reversed(self._scopes))

    def get(self, name: str) -> Data | None:
        """Resolve a possibly dotted name.

        ``.`` is the innermost scope. Otherwise every scope, innermost
        first, is tried with all segments of the name; the first scope in
        which every segment resolves wins. A miss returns None.

        Example:
            >>> ctx = Context(Data({"a": {"b": "x"}}))
            >>> ctx.get("a.b").string_value
            'x'
        """
        if name == ".":
            return self._scopes[-1] if self._scopes else None
        segments = name.split(".")
        for scope in reversed(self._scopes):
            value: Data | None = scope
            for segment in segments:
                value = value.get(segment)
                if value is None:
                    break
            if value is not None:
                return value
        return None

    def get_partial(self, name: str) -> Data | None:
        """Find ``name`` without dotted traversal.

        The first scope that defines ``name`` at all wins, even when the
        value there is not a partial; callers check the type.
        """
        for scope in reversed(self._scopes):
            value = scope.get(name)
            if value is not None:
                return value
        return None
