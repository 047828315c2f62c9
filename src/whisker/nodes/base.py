"""Base node class for the Whisker component tree."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all tree nodes.

    ``position`` is the character offset of the node in its template source.
    Nodes are immutable so one parsed tree can be rendered any number of times.

    """

    position: int
