"""Whisker component tree.

A parsed template is a ``Root`` whose children are ``Text`` and ``Tag``
nodes. Section tags hold their body as children::

    Hello {{#items}}<{{.}}>{{/items}}!

    Root
    ├── Text("Hello ")
    ├── Tag(SECTION_BEGIN, "items")
    │   ├── Text("<")
    │   ├── Tag(VARIABLE, ".")
    │   └── Text(">")
    └── Text("!")

``walk()`` drives a depth-first traversal with ``WalkControl`` results.

"""

from __future__ import annotations

from collections.abc import Callable

from whisker._types import TagType, WalkControl
from whisker.nodes.base import Node
from whisker.nodes.tree import Root, Tag, Text

Visitor = Callable[[Node], WalkControl]


def walk(node: Node, visit: Visitor) -> WalkControl:
    """Visit ``node``, then its children unless the visitor says otherwise.

    Returns STOP if any visit stopped the walk, CONTINUE otherwise.
    """
    control = visit(node)
    if control is WalkControl.STOP:
        return WalkControl.STOP
    if control is WalkControl.SKIP:
        return WalkControl.CONTINUE
    return walk_children(node, visit)


def walk_children(node: Node, visit: Visitor) -> WalkControl:
    """Walk each child of ``node`` in order, stopping on the first STOP.

    Pending children are kept on an explicit stack, so deeply nested
    sections do not recurse.
    """
    stack = [iter(getattr(node, "children", ()))]
    while stack:
        child = next(stack[-1], None)
        if child is None:
            stack.pop()
            continue
        control = visit(child)
        if control is WalkControl.STOP:
            return WalkControl.STOP
        if control is WalkControl.CONTINUE:
            stack.append(iter(getattr(child, "children", ())))
    return WalkControl.CONTINUE


def iter_tags(node: Node) -> list[Tag]:
    """All tags under ``node`` in document order."""
    found: list[Tag] = []

    def collect(child: Node) -> WalkControl:
        if isinstance(child, Tag):
            found.append(child)
        return WalkControl.CONTINUE

    walk_children(node, collect)
    return found


__all__ = [
    "Node",
    "Root",
    "Tag",
    "TagType",
    "Text",
    "Visitor",
    "WalkControl",
    "iter_tags",
    "walk",
    "walk_children",
]
