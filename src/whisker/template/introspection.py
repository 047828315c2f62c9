"""Template introspection mixin.

Static queries over a parsed template: which names it reads and which
partials it may expand. Useful for validating data before rendering.

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from whisker._types import TagType
from whisker.data import Data
from whisker.nodes import iter_tags

if TYPE_CHECKING:
    from whisker.nodes import Root

_NAME_TAGS = frozenset(
    {
        TagType.VARIABLE,
        TagType.UNESCAPED_VARIABLE,
        TagType.SECTION_BEGIN,
        TagType.SECTION_BEGIN_INVERTED,
    }
)


class TemplateIntrospectionMixin:
    """Mixin adding static queries to Template.

    Requires the host class to define:
        _root: Root | None

    """

    if TYPE_CHECKING:
        _root: Root | None

    def depends_on(self) -> frozenset[str]:
        """Every name (dotted names whole) read by a variable or section tag.

        ``.`` is excluded. An invalid template depends on nothing.

        Example:
            >>> Template("{{#user}}{{user.name}}{{/user}}").depends_on()
            frozenset({'user', 'user.name'})
        """
        if self._root is None:
            return frozenset()
        return frozenset(
            tag.name
            for tag in iter_tags(self._root)
            if tag.type in _NAME_TAGS and tag.name != "."
        )

    def required_context(self) -> frozenset[str]:
        """Top-level names the template reads (first segment of each name).

        Names inside sections may resolve against the section value rather
        than the top level, so this is an upper bound.
        """
        return frozenset(name.split(".", 1)[0] for name in self.depends_on())

    def partial_names(self) -> frozenset[str]:
        """Names used by ``{{>name}}`` tags."""
        if self._root is None:
            return frozenset()
        return frozenset(tag.name for tag in iter_tags(self._root) if tag.type is TagType.PARTIAL)

    def validate_context(self, data: Any) -> list[str]:
        """Top-level names (variables and partials) missing from ``data``.

        Missing names render as nothing, so this is advisory: it reports
        likely typos without failing the render.

        Example:
            >>> Template("{{title}} {{>footer}}").validate_context({"title": "x"})
            ['footer']
        """
        root = Data.from_python(data)
        wanted = self.required_context() | self.partial_names()
        return sorted(name for name in wanted if root.get(name) is None)
