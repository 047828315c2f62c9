"""Whisker Environment — shared render configuration.

An Environment holds the settings every template built from it renders
with. There is no loader: template and partial text always comes from the
caller, either as strings or through Partial callbacks in the data.

Example:
    >>> env = Environment(max_depth=10)
    >>> env.from_string("Hello, {{name}}!").render(name="World")
    'Hello, World!'

"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from whisker.nodes import Root
from whisker.parser import Parser
from whisker.template import Template
from whisker.utils.html import html_escape

#: Partial/lambda nesting deeper than this fails with RecursionLimitError.
#: Deep enough for real partial hierarchies, shallow enough to catch a
#: partial that includes itself long before the interpreter stack runs out.
DEFAULT_MAX_DEPTH = 50


class Environment:
    """Configuration shared by templates.

    Attributes:
        escape: Function applied to the text of escaped ``{{name}}`` tags.
        max_depth: Maximum nesting of partial expansions and lambda renders.

    Thread-Safety:
        Settings are read-only after construction; templates built from one
        Environment can render concurrently.

    """

    __slots__ = ("escape", "max_depth")

    def __init__(
        self,
        *,
        escape: Callable[[str], str] = html_escape,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ):
        if max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {max_depth}")
        self.escape = escape
        self.max_depth = max_depth

    def from_string(self, source: str, name: str | None = None) -> Template:
        """Parse ``source`` into a Template bound to this environment.

        Parse errors do not raise here; check ``Template.is_valid`` or let
        ``render()`` raise them.
        """
        return Template(source, name=name, env=self)

    def parse(self, source: str, name: str | None = None) -> Root:
        """Parse ``source`` to a component tree, raising TemplateSyntaxError."""
        return Parser(source, name=name).parse()

    def render_string(self, source: str, data: Any = None, /, **kwargs: Any) -> str:
        """One-shot parse and render."""
        return self.from_string(source).render(data, **kwargs)

    def __repr__(self) -> str:
        return f"Environment(max_depth={self.max_depth})"


_default_environment: Environment | None = None


def get_default_environment() -> Environment:
    """Environment used by templates constructed without one."""
    global _default_environment
    if _default_environment is None:
        _default_environment = Environment()
    return _default_environment
