"""Whisker Template — a parsed template ready for rendering.

Architecture:
    ```
    Template
    ├── _env: Environment               # Settings (escape, max depth)
    ├── _root: Root | None              # Immutable component tree
    ├── _error: TemplateSyntaxError     # Set instead of _root on a bad parse
    └── _name, _source                  # For error messages
    ```

Parsing happens once, in the constructor. A parse failure does not raise;
it is kept on the template and reported through ``is_valid`` and
``error_message``, and raised by ``render()``.

Rendering has three entry points:

- ``render()`` returns the output string or raises the first error
- ``render_to(sink)`` feeds chunks to a callable and returns a
  ``RenderResult`` instead of raising
- ``render_into(stream)`` is ``render_to`` over a text stream's ``write``

Thread-Safety:
    The template holds no per-render state: every render builds its own
    Context and Renderer, so one Template may be rendered from several
    threads at once (provided the callbacks in the data are thread-safe).

"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TextIO

from whisker.context import Context
from whisker.data import Data
from whisker.environment.exceptions import (
    RecursionLimitError,
    TemplateError,
    TemplateSyntaxError,
)
from whisker.parser import Parser
from whisker.renderer import Renderer
from whisker.template.introspection import TemplateIntrospectionMixin
from whisker.template.result import RenderResult

if TYPE_CHECKING:
    from whisker.environment import Environment
    from whisker.nodes import Root

logger = logging.getLogger(__name__)


class Template(TemplateIntrospectionMixin):
    """Parsed template ready for rendering.

    Example:
            >>> t = Template("Hello, {{name}}!")
            >>> t.render(name="World")
            'Hello, World!'

            >>> t.render({"name": "<World>"})
            'Hello, &lt;World&gt;!'

            >>> bad = Template("{{#items}}")
            >>> bad.is_valid
            False
            >>> bad.error_message.splitlines()[0]
            'Syntax Error: Unclosed section "items" at 0'

    """

    __slots__ = ("_env", "_error", "_name", "_root", "_source")

    def __init__(
        self,
        source: str,
        *,
        name: str | None = None,
        env: Environment | None = None,
    ):
        if env is None:
            from whisker.environment.core import get_default_environment

            env = get_default_environment()
        self._env = env
        self._name = name
        self._source = source
        self._root: Root | None = None
        self._error: TemplateSyntaxError | None = None
        try:
            self._root = Parser(source, name=name).parse()
        except TemplateSyntaxError as exc:
            logger.debug("Template %s failed to parse: %s", name or "<template>", exc.message)
            self._error = exc

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def source(self) -> str:
        return self._source

    @property
    def root(self) -> Root | None:
        """Parsed component tree, or None if parsing failed."""
        return self._root

    @property
    def is_valid(self) -> bool:
        return self._error is None

    @property
    def error(self) -> TemplateSyntaxError | None:
        return self._error

    @property
    def error_message(self) -> str:
        return "" if self._error is None else str(self._error)

    @property
    def env(self) -> Environment:
        return self._env

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self, data: Any = None, /, **kwargs: Any) -> str:
        """Render to a string.

        Args:
            data: A Data value or anything ``Data.from_python`` accepts.
            **kwargs: Extra top-level names, merged over ``data``.

        Raises:
            TemplateSyntaxError: If the template failed to parse.
            TemplateRuntimeError: If rendering failed.
        """
        buf: list[str] = []
        self.render_to(buf.append, data, **kwargs).raise_for_error()
        return "".join(buf)

    def render_to(
        self,
        sink: Callable[[str], None],
        data: Any = None,
        /,
        **kwargs: Any,
    ) -> RenderResult:
        """Render chunk by chunk into ``sink``, in emission order.

        Never raises template errors: the returned RenderResult carries the
        parse error or the first render error. Chunks emitted before a
        render error stay emitted.
        """
        if self._root is None:
            return RenderResult(self._error)
        env = self.env
        ctx = Context(_merge_data(data, kwargs), max_depth=env.max_depth)
        error: TemplateError | None
        try:
            error = Renderer(ctx, sink, escape=env.escape, name=self._name).render(self._root)
        except RecursionError:
            error = RecursionLimitError(self._name or "<template>", env.max_depth)
        return RenderResult(error)

    def render_into(self, stream: TextIO, data: Any = None, /, **kwargs: Any) -> RenderResult:
        """Write the output to ``stream`` as it is produced."""
        return self.render_to(stream.write, data, **kwargs)

    def __repr__(self) -> str:
        state = "valid" if self.is_valid else "invalid"
        return f"<Template {self._name or '(inline)'!s} {state}>"


def _merge_data(data: Any, extra: dict[str, Any]) -> Data:
    """Build the root scope from positional data and keyword names."""
    if data is None and not extra:
        return Data()
    if data is None:
        return Data.object(extra)
    base = Data.from_python(data)
    if not extra:
        return base
    if not base.is_object():
        raise TypeError(
            f"Keyword data needs an object to merge into, got {base.type.value}"
        )
    merged = Data()
    for key in base.keys():
        merged.set(key, base.get(key))
    for key, value in extra.items():
        merged.set(key, value)
    return merged
