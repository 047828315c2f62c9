"""Whisker renderer — tree-walking interpreter.

The renderer walks a parsed ``Root`` depth first, emitting chunks through a
sink callable. Every tag handler answers with a ``WalkControl`` or a frame:

- CONTINUE: carry on with the next node
- STOP: an error was recorded; abandon the walk
- a ``_Frame``: a section body to render once per scope value

Frames go on an explicit stack, so sections nested to any depth cost no
Python recursion. Scopes a frame pushed are popped when its body ends, or
when a stopped walk unwinds.

Errors are recorded on the renderer (``self.error``) rather than raised, so
a partially rendered template keeps the chunks it already emitted and the
caller decides what to do with the failure.

Re-entrancy:
    Lambda results and partial bodies are parsed into fresh trees and
    rendered by a child Renderer against the *same* Context, so they see
    every enclosing scope. Each level counts against ``Context.max_depth``;
    running out of interpreter stack first is reported the same way.

Thread-Safety:
    A Renderer and its Context belong to a single render call. The parsed
    tree is only read, so one tree can be rendered concurrently by separate
    renderers.

"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Sequence

from whisker._types import TagType, WalkControl
from whisker.context import Context
from whisker.data import Data
from whisker.delimiters import DEFAULT_DELIMITERS, DelimiterSet
from whisker.environment.exceptions import (
    CallbackError,
    InvalidDataError,
    LambdaResultError,
    RecursionLimitError,
    SubTemplateError,
    TemplateError,
    TemplateRuntimeError,
    TemplateSyntaxError,
)
from whisker.nodes import Node, Root, Tag, Text
from whisker.parser import Parser
from whisker.utils.html import html_escape

logger = logging.getLogger(__name__)

Sink = Callable[[str], None]

_DONE = object()


class _Frame:
    """One section body on the render stack.

    The body renders once per entry in ``values``. A Data entry is pushed
    as the innermost scope for that pass; None renders without a push.
    """

    __slots__ = ("body", "children", "pushed", "values")

    def __init__(self, body: Sequence[Node], values: Iterable[Data | None]):
        self.body = body
        self.children: Iterator[Node] = iter(())
        self.values: Iterator[Data | None] = iter(values)
        self.pushed = False


class Renderer:
    """Render one component tree against a Context.

    Example:
            >>> chunks = []
            >>> ctx = Context(Data({"name": "World"}))
            >>> Renderer(ctx, chunks.append).render(Parser("Hi {{name}}").parse())
            >>> "".join(chunks)
            'Hi World'

    Attributes:
        error: First error recorded during the render, or None.
    """

    __slots__ = ("_ctx", "_escape", "_name", "_sink", "error")

    def __init__(
        self,
        ctx: Context,
        sink: Sink,
        *,
        escape: Callable[[str], str] = html_escape,
        name: str | None = None,
    ):
        self._ctx = ctx
        self._sink = sink
        self._escape = escape
        self._name = name
        self.error: TemplateError | None = None

    def render(self, root: Root) -> TemplateError | None:
        """Walk ``root``; return the error that stopped the walk, if any."""
        stack = [_Frame(root.children, (None,))]
        try:
            self._run(stack)
        finally:
            for frame in stack:
                if frame.pushed:
                    self._ctx.pop()
        return self.error

    def _run(self, stack: list[_Frame]) -> None:
        ctx = self._ctx
        while stack:
            frame = stack[-1]
            node = next(frame.children, None)
            if node is None:
                if frame.pushed:
                    ctx.pop()
                    frame.pushed = False
                value = next(frame.values, _DONE)
                if value is _DONE:
                    stack.pop()
                    continue
                if value is not None:
                    ctx.push(value)
                    frame.pushed = True
                frame.children = iter(frame.body)
                continue
            control = self._visit(node)
            if control is WalkControl.STOP:
                return
            if isinstance(control, _Frame):
                stack.append(control)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _visit(self, node: Node) -> WalkControl | _Frame:
        if isinstance(node, Text):
            self._sink(node.value)
            return WalkControl.CONTINUE
        if not isinstance(node, Tag):
            return WalkControl.CONTINUE
        handler = _HANDLERS.get(node.type)
        if handler is None:
            return WalkControl.CONTINUE
        try:
            return handler(self, node)
        except InvalidDataError as exc:
            return self._fail(exc)

    def _render_variable(self, tag: Tag) -> WalkControl:
        value = self._ctx.get(tag.name)
        if value is None:
            return WalkControl.CONTINUE
        escaped = tag.type is TagType.VARIABLE
        if value.is_string():
            text = value.string_value
            self._sink(self._escape(text) if escaped else text)
        elif value.is_lambda():
            return self._render_lambda(tag, value, "", escaped=escaped, delimiters=DEFAULT_DELIMITERS)
        return WalkControl.CONTINUE

    def _render_section(self, tag: Tag) -> WalkControl | _Frame:
        value = self._ctx.get(tag.name)
        if value is None:
            return WalkControl.CONTINUE
        if value.is_lambda():
            # Lambda sections see the raw body and keep the live delimiters
            return self._render_lambda(
                tag,
                value,
                tag.section_text or "",
                escaped=False,
                delimiters=self._ctx.delimiters,
            )
        if value.is_false() or value.is_empty_list():
            return WalkControl.CONTINUE
        if value.is_list():
            return _Frame(tag.children, value.items)
        return _Frame(tag.children, (value,))

    def _render_inverted(self, tag: Tag) -> WalkControl | _Frame:
        value = self._ctx.get(tag.name)
        if value is None or value.is_false() or value.is_empty_list():
            return _Frame(tag.children, (None,))
        return WalkControl.CONTINUE

    def _render_partial(self, tag: Tag) -> WalkControl:
        value = self._ctx.get_partial(tag.name)
        if value is None or not value.is_partial():
            return WalkControl.CONTINUE
        try:
            source = value.call_partial()
        except RecursionError:
            raise
        except Exception as exc:
            return self._fail(CallbackError(tag.name, exc), cause=exc)
        if isinstance(source, Data) and source.is_string():
            source = source.string_value
        if not isinstance(source, str):
            return self._fail(
                TemplateRuntimeError(
                    f"Partial must return str, got {type(source).__name__}",
                    tag=tag.name,
                    template_name=self._name,
                )
            )
        logger.debug("Expanding partial %r at depth %d", tag.name, self._ctx.depth + 1)
        # Partial bodies always start from the default delimiters
        return self._render_source(
            source, tag, kind="partial", delimiters=DEFAULT_DELIMITERS, sink=self._sink
        )

    def _set_delimiter(self, tag: Tag) -> WalkControl:
        if tag.delimiters is not None:
            self._ctx.delimiters = tag.delimiters
        return WalkControl.CONTINUE

    # ------------------------------------------------------------------
    # Re-entrant rendering
    # ------------------------------------------------------------------

    def _render_lambda(
        self,
        tag: Tag,
        value: Data,
        text: str,
        *,
        escaped: bool,
        delimiters: DelimiterSet,
    ) -> WalkControl:
        try:
            result = value.call_lambda(text)
        except LambdaResultError as exc:
            return self._fail(LambdaResultError(exc.result, tag=tag.name))
        except RecursionError:
            raise
        except Exception as exc:
            return self._fail(CallbackError(tag.name, exc), cause=exc)

        chunks: list[str] = []
        logger.debug("Rendering lambda %r result at depth %d", tag.name, self._ctx.depth + 1)
        control = self._render_source(
            result.string_value, tag, kind="lambda", delimiters=delimiters, sink=chunks.append
        )
        if control is WalkControl.STOP:
            return control
        output = "".join(chunks)
        self._sink(self._escape(output) if escaped else output)
        return WalkControl.CONTINUE

    def _render_source(
        self,
        source: str,
        tag: Tag,
        *,
        kind: str,
        delimiters: DelimiterSet,
        sink: Sink,
    ) -> WalkControl:
        """Parse ``source`` and render it against the shared Context."""
        ctx = self._ctx
        if ctx.depth >= ctx.max_depth:
            return self._fail(RecursionLimitError(tag.name, ctx.max_depth))
        name = tag.name if kind == "partial" else f"<lambda {tag.name}>"
        error: TemplateError | None
        with ctx.nested():
            try:
                root = Parser(source, delimiters=delimiters, name=name).parse()
                error = Renderer(ctx, sink, escape=self._escape, name=name).render(root)
            except TemplateSyntaxError as exc:
                error = exc
            except RecursionError:
                # Out of interpreter stack before max_depth was reached
                error = RecursionLimitError(tag.name, ctx.max_depth)
        if error is not None:
            return self._adopt(error, tag, kind)
        return WalkControl.CONTINUE

    # ------------------------------------------------------------------
    # Errors
    # ------------------------------------------------------------------

    def _adopt(self, error: TemplateError, tag: Tag, kind: str) -> WalkControl:
        """Record a sub-template failure, wrapping it once at the innermost level."""
        if not isinstance(error, SubTemplateError):
            error = SubTemplateError(error, tag=tag.name, kind=kind)
        return self._fail(error)

    def _fail(self, error: TemplateError, *, cause: BaseException | None = None) -> WalkControl:
        if cause is not None:
            error.__cause__ = cause
        if self.error is None:
            self.error = error
            logger.debug("Render of %s stopped: %s", self._name or "<template>", error)
        return WalkControl.STOP


_HANDLERS: dict[TagType, Callable[[Renderer, Tag], WalkControl | _Frame]] = {
    TagType.VARIABLE: Renderer._render_variable,
    TagType.UNESCAPED_VARIABLE: Renderer._render_variable,
    TagType.SECTION_BEGIN: Renderer._render_section,
    TagType.SECTION_BEGIN_INVERTED: Renderer._render_inverted,
    TagType.PARTIAL: Renderer._render_partial,
    TagType.SET_DELIMITER: Renderer._set_delimiter,
}
