"""Whisker — a logic-less template engine for Python.

Templates are text with ``{{ }}`` tags. There are no expressions: data
decides what renders through sections, inverted sections, partials and
lambdas.

Quickstart:
    >>> from whisker import Template
    >>> Template("Hello, {{name}}!").render(name="World")
    'Hello, World!'

Sections and lists:
    >>> Template("{{#items}}{{.}},{{/items}}").render(items=["a", "b"])
    'a,b,'

Partials and lambdas are callables in the data:
    >>> t = Template("{{>header}} {{#bold}}hi{{/bold}}")
    >>> t.render(header=lambda: "<h1>{{title}}</h1>",
    ...          bold=lambda text: "<b>" + text + "</b>",
    ...          title="Home")
    '<h1>Home</h1> <b>hi</b>'

Architecture:
Template Source → Parser → Component Tree → Renderer (+ Context) → output

1. **Parser**: single forward scan with the active delimiter set
2. **Component Tree**: immutable Text/Tag nodes, sections own their body
3. **Context**: stack of Data scopes used for name resolution
4. **Renderer**: depth-first walk emitting chunks through a sink; lambda
   results and partial bodies are parsed and rendered in place against the
   same Context

Errors:
Parsing never raises from ``Template(...)``; check ``is_valid`` /
``error_message``, or call ``render()`` which raises the error. Use
``render_to(sink)`` to stream output and get a ``RenderResult`` back
instead of an exception.

Thread-Safety:
Parsed templates are immutable. Each render builds its own Context, so a
Template may be rendered concurrently.

"""

from whisker._types import TagType, WalkControl
from whisker.environment import (
    CallbackError,
    Environment,
    ErrorCode,
    InvalidDataError,
    InvalidSetDelimiterError,
    LambdaResultError,
    RecursionLimitError,
    SubTemplateError,
    TemplateError,
    TemplateRuntimeError,
    TemplateSyntaxError,
    UnclosedSectionError,
    UnclosedTagError,
    UnopenedSectionError,
)
from whisker.context import Context
from whisker.data import Data, DataType, Lambda, Partial
from whisker.delimiters import DEFAULT_DELIMITERS, DelimiterSet
from whisker.parser import Parser, parse
from whisker.renderer import Renderer
from whisker.template import RenderResult, Template
from whisker.utils.html import html_escape

__version__ = "0.1.0"


def render(source: str, data: object = None, /, **kwargs: object) -> str:
    """Parse ``source`` and render it in one call.

    Raises:
        TemplateError: On a parse or render failure.
    """
    return Template(source).render(data, **kwargs)


__all__ = [
    "DEFAULT_DELIMITERS",
    "CallbackError",
    "Context",
    "Data",
    "DataType",
    "DelimiterSet",
    "Environment",
    "ErrorCode",
    "InvalidDataError",
    "InvalidSetDelimiterError",
    "Lambda",
    "LambdaResultError",
    "Parser",
    "Partial",
    "RecursionLimitError",
    "RenderResult",
    "Renderer",
    "SubTemplateError",
    "TagType",
    "Template",
    "TemplateError",
    "TemplateRuntimeError",
    "TemplateSyntaxError",
    "UnclosedSectionError",
    "UnclosedTagError",
    "UnopenedSectionError",
    "WalkControl",
    "__version__",
    "html_escape",
    "parse",
    "render",
]
