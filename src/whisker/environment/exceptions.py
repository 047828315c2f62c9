"""Exceptions for the Whisker template engine.

Exception Hierarchy:
TemplateError (base)
├── TemplateSyntaxError            # Parse-time error, carries a source offset
│   ├── UnclosedTagError           # Begin marker without an end marker
│   ├── InvalidSetDelimiterError   # Malformed {{=<% %>=}} tag
│   ├── UnopenedSectionError       # {{/name}} with no open section
│   └── UnclosedSectionError       # {{#name}} never closed (or closed out of order)
├── TemplateRuntimeError           # Render-time error
│   ├── SubTemplateError           # Lambda result or partial body failed
│   ├── RecursionLimitError        # Partials/lambdas nested too deeply
│   ├── CallbackError              # A Partial or Lambda callback raised
│   └── LambdaResultError          # A Lambda returned something other than text
└── InvalidDataError               # Read from a moved-from Data value

Parse errors record the character offset of the offending tag. When the
template source is known the message includes a snippet:

    ```
    Syntax Error: Unclosed section "items"
      --> page.mustache:3:4
       |
      3 | <ul>{{#items}}
       |     ^
    ```

Looking up a name that does not exist is never an error; it renders as
nothing.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from whisker.environment import terminal


class ErrorCode(Enum):
    """Searchable error codes for Whisker errors.

    Format: W-{CATEGORY}-{NUMBER}
    Categories: PAR (parser), RUN (runtime), DAT (data)
    """

    # Parser errors (W-PAR-xxx)
    UNCLOSED_TAG = "W-PAR-001"
    INVALID_SET_DELIMITER = "W-PAR-002"
    UNOPENED_SECTION = "W-PAR-003"
    UNCLOSED_SECTION = "W-PAR-004"

    # Runtime errors (W-RUN-xxx)
    RUNTIME_ERROR = "W-RUN-001"
    SUB_TEMPLATE = "W-RUN-002"
    RECURSION_LIMIT = "W-RUN-003"
    CALLBACK_FAILED = "W-RUN-004"
    LAMBDA_RESULT = "W-RUN-005"

    # Data errors (W-DAT-xxx)
    INVALID_DATA = "W-DAT-001"

    @property
    def category(self) -> str:
        """Error category ('parser', 'runtime' or 'data')."""
        prefix = self.value.split("-")[1]
        return {
            "PAR": "parser",
            "RUN": "runtime",
            "DAT": "data",
        }.get(prefix, "unknown")


# ---------------------------------------------------------------------------
# Source positions
# ---------------------------------------------------------------------------


def offset_to_location(source: str, position: int) -> tuple[int, int]:
    """Convert a character offset into a (1-based line, 0-based column) pair.

    Example:
        >>> offset_to_location("ab\\ncd", 4)
        (2, 1)
    """
    position = max(0, min(position, len(source)))
    lineno = source.count("\n", 0, position) + 1
    line_start = source.rfind("\n", 0, position) + 1
    return lineno, position - line_start


@dataclass(frozen=True, slots=True)
class SourceSnippet:
    """Template source lines surrounding an error.

    Attributes:
        lines: Tuple of (line_number, line_content) pairs around the error.
        error_line: The 1-based line number where the error occurred.
        column: Optional column offset for the caret pointer.
    """

    lines: tuple[tuple[int, str], ...]
    error_line: int
    column: int | None = None

    def format(self) -> str:
        parts: list[str] = [terminal.dim_text("   |")]
        for lineno, content in self.lines:
            parts.append(
                terminal.format_source_line(lineno, content, is_error=lineno == self.error_line)
            )
        if self.column is not None:
            caret = " " * self.column + "^"
            parts.append(f"{terminal.dim_text('   |')} {terminal.error_line(caret)}")
        parts.append(terminal.dim_text("   |"))
        return "\n".join(parts)


def build_source_snippet(
    source: str,
    error_line: int,
    *,
    context_lines: int = 1,
    column: int | None = None,
) -> SourceSnippet:
    """Build a SourceSnippet from template source.

    Args:
        source: Full template source text.
        error_line: 1-based line number of the error.
        context_lines: Number of lines to show before/after the error line.
        column: Optional column offset for the caret pointer.
    """
    all_lines = source.splitlines() or [""]
    start = max(0, error_line - 1 - context_lines)
    end = min(len(all_lines), error_line + context_lines)
    lines = tuple((i + 1, all_lines[i]) for i in range(start, end))
    return SourceSnippet(lines=lines, error_line=error_line, column=column)


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class TemplateError(Exception):
    """Base exception for all Whisker errors.

        >>> try:
        ...     template.render(data)
        ... except TemplateError as e:
        ...     log.error("Template error: %s", e)

    Attributes:
        code: Optional ErrorCode for searchable error identification.
    """

    code: ErrorCode | None = None

    def format_compact(self) -> str:
        """Format error as a one-block terminal diagnostic (no traceback)."""
        header = str(self)
        if self.code and self.code.value not in header:
            header = f"{terminal.error_code(self.code.value)}: {header}"
        return header


class TemplateSyntaxError(TemplateError):
    """Parse-time error in template source.

    Attributes:
        message: Short description of the problem.
        position: Character offset of the offending tag in ``source``.
        name: Template name, if any.
        source: Template source, used for the line/column and the snippet.
    """

    code: ErrorCode | None = None

    def __init__(
        self,
        message: str,
        position: int,
        *,
        name: str | None = None,
        source: str | None = None,
    ):
        self.message = message
        self.position = position
        self.name = name
        self.source = source
        if source is not None:
            self.lineno, self.col_offset = offset_to_location(source, position)
        else:
            self.lineno, self.col_offset = None, None
        super().__init__(self._format_message())

    @property
    def location(self) -> str:
        loc = self.name or "<template>"
        if self.lineno is not None:
            loc += f":{self.lineno}:{self.col_offset}"
        else:
            loc += f"@{self.position}"
        return loc

    def _format_message(self) -> str:
        header = f"Syntax Error: {self.message}\n  --> {self.location}"
        if self.source is not None and self.lineno is not None:
            snippet = build_source_snippet(
                self.source, self.lineno, context_lines=0, column=self.col_offset
            )
            return header + "\n" + snippet.format()
        return header

    def format_compact(self) -> str:
        parts = [
            terminal.format_error_header(self.code.value if self.code else None, self.message),
            f"  --> {terminal.location(self.location)}",
        ]
        if self.source is not None and self.lineno is not None:
            snippet = build_source_snippet(self.source, self.lineno, column=self.col_offset)
            parts.append(snippet.format())
        return "\n".join(parts)


class UnclosedTagError(TemplateSyntaxError):
    """A begin marker was found but its end marker never was."""

    code = ErrorCode.UNCLOSED_TAG

    def __init__(self, position: int, **kwargs: str | None):
        super().__init__(f"Unclosed tag at {position}", position, **kwargs)


class InvalidSetDelimiterError(TemplateSyntaxError):
    """A ``{{=BEGIN END=}}`` tag does not follow the set-delimiter grammar."""

    code = ErrorCode.INVALID_SET_DELIMITER

    def __init__(self, position: int, **kwargs: str | None):
        super().__init__(f"Invalid set delimiter tag at {position}", position, **kwargs)


class UnopenedSectionError(TemplateSyntaxError):
    """A section end tag appeared while no section was open."""

    code = ErrorCode.UNOPENED_SECTION

    def __init__(self, section: str, position: int, **kwargs: str | None):
        self.section = section
        super().__init__(f'Unopened section "{section}" at {position}', position, **kwargs)


class UnclosedSectionError(TemplateSyntaxError):
    """A section was opened but not closed by a matching end tag."""

    code = ErrorCode.UNCLOSED_SECTION

    def __init__(self, section: str, position: int, **kwargs: str | None):
        self.section = section
        super().__init__(f'Unclosed section "{section}" at {position}', position, **kwargs)


class TemplateRuntimeError(TemplateError):
    """Render-time error.

    Output emitted before the error stays emitted; callers that need
    all-or-nothing output must buffer it themselves.

    Attributes:
        message: Error description
        tag: Name of the tag being rendered when the error occurred
        template_name: Name of the template being rendered
        suggestion: Actionable fix suggestion
    """

    code: ErrorCode | None = ErrorCode.RUNTIME_ERROR

    def __init__(
        self,
        message: str,
        *,
        tag: str | None = None,
        template_name: str | None = None,
        suggestion: str | None = None,
    ):
        self.message = message
        self.tag = tag
        self.template_name = template_name
        self.suggestion = suggestion
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = [f"Runtime Error: {self.message}"]
        if self.template_name or self.tag:
            loc = self.template_name or "<template>"
            if self.tag:
                loc += f" (tag '{self.tag}')"
            parts.append(f"  Location: {terminal.location(loc)}")
        if self.suggestion:
            parts.append(f"  {terminal.hint('Suggestion:')} {self.suggestion}")
        return "\n".join(parts)


class SubTemplateError(TemplateRuntimeError):
    """A lambda result or partial body failed to parse or render.

    ``nested`` holds the original error; its message is repeated so the
    innermost failure is what the caller reads first.
    """

    code = ErrorCode.SUB_TEMPLATE

    def __init__(self, nested: TemplateError, *, tag: str | None = None, kind: str = "partial"):
        self.nested = nested
        self.kind = kind
        super().__init__(f"In {kind} '{tag}': {nested}", tag=tag)

    @property
    def root_cause(self) -> TemplateError:
        """Innermost error in a chain of nested sub-template failures."""
        error: TemplateError = self
        while isinstance(error, SubTemplateError):
            error = error.nested
        return error


class RecursionLimitError(TemplateRuntimeError):
    """Partials or lambdas were expanded deeper than the configured limit."""

    code = ErrorCode.RECURSION_LIMIT

    def __init__(self, tag: str, limit: int):
        self.limit = limit
        super().__init__(
            f"Maximum nesting depth exceeded ({limit}) when expanding '{tag}'",
            tag=tag,
            suggestion="Check for partials that include themselves: a -> b -> a",
        )


class CallbackError(TemplateRuntimeError):
    """A Partial or Lambda callback raised; the original is ``__cause__``."""

    code = ErrorCode.CALLBACK_FAILED

    def __init__(self, tag: str, error: BaseException):
        super().__init__(f"Callback for '{tag}' raised {type(error).__name__}: {error}", tag=tag)


class LambdaResultError(TemplateRuntimeError):
    """A Lambda callback returned a value that is not text."""

    code = ErrorCode.LAMBDA_RESULT

    def __init__(self, result: object, *, tag: str | None = None):
        self.result = result
        super().__init__(
            f"Lambda must return str or a string Data, got {type(result).__name__}",
            tag=tag,
        )


class InvalidDataError(TemplateError):
    """A moved-from Data value was read."""

    code = ErrorCode.INVALID_DATA
