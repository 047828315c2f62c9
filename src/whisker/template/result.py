"""Outcome of a sink-driven render."""

from __future__ import annotations

from dataclasses import dataclass

from whisker.environment.exceptions import TemplateError


@dataclass(frozen=True, slots=True)
class RenderResult:
    """Validity of one ``Template.render_to()`` call.

    Chunks already passed to the sink before a failure are not taken back;
    ``error`` describes where the output stopped.

    Example:
        >>> result = template.render_to(chunks.append, data)
        >>> if not result:
        ...     log.warning("render failed: %s", result.error_message)
    """

    error: TemplateError | None = None

    @property
    def is_valid(self) -> bool:
        return self.error is None

    @property
    def error_message(self) -> str:
        return "" if self.error is None else str(self.error)

    def raise_for_error(self) -> None:
        """Raise the recorded error, if there is one."""
        if self.error is not None:
            raise self.error

    def __bool__(self) -> bool:
        return self.error is None
