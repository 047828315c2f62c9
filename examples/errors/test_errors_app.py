"""Tests for the error reporting example."""

from whisker import RecursionLimitError, SubTemplateError, UnclosedSectionError
from whisker.environment.terminal import strip_colors


class TestErrorsApp:
    def test_syntax_error_kept_on_template(self, example_app) -> None:
        assert not example_app.broken.is_valid
        assert isinstance(example_app.syntax_error, UnclosedSectionError)
        assert example_app.syntax_error.lineno == 2

    def test_compact_format(self, example_app) -> None:
        plain = strip_colors(example_app.compact)
        assert plain.startswith("W-PAR-004:")
        assert "list.mustache:2:2" in plain
        assert "{{#items}}" in plain

    def test_recursion_stops_with_output_kept(self, example_app) -> None:
        assert not example_app.result
        assert isinstance(example_app.result.error, SubTemplateError)
        assert isinstance(example_app.result.error.root_cause, RecursionLimitError)
        assert example_app.partial_output == "start " + "." * 50
