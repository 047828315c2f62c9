"""Property-based tests for the Whisker parser and renderer.

Uses hypothesis to verify invariants that must hold for *all* inputs:

- Text without markers renders unchanged
- Arbitrary input either parses or fails with a TemplateSyntaxError
- Well-formed templates always parse and render
- Parsing the same text twice yields trees that render identically
"""

from __future__ import annotations

from hypothesis import given, settings

from whisker import Data, Parser, Template, TemplateSyntaxError
from whisker.nodes import Root, Tag, Text, iter_tags

from strategies import (
    arbitrary_template_source,
    marker_soup,
    plain_text,
    root_data,
    well_formed_fragments,
)


class TestParserProperties:
    """Structural invariants of the scanner."""

    @given(source=plain_text, data=root_data)
    @settings(max_examples=200)
    def test_plain_text_roundtrip(self, source: str, data: dict) -> None:
        """Text without delimiters renders unchanged against any data."""
        assert Template(source).render(data) == source

    @given(source=plain_text)
    @settings(max_examples=100)
    def test_plain_text_is_single_node(self, source: str) -> None:
        root = Parser(source).parse()
        if source:
            assert root.children == (Text(0, source),)
        else:
            assert root.children == ()

    @given(source=arbitrary_template_source)
    @settings(max_examples=300)
    def test_no_unhandled_crash(self, source: str) -> None:
        """The parser only ever fails with TemplateSyntaxError."""
        try:
            Parser(source).parse()
        except TemplateSyntaxError:
            pass

    @given(source=marker_soup)
    @settings(max_examples=300)
    def test_marker_soup_never_crashes(self, source: str) -> None:
        template = Template(source)
        if template.is_valid:
            result = template.render_to(lambda chunk: None, {})
            assert result.is_valid
        else:
            assert isinstance(template.error, TemplateSyntaxError)

    @given(source=well_formed_fragments)
    @settings(max_examples=200)
    def test_well_formed_parses(self, source: str) -> None:
        root = Parser(source).parse()
        assert isinstance(root, Root)
        # End tags never survive finalisation
        assert all(tag.type.name != "SECTION_END" for tag in iter_tags(root))

    @given(source=well_formed_fragments, data=root_data)
    @settings(max_examples=200)
    def test_well_formed_renders(self, source: str, data: dict) -> None:
        result = Template(source).render_to(lambda chunk: None, data)
        assert result.is_valid, result.error_message


class TestIdempotence:
    """Parsing is deterministic."""

    @given(source=well_formed_fragments)
    @settings(max_examples=100)
    def test_same_tree(self, source: str) -> None:
        assert Parser(source).parse() == Parser(source).parse()

    @given(source=well_formed_fragments, data=root_data)
    @settings(max_examples=100)
    def test_same_output(self, source: str, data: dict) -> None:
        value = Data.from_python(data)
        assert Template(source).render(value) == Template(source).render(value)

    @given(source=well_formed_fragments, data=root_data)
    @settings(max_examples=100)
    def test_rerender_same_template(self, source: str, data: dict) -> None:
        template = Template(source)
        assert template.render(data) == template.render(data)


class TestSectionText:
    """Raw section bodies are verbatim slices of the source."""

    @given(source=well_formed_fragments)
    @settings(max_examples=100)
    def test_section_text_is_source_slice(self, source: str) -> None:
        for tag in iter_tags(Parser(source).parse()):
            if isinstance(tag, Tag) and tag.type.opens_section:
                assert tag.section_text is not None
                assert tag.section_text in source
