"""Render helpers shared by the Whisker test modules."""

from whisker import Template


def render(source: str, data=None, **kwargs) -> str:
    """Parse and render, failing the test on a parse error."""
    template = Template(source)
    assert template.is_valid, template.error_message
    return template.render(data, **kwargs)


def render_chunks(template: Template, data=None, **kwargs) -> tuple[list[str], object]:
    """Render through a sink; return (chunks, RenderResult)."""
    chunks: list[str] = []
    result = template.render_to(chunks.append, data, **kwargs)
    return chunks, result
