"""Error reporting -- syntax errors with source snippets, render errors as results.

Parsing never raises from Template(); the error is kept on the template.
render() raises it, render_to() returns it in a RenderResult together
with whatever output was already produced.

Set FORCE_COLOR=1 to see the coloured diagnostics outside a terminal.

Run:
    python app.py
"""

from whisker import SubTemplateError, Template, TemplateSyntaxError

SOURCE = """\
<ul>
  {{#items}}<li>{{name}}</li>
</ul>"""

broken = Template(SOURCE, name="list.mustache")
syntax_error = broken.error
compact = syntax_error.format_compact() if syntax_error else ""

# A partial that includes itself is stopped by the nesting limit
looping = Template("start {{>again}}", name="loop.mustache")
chunks: list[str] = []
result = looping.render_to(chunks.append, {"again": lambda: ".{{>again}}"})
partial_output = "".join(chunks)


def main() -> None:
    print("=== Syntax error ===\n")
    print(compact)
    print()
    print("=== Runtime error ===\n")
    print(f"Output before the error: {partial_output[:20]}...")
    error = result.error
    if isinstance(error, SubTemplateError):
        print(error.root_cause.format_compact())
    try:
        broken.render()
    except TemplateSyntaxError as exc:
        print(f"\nrender() raised {type(exc).__name__} at {exc.location}")


if __name__ == "__main__":
    main()
