"""Partials -- reusable template fragments supplied by the data.

There is no template loader: a partial is a zero-argument callable in the
data that returns template text. The body renders against the scopes in
effect where the ``{{>name}}`` tag appears, so a partial used inside a
section sees the current item.

Run:
    python app.py
"""

from whisker import Partial, Template

FRAGMENTS = {
    "layout": "<html><body>{{>nav}}<main>{{>content}}</main></body></html>",
    "nav": "<nav>{{#links}}{{>link}}{{/links}}</nav>",
    "link": '<a href="{{href}}">{{label}}</a>',
    "content": "<h1>{{title}}</h1>",
}


def fragment(name: str) -> Partial:
    """Partial that returns one of the FRAGMENTS."""
    return Partial(lambda: FRAGMENTS[name])


data = {
    "title": "Docs",
    "links": [
        {"href": "/", "label": "Home"},
        {"href": "/docs", "label": "Docs & Guides"},
    ],
    **{name: fragment(name) for name in FRAGMENTS},
}

template = Template("<!doctype html>{{>layout}}", name="page.mustache")
output = template.render(data)


def main() -> None:
    print(output)


if __name__ == "__main__":
    main()
