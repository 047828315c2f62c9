"""Streaming rendering -- chunked output with render_to().

render_to() hands each piece of output to a callable as soon as it is
produced, so a large list can be written to a socket or file without
building the whole string first.

Run:
    python app.py
"""

import sys

from whisker import Template

template = Template(
    """\
<h1>{{title}}</h1>
<table>
{{#sections}}
<tr><td>{{name}}</td><td>{{value}}</td><td>{{#up}}+{{/up}}{{^up}}-{{/up}}</td></tr>
{{/sections}}
</table>
""",
    name="report.mustache",
)

data = {
    "title": "Quarterly Report",
    "sections": [
        {"name": "Revenue", "value": "$1.2M", "up": True},
        {"name": "Users", "value": "45,000", "up": True},
        {"name": "Churn", "value": "2.1%", "up": False},
    ],
}

# Collect chunks for testing
chunks: list[str] = []
result = template.render_to(chunks.append, data)
output = "".join(chunks)


def main() -> None:
    print(f"Streaming {len(chunks)} chunks:\n")
    for i, chunk in enumerate(chunks):
        print(f"[chunk {i}] {chunk!r}")
    print("\n--- Written straight to stdout ---\n")
    template.render_into(sys.stdout, data).raise_for_error()


if __name__ == "__main__":
    main()
