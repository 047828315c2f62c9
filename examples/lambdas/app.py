"""Lambdas -- callables that rewrite template text.

A one-argument callable in the data is a lambda. As a section it receives
the raw, unrendered section body and returns template text that is then
rendered in place. As a variable it receives an empty string and its
rendered result is escaped like any other value.

Run:
    python app.py
"""

from whisker import Template


def bold(text: str) -> str:
    return "<b>" + text + "</b>"


def upper(text: str) -> str:
    # Tag names are upper-cased too; the data carries GREETING
    return text.upper()


def today(_: str) -> str:
    return "{{year}}"


template = Template(
    "{{#bold}}Hi {{name}}{{/bold}} | {{#upper}}{{greeting}}{{/upper}} | "
    "{{today}} | {{=<% %>=}}<%#bold%><%name%><%/bold%>",
    name="lambdas.mustache",
)

data = {
    "bold": bold,
    "upper": upper,
    "today": today,
    "name": "Ada & Co",
    "greeting": "hello",
    "GREETING": "HELLO",
    "year": "2026",
}

output = template.render(data)


def main() -> None:
    print(output)


if __name__ == "__main__":
    main()
