"""Template introspection -- static queries before rendering.

required_context(), depends_on(), partial_names() and validate_context()
look at the parsed tree only. Missing names render as nothing, so these
are the way to catch a typo in the data before it ships.

Run:
    python app.py
"""

from whisker import Template

template = Template(
    "{{>header}}"
    "<h2>{{page.title}}</h2>"
    "<p>by {{page.author}}</p>"
    "{{#page.tags}}<span>{{.}}</span>{{/page.tags}}"
    "{{^page.tags}}untagged{{/page.tags}}"
    "{{>footer}}",
    name="page.mustache",
)

required = template.required_context()
deps = template.depends_on()
partials = template.partial_names()

# Validate data before rendering -- catches missing names early
missing = template.validate_context({"page": {"title": "Test"}})

complete = {
    "page": {"title": "Hello", "author": "Alice", "tags": []},
    "header": lambda: "<header>{{site_name}}</header>",
    "footer": lambda: "<footer>(c) 2026</footer>",
    "site_name": "My Site",
}
no_missing = template.validate_context(complete)

lines = [
    f"Required context: {sorted(required)}",
    f"Dependencies: {sorted(deps)}",
    f"Partials: {sorted(partials)}",
    f"Missing (partial data): {missing}",
    f"Missing (complete data): {no_missing}",
]
output = "\n".join(lines)


def main() -> None:
    print("=== Template Introspection ===\n")
    for line in lines:
        print(f"  {line}")
    print()
    print(template.render(complete))


if __name__ == "__main__":
    main()
