"""Hello World -- the simplest whisker example.

Build a template from a string and render it with data.

Run:
    python app.py
"""

from whisker import Environment

env = Environment()

template = env.from_string("Hello, {{name}}!")

output = template.render(name="World")


def main() -> None:
    print(output)
    print()

    # Same template, different data
    for name in ["Whisker", "Mustache", "Python"]:
        print(template.render(name=name))


if __name__ == "__main__":
    main()
