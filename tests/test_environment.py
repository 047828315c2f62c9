"""Environment configuration: escaping, nesting depth, factories."""

import pytest

from whisker import Environment, Template
from whisker.environment.core import DEFAULT_MAX_DEPTH, get_default_environment
from whisker.nodes import Root, Tag


class TestEscape:
    def test_default_html_escape(self, env):
        assert env.from_string("{{x}}").render(x="<script>") == "&lt;script&gt;"

    def test_custom_escape(self):
        env = Environment(escape=str.upper)
        assert env.from_string("{{x}} {{&x}}").render(x="hi") == "HI hi"

    def test_identity_escape(self):
        env = Environment(escape=lambda text: text)
        assert env.render_string("{{x}}", x="<b>") == "<b>"

    def test_escape_applies_to_variable_lambdas(self):
        env = Environment(escape=lambda text: f"[{text}]")
        assert env.render_string("{{l}}", l=lambda text: "r") == "[r]"

    def test_escape_applies_inside_partials(self):
        env = Environment(escape=str.upper)
        assert env.render_string("{{>p}}", p=lambda: "{{x}}", x="a") == "A"


class TestMaxDepth:
    def test_default(self, env):
        assert env.max_depth == DEFAULT_MAX_DEPTH == 50

    def test_rejects_non_positive(self):
        with pytest.raises(ValueError):
            Environment(max_depth=0)

    def test_limit_allows_exact_depth(self):
        env = Environment(max_depth=2)
        data = {"a": lambda: "{{>b}}", "b": lambda: "ok"}
        assert env.render_string("{{>a}}", data) == "ok"


class TestFactories:
    def test_from_string_binds_environment(self, env):
        template = env.from_string("x", name="t")
        assert template.env is env
        assert template.name == "t"
        assert template.source == "x"

    def test_template_without_env_uses_default(self):
        assert Template("x").env is get_default_environment()

    def test_default_environment_is_shared(self):
        assert get_default_environment() is get_default_environment()

    def test_parse_returns_tree(self, env):
        root = env.parse("a{{b}}")
        assert isinstance(root, Root)
        assert isinstance(root.children[1], Tag)

    def test_render_string(self, env):
        assert env.render_string("{{#x}}{{.}}{{/x}}", {"x": ["1", "2"]}) == "12"

    def test_repr(self):
        assert repr(Environment(max_depth=7)) == "Environment(max_depth=7)"

    def test_template_repr(self, env):
        assert repr(env.from_string("x", name="page")) == "<Template page valid>"
        assert repr(env.from_string("{{x")) == "<Template (inline) invalid>"
