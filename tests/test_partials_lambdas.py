"""Partials and lambdas: re-entrant rendering against the live Context."""

from __future__ import annotations

import pytest

from whisker import Data, Lambda, Partial, Template

from helpers import render


class TestPartials:
    def test_expands_with_current_scope(self, partials):
        data = Data({"title": "Home"})
        data["header"] = partials["header"]
        assert render("{{>header}}", data) == "<h1>Home</h1>"

    def test_inside_list_sees_item_scope(self):
        data = {"items": [{"n": "1"}, {"n": "2"}], "p": lambda: "[{{n}}]"}
        assert render("{{#items}}{{>p}}{{/items}}", data) == "[1][2]"

    def test_defined_in_outer_scope(self, partials):
        data = Data({"people": [{"name": "Ada"}, {"name": "Grace"}]})
        data["item"] = partials["item"]
        out = render("<ul>{{#people}}{{>item}}{{/people}}</ul>", data)
        assert out == "<ul><li>Ada</li><li>Grace</li></ul>"

    def test_missing_partial_renders_nothing(self):
        assert render("[{{>nope}}]") == "[]"

    def test_non_partial_value_renders_nothing(self):
        assert render("[{{>p}}]", {"p": "just a string"}) == "[]"

    def test_first_scope_defining_name_wins(self):
        # The item defines "p" as a string, which hides the outer partial
        data = {"items": [{"p": "shadow"}], "p": lambda: "outer"}
        assert render("[{{#items}}{{>p}}{{/items}}]", data) == "[]"

    def test_output_not_escaped(self):
        assert render("{{>p}}", {"p": lambda: "<b>{{x}}</b>", "x": "&"}) == "<b>&amp;</b>"

    def test_uses_default_delimiters(self):
        data = {"p": lambda: "{{v}}", "v": "V"}
        assert render("{{=<% %>=}}<%>p%>", data) == "V"

    def test_does_not_change_caller_delimiters(self):
        data = {"p": lambda: "{{=| |=}}|v|", "v": "V"}
        assert render("{{>p}}{{v}}", data) == "VV"

    def test_nested_partials(self):
        data = {"outer": lambda: "({{>inner}})", "inner": lambda: "{{v}}", "v": "x"}
        assert render("{{>outer}}", data) == "(x)"

    def test_may_return_string_data(self):
        assert render("{{>p}}", {"p": Partial(lambda: Data("ok"))}) == "ok"

    def test_recursive_partial_terminates_on_data(self):
        tree = {
            "name": "root",
            "kids": [{"name": "a", "kids": [{"name": "a1", "kids": []}]}, {"name": "b", "kids": []}],
            "node": lambda: "{{name}}({{#kids}}{{>node}}{{/kids}})",
        }
        assert render("{{>node}}", tree) == "root(a(a1())b())"


class TestVariableLambdas:
    def test_result_is_rendered_and_escaped(self):
        data = {"l": lambda text: "<{{x}}>", "x": "y"}
        assert render("{{l}}", data) == "&lt;y&gt;"

    @pytest.mark.parametrize("source", ["{{&l}}", "{{{l}}}"])
    def test_unescaped(self, source):
        assert render(source, {"l": lambda text: "<{{x}}>", "x": "y"}) == "<y>"

    def test_receives_empty_text(self):
        seen = []

        def spy(text):
            seen.append(text)
            return ""

        render("{{l}}", {"l": spy})
        assert seen == [""]

    def test_values_inside_result_escaped_once(self):
        data = {"l": lambda text: "{{&x}}", "x": "&"}
        assert render("{{l}}", data) == "&amp;"

    def test_parsed_with_default_delimiters(self):
        data = {"l": lambda text: "{{v}}", "v": "V"}
        assert render("{{=<% %>=}}<%l%>", data) == "V"


class TestSectionLambdas:
    def test_receives_raw_section_text(self):
        seen = []

        def spy(text):
            seen.append(text)
            return text

        out = render("{{#l}}Hi {{name}}{{/l}}", {"l": spy, "name": "Ada"})
        assert seen == ["Hi {{name}}"]
        assert out == "Hi Ada"

    def test_wraps_body(self):
        data = {"bold": lambda text: "<b>" + text + "</b>", "name": "A&B"}
        assert render("{{#bold}}{{name}}{{/bold}}", data) == "<b>A&amp;B</b>"

    def test_result_not_escaped(self):
        assert render("{{#l}}x{{/l}}", {"l": lambda text: "<i>"}) == "<i>"

    def test_children_not_rendered_directly(self):
        assert render("{{#l}}body{{/l}}", {"l": lambda text: "replaced"}) == "replaced"

    def test_uses_live_delimiters(self):
        data = {"wrap": lambda text: "<%v%>" + text, "v": "V"}
        assert render("{{=<% %>=}}<%#wrap%>x<%/wrap%>", data) == "Vx"

    def test_section_text_keeps_nested_tags(self):
        seen = []
        render(
            "{{#l}}a{{#s}}b{{/s}}c{{/l}}",
            {"l": Lambda(lambda text: seen.append(text) or "")},
        )
        assert seen == ["a{{#s}}b{{/s}}c"]

    def test_lambda_may_return_string_data(self):
        assert render("{{#l}}x{{/l}}", {"l": lambda text: Data(text * 2)}) == "xx"

    def test_inverted_lambda_is_truthy(self):
        assert render("[{{^l}}no{{/l}}]", {"l": lambda text: text}) == "[]"


def test_same_template_renders_different_callbacks():
    template = Template("{{#w}}x{{/w}}")
    assert template.render(w=lambda text: text.upper()) == "X"
    assert template.render(w=lambda text: text * 3) == "xxx"
