"""Shared hypothesis strategies for Whisker property-based testing.

- **Text**: literal text that can never contain a tag
- **Tags**: well-formed variable, comment and section tags
- **Data**: small data trees for rendering
"""

from __future__ import annotations

from hypothesis import strategies as st

# ---------------------------------------------------------------------------
# Text strategies
# ---------------------------------------------------------------------------

# No braces at all, so the default begin marker cannot appear
plain_text = st.text(
    alphabet=st.characters(
        blacklist_categories=("Cs",),  # no surrogates
        blacklist_characters="{}",
    ),
    min_size=0,
    max_size=200,
)

# Anything, including stray and unbalanced markers
arbitrary_template_source = st.text(
    alphabet=st.characters(blacklist_categories=("Cs",)),
    min_size=0,
    max_size=300,
)

# Bias toward marker-heavy input that exercises every scanner branch
marker_soup = st.lists(
    st.sampled_from(
        ["{{", "}}", "{{{", "}}}", "#", "^", "/", ">", "&", "!", "=", " ", "a", "b", ".", "<%", "%>"]
    ),
    max_size=40,
).map("".join)

# ---------------------------------------------------------------------------
# Tag strategies
# ---------------------------------------------------------------------------

identifier = st.from_regex(r"[a-z_][a-z0-9_]{0,8}", fullmatch=True)

variable_tag = identifier.map(lambda name: f"{{{{{name}}}}}")
unescaped_tag = identifier.map(lambda name: f"{{{{{{{name}}}}}}}")
comment_tag = st.from_regex(r"[a-zA-Z0-9_ ]{0,20}", fullmatch=True).map(
    lambda body: f"{{{{!{body}}}}}"
)

_leaf = st.one_of(plain_text.map(lambda s: s[:20]), variable_tag, unescaped_tag, comment_tag)


def _section(children: st.SearchStrategy[str]) -> st.SearchStrategy[str]:
    return st.tuples(identifier, st.sampled_from("#^"), st.lists(children, max_size=3)).map(
        lambda parts: f"{{{{{parts[1]}{parts[0]}}}}}{''.join(parts[2])}{{{{/{parts[0]}}}}}"
    )


# Balanced templates: text, variables, comments and nested sections
well_formed_template = st.recursive(_leaf, _section, max_leaves=12)
well_formed_fragments = st.lists(well_formed_template, max_size=5).map("".join)

# ---------------------------------------------------------------------------
# Data strategies
# ---------------------------------------------------------------------------

scalar_values = st.one_of(
    st.text(max_size=10),
    st.booleans(),
    st.integers(min_value=-1000, max_value=1000),
)

data_trees = st.recursive(
    scalar_values,
    lambda children: st.one_of(
        st.lists(children, max_size=3),
        st.dictionaries(identifier, children, max_size=3),
    ),
    max_leaves=10,
)

root_data = st.dictionaries(identifier, data_trees, max_size=5)
