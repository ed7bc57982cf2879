"""Shared hypothesis strategies for sassreduce property-based testing.

Generates stylesheet trees from small name pools, so override reads,
mixin names and selector paths collide often enough for the liveness
registries to matter.
"""

from __future__ import annotations

from hypothesis import strategies as st

from .trees import decl, each, extend, include, mixin, ruleset, ruleset_list, stylesheet, var

# Overrides used with these trees: $banana and $brand
override_names = frozenset({"$banana", "$brand"})

_properties = st.sampled_from(["color", "width", "margin"])
_variables = st.sampled_from(["banana", "brand", "apple", "pear", "c"])
_selectors = st.sampled_from([".a", ".b", ".a .b", "#nav"])
_selector_lists = st.lists(_selectors, min_size=2, max_size=3)
_mixin_names = st.sampled_from(["foo", "bar"])

declarations = st.builds(lambda prop, name: decl(prop, var(name)), _properties, _variables)
assignments = st.builds(lambda name, other: decl(var(name), var(other)), _variables, _variables)

leaf_statements = st.one_of(
    declarations,
    assignments,
    st.builds(include, _mixin_names),
    st.builds(extend, _selectors),
)


def _compound(children: st.SearchStrategy) -> st.SearchStrategy:
    bodies = st.lists(children, max_size=4)
    return st.one_of(
        st.builds(lambda sel, body: ruleset(sel, *body), _selectors, bodies),
        st.builds(lambda sels, body: ruleset_list(sels, *body), _selector_lists, bodies),
        st.builds(lambda name, body: mixin(name, *body), _mixin_names, bodies),
        st.builds(lambda it, body: each("c", it, *body), _variables, bodies),
    )


statements = st.recursive(leaf_statements, _compound, max_leaves=20)

stylesheets = st.lists(statements, max_size=6).map(lambda items: stylesheet(*items))
