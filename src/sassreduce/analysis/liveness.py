"""Liveness registries for a single reduction walk.

Three kinds of deferred bindings decide whether a node survives:

- **Extend targets**: selector paths of rulesets already proven live, so a
  later `@extend .a .b;` can be kept.
- **Mixins**: names of mixin definitions already proven live, so a later
  `@include name;` can be kept.
- **Loop locals**: names bound by the current `@each`/`@for` header when
  that header reads an override variable (`@each $c in $keep-colors`).

State transitions:
    push_selector       on entering a ruleset's selector list
    keep_selector_paths when a ruleset closes with something kept
    restore_selector_depth  when any ruleset closes
    keep_mixin          when a mixin definition closes with something kept
    enter_loop          on entering a loop (overwrites the loop scope)
    exit_loop           when a loop closes (clears the loop scope)

The registries only ever grow during a walk. Resolution is by document
order: a mixin or selector defined after its use is not known yet when
the use is visited.

Thread-Safety:
A `LivenessState` belongs to exactly one walk. Reducers reducing trees
concurrently must each own one.
"""

from __future__ import annotations

import itertools
import re
from collections.abc import Container
from dataclasses import dataclass, field

from sassreduce.template.placeholders import PLACEHOLDER_PATTERN

_LOOP_VARIABLE = re.compile(r"\$[\w-]+")


@dataclass(slots=True)
class LivenessState:
    """Mutable per-walk state: selector stack, registries, loop scope."""

    selectors: list[tuple[str, ...]] = field(default_factory=list)
    extends: dict[str, bool] = field(default_factory=dict)
    mixins: dict[str, bool] = field(default_factory=dict)
    loop_locals: frozenset[str] = frozenset()

    # -- selector scope -------------------------------------------------

    def push_selector(self, *alternatives: str) -> None:
        """Enter a ruleset whose selector list is `alternatives` (``.a, .b``)."""
        self.selectors.append(alternatives)

    @property
    def selector_depth(self) -> int:
        return len(self.selectors)

    def selector_paths(self) -> list[str]:
        """Fully-qualified paths of the current ruleset, e.g. ``[".nav .item"]``.

        Selector lists multiply out level by level, as Sass nests them:
        ``.x { .a, .b { ... } }`` has the paths ``.x .a`` and ``.x .b``.
        """
        return [" ".join(parts) for parts in itertools.product(*self.selectors)]

    def restore_selector_depth(self, depth: int) -> None:
        """Pop selectors pushed since the stack was at `depth`."""
        del self.selectors[depth:]

    # -- extend registry ------------------------------------------------

    def keep_selector_paths(self) -> list[str]:
        """Register every path of the current ruleset as a live extend target."""
        if not self.selectors:
            return []
        paths = self.selector_paths()
        for path in paths:
            self.extends[path] = True
        return paths

    def has_extend(self, target: str) -> bool:
        return self.extends.get(target, False)

    # -- mixin registry -------------------------------------------------

    def keep_mixin(self, name: str) -> None:
        self.mixins[name] = True

    def has_mixin(self, name: str) -> bool:
        return self.mixins.get(name, False)

    # -- loop scope -----------------------------------------------------

    def enter_loop(self, header: str, overrides: Container[str]) -> frozenset[str]:
        """Bind the variables named in a loop header.

        The names only count as loop locals when at least one of them is an
        override variable; otherwise the scope is emptied. Any scope left by
        an enclosing loop is replaced, not extended.
        """
        names = frozenset(_LOOP_VARIABLE.findall(header))
        # Placeholders left by an earlier templatizing pass still name overrides
        placeholders = (f"${name}" for name in PLACEHOLDER_PATTERN.findall(header))
        if any(name in overrides for name in names) or any(
            name in overrides for name in placeholders
        ):
            self.loop_locals = names
        else:
            self.loop_locals = frozenset()
        return self.loop_locals

    def exit_loop(self) -> None:
        self.loop_locals = frozenset()

    def is_keepable(self, name: str, overrides: Container[str]) -> bool:
        """True for override variables and live loop locals."""
        return name in overrides or name in self.loop_locals
