"""Override-driven tree reduction.

Prunes a parsed SCSS tree down to the parts reachable from a set of
override variables. One depth-first walk does three things at once:

1. Classifies variable references: an override variable, or a loop local
   bound from one, is *keepable* when it is read.
2. Propagates keep decisions upward through declarations, rulesets,
   mixins and loops, and sideways to later ``@extend``/``@include``
   directives through the liveness registries.
3. Replaces every removable node that keeps nothing with a comment naming
   what was there, leaving the tree's shape unchanged.

Example:
    >>> reducer = Reducer(ReduceConfig(vars_file="_vars.scss"))
    >>> tree = reducer.run(tree)        # same root, reduced in place

Known limitation:
    Resolution is single-pass in document order. An ``@include`` of a
    mixin defined further down, or an ``@extend`` of a selector defined
    further down, is pruned.
"""

from __future__ import annotations

import logging
import re
from collections import Counter
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from sassreduce.analysis.liveness import LivenessState
from sassreduce.config import ReduceConfig
from sassreduce.environment.loaders import OverrideSet, load_overrides, resolve_vars_file
from sassreduce.nodes import Node, NodeKind
from sassreduce.template.placeholders import ReferenceFormat, make_placeholder, parse_placeholder
from sassreduce.template.templatizer import Compiler, Templatizer

logger = logging.getLogger(__name__)

_EXTEND_KEYWORD = re.compile(r"^\s*@extend\s+")
_INCLUDE_NAME = re.compile(r"@include\s+([^\s({;]+)")

# Handlers return a final keep decision, or None to fall through to descent
_Handler = Callable[[Node, Node | None], bool | None]


@dataclass(slots=True)
class ReduceStats:
    """What one walk removed and rewrote.

    Attributes:
        dropped: Number of nodes replaced by comments, keyed by the kind
            name written into the comment ("declaration", "varsfile", ...).
        placeholders: Number of override reads rewritten as placeholders.
    """

    dropped: Counter[str] = field(default_factory=Counter)
    placeholders: int = 0

    @property
    def total_dropped(self) -> int:
        return sum(self.dropped.values())


class Reducer:
    """Reduce SCSS syntax trees to their override-reachable parts.

    Args:
        config: Reduction configuration; `config.vars_file` is required
            unless `overrides` is given.
        overrides: A preloaded OverrideSet, shared read-only between
            reducers. Skips reading the vars file.
        templatize: Overrides `config.templatize`.
        compiler: SCSS -> CSS callable used when templatizing.
        reference_format: Placeholder restoration format used when
            templatizing.

    Raises:
        ConfigurationError: No vars file was configured.
        VarsFileError: The vars file could not be read.

    Thread-Safety:
        Not thread-safe. A Reducer owns the mutable state of its walk;
        reduce concurrent trees with one Reducer each.
    """

    def __init__(
        self,
        config: ReduceConfig | None = None,
        *,
        overrides: OverrideSet | None = None,
        templatize: bool | None = None,
        compiler: Compiler | None = None,
        reference_format: ReferenceFormat | None = None,
    ) -> None:
        self.config = config or ReduceConfig()
        if overrides is None:
            overrides = load_overrides(self.config.vars_file, self.config.cwd, self.config.encoding)
        self.overrides = overrides
        self.vars_file = overrides.path
        self.templatize = self.config.templatize if templatize is None else templatize
        self.templatizer = Templatizer(compiler, reference_format) if self.templatize else None
        self.state = LivenessState()
        self.stats = ReduceStats()
        self._dispatch: dict[NodeKind, _Handler] = {
            NodeKind.SELECTOR: self._visit_selector,
            NodeKind.LOOP: self._visit_loop,
            NodeKind.VARIABLE: self._visit_variable,
            NodeKind.IDENTIFIER: self._visit_ident,
            NodeKind.EXTEND: self._visit_extend,
            NodeKind.INCLUDE: self._visit_include,
            NodeKind.STYLESHEET: self._visit_stylesheet,
        }

    @classmethod
    def from_options(cls, options: Mapping[str, Any], **kwargs: Any) -> Reducer:
        """Build a Reducer from an option mapping (``varsFile``, ``cwd``, ``templatize``)."""
        return cls(ReduceConfig.from_options(options), **kwargs)

    def run(self, tree: Node) -> Node | str:
        """Reduce `tree` in place from a fresh state.

        Returns:
            The reduced tree, or the rendered template text when
            templatizing.
        """
        self.state = LivenessState()
        self.stats = ReduceStats()
        self.reduce(tree)
        logger.debug(
            "Reduced tree: dropped %d nodes %s, %d placeholders",
            self.stats.total_dropped,
            dict(self.stats.dropped),
            self.stats.placeholders,
        )
        if self.templatizer is not None:
            return self.templatizer.render(tree)
        return tree

    def reduce(self, node: Node, parent: Node | None = None) -> bool:
        """Reduce the subtree at `node`, returning True if it must be kept."""
        handler = self._dispatch.get(node.kind)
        if handler is not None:
            decision = handler(node, parent)
            if decision is not None:
                return decision
        return self._descend(node)

    # -- descent --------------------------------------------------------

    def _descend(self, node: Node) -> bool:
        depth = self.state.selector_depth
        keep = False
        for child in node.children:
            # Every child is visited; registries depend on it
            keep = self.reduce(child, node) or keep

        kind = node.kind
        if kind is NodeKind.MIXIN and keep:
            self._keep_mixin(node)
        elif kind is NodeKind.RULESET:
            if keep:
                self.state.keep_selector_paths()
            self.state.restore_selector_depth(depth)
        elif kind is NodeKind.LOOP:
            self.state.exit_loop()

        if not keep and kind.is_removable:
            return self._drop(node)
        return keep

    def _drop(self, node: Node, description: str | None = None) -> bool:
        description = description or node.kind.value
        self.stats.dropped[description] += 1
        node.replace_with_comment(description)
        return False

    def _keep_mixin(self, node: Node) -> None:
        ident = node.first(NodeKind.IDENTIFIER)
        if ident is None or not ident.is_leaf:
            logger.debug("Mixin without a name identifier, not registered: %r", node.to_source()[:60])
            return
        self.state.keep_mixin(ident.text)

    # -- handlers -------------------------------------------------------

    def _visit_selector(self, node: Node, parent: Node | None) -> bool | None:
        # A selector list (`.a, .b`) is one stack entry for its ruleset
        if (
            parent is not None
            and parent.kind is NodeKind.RULESET
            and parent.first(NodeKind.SELECTOR) is node
        ):
            alternatives = _selector_alternatives(parent)
            if alternatives:
                self.state.push_selector(*alternatives)
        return None

    def _visit_loop(self, node: Node, parent: Node | None) -> bool | None:
        self.state.enter_loop(_loop_header(node), self.overrides)
        return None

    def _visit_variable(self, node: Node, parent: Node | None) -> bool | None:
        if parent is None:
            return None

        name = node.to_source()
        is_override = name in self.overrides
        is_keepable = self.state.is_keepable(name, self.overrides)
        is_read = parent.kind.is_read_context

        if self.templatize and is_override and is_read:
            ident = node.first(NodeKind.IDENTIFIER)
            bare = ident.text if ident is not None and ident.is_leaf else name
            node.kind = NodeKind.IDENTIFIER
            node.content = make_placeholder(bare)
            self.stats.placeholders += 1

        # Assignments are always kept ($banana: yellow;), reads only when keepable
        return parent.kind is NodeKind.PROPERTY or (is_read and is_keepable)

    def _visit_ident(self, node: Node, parent: Node | None) -> bool | None:
        # A placeholder written by an earlier templatizing pass still reads an override
        if parent is None or not parent.kind.is_read_context or not node.is_leaf:
            return None
        name = parse_placeholder(node.text)
        if name is not None and f"${name}" in self.overrides:
            return True
        return None

    def _visit_extend(self, node: Node, parent: Node | None) -> bool | None:
        if self.state.has_extend(_extend_target(node)):
            return True
        return None

    def _visit_include(self, node: Node, parent: Node | None) -> bool | None:
        name = _include_name(node)
        if name is not None and self.state.has_mixin(name):
            return True
        return None

    def _visit_stylesheet(self, node: Node, parent: Node | None) -> bool | None:
        if node.source_path is None:
            return None
        if resolve_vars_file(node.source_path, self.config.cwd) == self.vars_file:
            # Inlined copy of the vars file: drop it from the compilation entirely
            return self._drop(node, "varsfile")
        return None


def _selector_alternatives(ruleset: Node) -> list[str]:
    """Each comma-separated selector of a ruleset, e.g. ``[".a", ".b > p"]``."""
    alternatives: list[str] = []
    for child in ruleset.children:
        if child.kind is NodeKind.BLOCK:
            break
        if child.kind is NodeKind.SELECTOR:
            alternatives.extend(_split_selector_list(child.to_source()))
    return alternatives


def _split_selector_list(text: str) -> list[str]:
    """Split on commas outside parentheses and brackets (`:not(.a, .b)` stays whole)."""
    parts: list[str] = []
    depth = 0
    start = 0
    for i, char in enumerate(text):
        if char in "([":
            depth += 1
        elif char in ")]":
            depth -= 1
        elif char == "," and depth == 0:
            parts.append(text[start:i])
            start = i + 1
    parts.append(text[start:])
    return [part.strip() for part in parts if part.strip()]


def _loop_header(node: Node) -> str:
    """Source of a loop up to its body, e.g. ``@each $c in $colors``."""
    parts: list[str] = []
    for child in node.children:
        if child.kind is NodeKind.BLOCK:
            return "".join(parts)
        parts.append(child.to_source())
    return node.to_source().split("\n")[0]


def _extend_target(node: Node) -> str:
    target = _EXTEND_KEYWORD.sub("", node.to_source()).strip()
    return target.removesuffix("!optional").strip()


def _include_name(node: Node) -> str | None:
    match = _INCLUDE_NAME.search(node.to_source())
    return match.group(1) if match else None


def reduce_stylesheet(
    tree: Node,
    vars_file: str | Path | None = None,
    *,
    cwd: str | Path | None = None,
    templatize: bool = False,
    compiler: Compiler | None = None,
    overrides: OverrideSet | None = None,
) -> Node | str:
    """Reduce one tree with a fresh Reducer.

    Example:
        >>> reduce_stylesheet(tree, "_vars.scss", cwd="styles/")
    """
    config = ReduceConfig(vars_file=vars_file, cwd=cwd, templatize=templatize)
    return Reducer(config, overrides=overrides, compiler=compiler).run(tree)
