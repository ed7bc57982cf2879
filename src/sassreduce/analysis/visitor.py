"""Shared traversal helpers for sassreduce syntax trees.

The reducer does its own recursion because it needs each node's parent
and a return value. These helpers cover the read-only cases: inspecting
reduced trees, collecting placeholders, and tests.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sassreduce.nodes import Node, NodeKind


def walk(node: Node) -> Iterator[tuple[Node, Node | None]]:
    """Yield `(node, parent)` pairs in depth-first document order."""
    stack: list[tuple[Node, Node | None]] = [(node, None)]
    while stack:
        current, parent = stack.pop()
        yield current, parent
        # Reverse so the first child is visited first
        for child in reversed(current.children):
            stack.append((child, current))


def find_all(node: Node, kind: NodeKind) -> list[Node]:
    """Return every node of `kind` in the subtree, in document order."""
    return [found for found, _parent in walk(node) if found.kind is kind]
