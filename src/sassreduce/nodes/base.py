"""Base node class for sassreduce syntax trees."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from sassreduce.nodes.kinds import NodeKind

# (prefix, suffix) wrapped around a node's rendered content, as the
# gonzales-pe SCSS stringifier does. Kinds not listed render bare.
_WRAPPERS: dict[NodeKind, tuple[str, str]] = {
    NodeKind.ARGUMENTS: ("(", ")"),
    NodeKind.ATKEYWORD: ("@", ""),
    NodeKind.ATTRIBUTE_SELECTOR: ("[", "]"),
    NodeKind.BLOCK: ("{", "}"),
    NodeKind.BRACKETS: ("[", "]"),
    NodeKind.CLASS: (".", ""),
    NodeKind.COLOR: ("#", ""),
    NodeKind.COMMENT: ("/*", "*/"),
    NodeKind.DEFAULT: ("!", ""),
    NodeKind.EXPRESSION: ("expression(", ")"),
    NodeKind.GLOBAL: ("!", ""),
    NodeKind.ID: ("#", ""),
    NodeKind.IMPORTANT: ("!", ""),
    NodeKind.INTERPOLATED_VARIABLE: ("@{", "}"),
    NodeKind.INTERPOLATION: ("#{", "}"),
    NodeKind.OPTIONAL: ("!", ""),
    NodeKind.PARENTHESIS: ("(", ")"),
    NodeKind.PERCENTAGE: ("", "%"),
    NodeKind.PLACEHOLDER: ("%", ""),
    NodeKind.PSEUDO_CLASS: (":", ""),
    NodeKind.PSEUDO_ELEMENT: ("::", ""),
    NodeKind.SINGLELINE_COMMENT: ("//", ""),
    NodeKind.URI: ("url(", ")"),
    NodeKind.VARIABLE: ("$", ""),
    NodeKind.VARIABLES_LIST: ("", "..."),
}


@dataclass(slots=True)
class Node:
    """A syntax tree node: a kind tag plus children or leaf text.

    Unlike most AST nodes, these are mutable: the reducer removes a
    node's effect by turning it into a comment in place, so parents
    never have their child lists restructured mid-walk.

    Attributes:
        kind: Node kind.
        content: Ordered child nodes, or leaf text.
        source_path: File the tree was parsed from (stylesheet roots only).
        start: Optional (line, column) reported by the parser.
        opaque_type: Parser type string of an `OTHER` node.
    """

    kind: NodeKind
    content: list[Node] | str
    source_path: Path | None = None
    start: tuple[int, int] | None = None
    opaque_type: str | None = None

    @property
    def type_name(self) -> str:
        """Parser type string, including the original one of an `OTHER` node."""
        if self.kind is NodeKind.OTHER and self.opaque_type:
            return self.opaque_type
        return self.kind.value

    @property
    def is_leaf(self) -> bool:
        return isinstance(self.content, str)

    @property
    def children(self) -> list[Node]:
        """Child nodes (empty for leaves)."""
        if isinstance(self.content, str):
            return []
        return self.content

    @property
    def text(self) -> str:
        """Leaf text, or an empty string for composite nodes."""
        return self.content if isinstance(self.content, str) else ""

    def first(self, kind: NodeKind) -> Node | None:
        """Return the first direct child of the given kind."""
        for child in self.children:
            if child.kind is kind:
                return child
        return None

    def to_source(self) -> str:
        """Render this subtree back to SCSS source text."""
        if isinstance(self.content, str):
            body = self.content
        else:
            body = "".join(child.to_source() for child in self.content)
        prefix, suffix = _WRAPPERS.get(self.kind, ("", ""))
        return f"{prefix}{body}{suffix}"

    def replace_with_comment(self, text: str) -> None:
        """Replace this node in place with a comment carrying `text`."""
        self.kind = NodeKind.COMMENT
        self.content = f" {text} "
        self.opaque_type = None

    def __str__(self) -> str:
        return self.to_source()
