"""Conversion between gonzales-pe JSON trees and `Node` objects.

The gonzales-pe parser serializes each node as a dictionary::

    {"type": "ruleset", "content": [...], "syntax": "scss",
     "start": {"line": 1, "column": 1}, "end": {...}}

Leaf nodes carry a string `content`. The root may also carry the file it
was parsed from under `"filepath"` (the key gonzales uses) or
`"sourcePath"`.

Type strings the parser emits but `NodeKind` does not list decode as
`NodeKind.OTHER` and keep their original type, so they round-trip.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from sassreduce.environment.exceptions import TreeDecodeError
from sassreduce.nodes.base import Node
from sassreduce.nodes.kinds import NodeKind

_PATH_KEYS = ("filepath", "sourcePath")


def from_dict(data: Mapping[str, Any]) -> Node:
    """Build a `Node` tree from a gonzales-pe dictionary."""
    return _decode(data, "$")


def _decode(data: Any, where: str) -> Node:
    if not isinstance(data, Mapping):
        raise TreeDecodeError(f"expected an object, got {type(data).__name__}", where=where)

    type_name = data.get("type")
    if not isinstance(type_name, str) or not type_name:
        raise TreeDecodeError(
            f"node type must be a non-empty string, got {type_name!r}", where=where
        )
    kind = NodeKind.from_type(type_name)
    opaque_type = type_name if kind is NodeKind.OTHER else None

    raw = data.get("content")
    content: list[Node] | str
    if isinstance(raw, str):
        content = raw
    elif isinstance(raw, list):
        content = [_decode(child, f"{where}.content[{i}]") for i, child in enumerate(raw)]
    else:
        raise TreeDecodeError(
            f"node content must be a list or string, got {type(raw).__name__}", where=where
        )

    source_path = None
    for key in _PATH_KEYS:
        if data.get(key):
            source_path = Path(data[key])
            break

    start = None
    position = data.get("start")
    if isinstance(position, Mapping) and "line" in position and "column" in position:
        start = (int(position["line"]), int(position["column"]))

    return Node(kind, content, source_path=source_path, start=start, opaque_type=opaque_type)


def to_dict(node: Node) -> dict[str, Any]:
    """Serialize a `Node` tree to a gonzales-pe style dictionary."""
    data: dict[str, Any] = {"type": node.type_name}
    if isinstance(node.content, str):
        data["content"] = node.content
    else:
        data["content"] = [to_dict(child) for child in node.content]
    data["syntax"] = "scss"
    if node.start is not None:
        data["start"] = {"line": node.start[0], "column": node.start[1]}
    if node.source_path is not None:
        data["filepath"] = str(node.source_path)
    return data


def from_json(text: str) -> Node:
    """Parse gonzales-pe JSON text into a `Node` tree."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise TreeDecodeError(f"invalid JSON: {e.msg}", where=f"line {e.lineno}") from e
    return from_dict(data)


def to_json(node: Node, indent: int | None = 2) -> str:
    """Serialize a `Node` tree to gonzales-pe JSON text."""
    return json.dumps(to_dict(node), indent=indent)
