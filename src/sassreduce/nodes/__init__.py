"""Syntax tree nodes for sassreduce.

Trees are produced by an external parser (gonzales-pe JSON, via
`sassreduce.nodes.codec`) or built directly in Python.
"""

from sassreduce.nodes.base import Node
from sassreduce.nodes.codec import from_dict, from_json, to_dict, to_json
from sassreduce.nodes.kinds import READ_CONTEXT_KINDS, REMOVABLE_KINDS, NodeKind

__all__ = [
    "READ_CONTEXT_KINDS",
    "REMOVABLE_KINDS",
    "Node",
    "NodeKind",
    "from_dict",
    "from_json",
    "to_dict",
    "to_json",
]
