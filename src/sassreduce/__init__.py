"""sassreduce: prune SCSS syntax trees down to what override variables reach.

Large Sass codebases are usually customized through a small set of
override variables (a `_variables.scss` of `$name: value !default;`
lines). sassreduce takes a parsed stylesheet tree and keeps only the
rules, mixins, loops and assignments those variables can affect, so a
downstream compile only processes the override-relevant slice.

Quickstart:
    >>> from sassreduce import Reducer, ReduceConfig, from_json
    >>> tree = from_json(Path("main.scss.json").read_text())
    >>> reducer = Reducer(ReduceConfig(vars_file="_variables.scss"))
    >>> reducer.run(tree).to_source()

Templatizing:
    With ``templatize=True`` override reads are rewritten to placeholders
    (``color: $brand;`` becomes ``color: ____brand____;``), the reduced tree
    is compiled with a Sass compiler, and the placeholders in the CSS are
    restored as template references (``color: {{ brand }};``):

    >>> reduce_stylesheet(tree, "_variables.scss", templatize=True,
    ...                   compiler=libsass_compiler())

Architecture:
Parser JSON → Node tree → Reducer (one walk) → reduced tree
                                            └→ Templatizer → template text

"""

from sassreduce.analysis import LivenessState, Reducer, ReduceStats, reduce_stylesheet
from sassreduce.config import ReduceConfig
from sassreduce.environment import (
    CompilerError,
    ConfigurationError,
    ErrorCode,
    OverrideSet,
    ReduceError,
    TreeDecodeError,
    VarsFileError,
    load_overrides,
)
from sassreduce.nodes import Node, NodeKind, from_dict, from_json, to_dict, to_json
from sassreduce.template import (
    Templatizer,
    libsass_compiler,
    make_placeholder,
    restore_placeholders,
)

__version__ = "0.1.0"

__all__ = [
    "CompilerError",
    "ConfigurationError",
    "ErrorCode",
    "LivenessState",
    "Node",
    "NodeKind",
    "OverrideSet",
    "ReduceConfig",
    "ReduceError",
    "ReduceStats",
    "Reducer",
    "Templatizer",
    "TreeDecodeError",
    "VarsFileError",
    "__version__",
    "from_dict",
    "from_json",
    "libsass_compiler",
    "load_overrides",
    "make_placeholder",
    "reduce_stylesheet",
    "restore_placeholders",
    "to_dict",
    "to_json",
]
