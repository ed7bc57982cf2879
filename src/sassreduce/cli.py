"""Command line interface.

Reads a gonzales-pe JSON tree, reduces it, and writes the reduced tree as
JSON (or, with ``--templatize``, the rendered template text).

Usage:
    gonzales parse --syntax scss main.scss > main.json
    sassreduce main.json --vars-file _variables.scss > reduced.json
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from sassreduce.analysis import Reducer
from sassreduce.config import ReduceConfig
from sassreduce.environment.exceptions import ReduceError
from sassreduce.nodes import from_json, to_json

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sassreduce",
        description="Prune a parsed SCSS tree to what override variables reach",
    )
    parser.add_argument("tree", help="gonzales-pe JSON tree file, or - for stdin")
    parser.add_argument(
        "--vars-file", required=True, help="Override variable definitions (.scss)"
    )
    parser.add_argument("--cwd", help="Base directory for a relative --vars-file")
    parser.add_argument(
        "--templatize",
        action="store_true",
        help="Render with libsass and emit template references for overrides",
    )
    parser.add_argument("-o", "--output", help="Write here instead of stdout")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.tree == "-":
            text = sys.stdin.read()
        else:
            text = Path(args.tree).read_text("utf-8")
    except OSError as e:
        print(f"sassreduce: cannot read {args.tree}: {e}", file=sys.stderr)
        return 1

    config = ReduceConfig(vars_file=args.vars_file, cwd=args.cwd, templatize=args.templatize)
    try:
        tree = from_json(text)
        reducer = Reducer(config)
        result = reducer.run(tree)
    except ReduceError as e:
        print(e.format_compact(), file=sys.stderr)
        return 1

    output = result if isinstance(result, str) else to_json(result)
    if args.output:
        Path(args.output).write_text(output, "utf-8")
        logger.info("Wrote %s", args.output)
    else:
        sys.stdout.write(output)
        if not output.endswith("\n"):
            sys.stdout.write("\n")
    return 0
