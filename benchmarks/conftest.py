from __future__ import annotations

import importlib.metadata as importlib_metadata
import json
import os
import platform
import sys
from collections.abc import Callable
from pathlib import Path

import pytest

from sassreduce import Node
from tests.trees import decl, each, extend, ident, include, mixin, ruleset, stylesheet, var

BASE_DIR = Path(__file__).resolve().parent
BENCHMARK_OUTPUT_DIR = BASE_DIR.parent / ".benchmarks"
BENCHMARK_OUTPUT_DIR.mkdir(exist_ok=True)

VARS_SOURCE = "$brand: #336699 !default;\n$gutter: 16px !default;\n$palette: red, blue;\n"


def _version(dist: str) -> str:
    try:
        return importlib_metadata.version(dist)
    except importlib_metadata.PackageNotFoundError:
        return "unknown"


def collect_environment_metadata() -> dict[str, object]:
    """Capture reproducibility metadata for each benchmark run."""
    return {
        "python": {
            "version": platform.python_version(),
            "implementation": platform.python_implementation(),
            "executable": sys.executable,
        },
        "os": {
            "system": platform.system(),
            "release": platform.release(),
            "machine": platform.machine(),
        },
        "cpu": {
            "processor": platform.processor(),
            "count": os.cpu_count(),
        },
        "sassreduce": _version("sassreduce"),
    }


def build_codebase(modules: int) -> Node:
    """A synthetic codebase: per module a mixin, component rules, a loop.

    Roughly a third of the declarations read an override.
    """
    items: list[Node] = [decl(var("brand"), ident("#336699"))]
    for i in range(modules):
        items.append(mixin(f"m{i}", decl("color", var("brand")), decl("width", var("local"))))
        items.append(
            ruleset(
                f".c{i}",
                decl("margin", var("gutter")),
                decl("padding", var("spacing")),
                ruleset(f".c{i}__item", decl("color", ident("red")), include(f"m{i}")),
            )
        )
        items.append(ruleset(f".c{i}--alt", extend(f".c{i} .c{i}__item"), decl("border", var("edge"))))
        items.append(each("c", "palette", ruleset(f".t{i}", decl("color", var("c")))))
    return stylesheet(*items)


@pytest.fixture(scope="session", autouse=True)
def environment_metadata() -> dict[str, object]:
    """Write environment metadata to .benchmarks for ingestion."""
    metadata = collect_environment_metadata()
    (BENCHMARK_OUTPUT_DIR / "environment.json").write_text(json.dumps(metadata, indent=2))
    return metadata


@pytest.fixture(scope="session")
def vars_file(tmp_path_factory: pytest.TempPathFactory) -> Path:
    path = tmp_path_factory.mktemp("vars") / "_vars.scss"
    path.write_text(VARS_SOURCE, encoding="utf-8")
    return path


@pytest.fixture(scope="session")
def codebase() -> Callable[[int], Node]:
    """Factory for fresh synthetic trees (reduction mutates them)."""
    return build_codebase
