"""Pytest configuration and fixtures for sassreduce tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from sassreduce import ReduceConfig, Reducer

VARS_SOURCE = """\
// Theme overrides
$banana: yellow !default;
$brand : #336699 !default;
$keep-list: red, green, blue;
"""


@pytest.fixture
def vars_file(tmp_path: Path) -> Path:
    """Write an override-definitions file and return its absolute path."""
    path = tmp_path / "_vars.scss"
    path.write_text(VARS_SOURCE, encoding="utf-8")
    return path


@pytest.fixture
def reducer(vars_file: Path) -> Reducer:
    """A Reducer loaded from the `vars_file` fixture."""
    return Reducer(ReduceConfig(vars_file=vars_file))


@pytest.fixture
def placeholder_reducer(vars_file: Path) -> Reducer:
    """A templatizing Reducer whose compiler returns its input unchanged."""
    return Reducer(ReduceConfig(vars_file=vars_file, templatize=True), compiler=lambda scss: scss)
