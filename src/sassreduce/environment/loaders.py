"""Override-set loading.

The override-definitions file is an ordinary SCSS partial (typically a
`_variables.scss` full of `$name: value !default;` lines). Every variable
token in it, written as `$name` and followed by whitespace or a colon,
becomes an override variable. Whether the variable has a default, or is
being assigned at all, does not matter.

Example:
    >>> overrides = load_overrides("_variables.scss", cwd="styles/")
    >>> "$brand-primary" in overrides
    True

Thread-Safety:
An `OverrideSet` is immutable once loaded and may be shared by any number
of reducers running at the same time.
"""

from __future__ import annotations

import os
import re
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from sassreduce.environment.exceptions import ConfigurationError, VarsFileError

# `$name` followed by whitespace or a colon
_OVERRIDE_PATTERN = re.compile(r"(\$[^\s:]+)[\s:]")


@dataclass(frozen=True, slots=True)
class OverrideSet:
    """Immutable set of override variable names (with their `$` sigil).

    Attributes:
        names: Variable tokens such as ``"$brand-primary"``.
        path: Resolved path of the file the names were read from.
    """

    names: frozenset[str]
    path: Path

    def __contains__(self, name: object) -> bool:
        return name in self.names

    def __len__(self) -> int:
        return len(self.names)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.names))


def resolve_vars_file(vars_file: str | Path | None, cwd: str | Path | None = None) -> Path:
    """Resolve the override-definitions path.

    Relative paths are resolved against `cwd`, or the process working
    directory when `cwd` is not given.

    Raises:
        ConfigurationError: If no path was given.
    """
    if vars_file is None or not str(vars_file):
        raise ConfigurationError("No variables file specified.", option="vars_file")
    path = Path(vars_file)
    if not path.is_absolute():
        base = Path(cwd) if cwd is not None else Path(os.getcwd())
        path = base / path
    return Path(os.path.normpath(path))


def scan_overrides(text: str) -> frozenset[str]:
    """Return every override variable token found in `text`."""
    return frozenset(match.group(1) for match in _OVERRIDE_PATTERN.finditer(text))


def load_overrides(
    vars_file: str | Path | None,
    cwd: str | Path | None = None,
    encoding: str = "utf-8",
) -> OverrideSet:
    """Read an override-definitions file into an `OverrideSet`.

    Raises:
        ConfigurationError: If no path was given.
        VarsFileError: If the file cannot be read.
    """
    path = resolve_vars_file(vars_file, cwd)
    try:
        text = path.read_text(encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise VarsFileError(path) from e
    return OverrideSet(names=scan_overrides(text), path=path)
