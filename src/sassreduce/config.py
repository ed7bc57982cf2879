"""Reduction configuration."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

# Option names accepted by `ReduceConfig.from_options`, including the
# camelCase spellings used in JavaScript build configs.
_OPTION_ALIASES = {
    "varsFile": "vars_file",
    "vars_file": "vars_file",
    "cwd": "cwd",
    "templatize": "templatize",
    "encoding": "encoding",
}


@dataclass(frozen=True, slots=True)
class ReduceConfig:
    """Configuration for a reduction.

    Attributes:
        vars_file: Override-definitions file, absolute or relative to `cwd`.
            Required; a Reducer refuses to start without it.
        cwd: Base directory for a relative `vars_file`. Defaults to the
            process working directory.
        templatize: Rewrite override reads as placeholders and render the
            reduced tree to template text.
        encoding: Encoding of the override-definitions file.

    Example:
        >>> config = ReduceConfig(vars_file="_vars.scss", cwd="styles/")
        >>> reducer = Reducer(config)
    """

    vars_file: str | Path | None = None
    cwd: str | Path | None = None
    templatize: bool = False
    encoding: str = "utf-8"

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> ReduceConfig:
        """Build a config from an option mapping, ignoring unknown keys."""
        values: dict[str, Any] = {}
        for key, value in options.items():
            field_name = _OPTION_ALIASES.get(key)
            if field_name is not None:
                values[field_name] = value
        if "templatize" in values:
            values["templatize"] = bool(values["templatize"])
        return cls(**values)
