"""Exceptions for sassreduce.

Exception Hierarchy:
ReduceError (base)
├── ConfigurationError    # No override-definitions file configured
├── VarsFileError         # Override-definitions file unreadable
├── TreeDecodeError       # Parser JSON is not a valid syntax tree
└── CompilerError         # External Sass compiler failed during templatizing

Malformed nodes met during a reduction are not errors: the walk skips
whatever bookkeeping it cannot do and carries on.

Example:
    ```
    R-CFG-002: Cannot read override variables file: /site/_vars.scss
      Cause: [Errno 2] No such file or directory: '/site/_vars.scss'
      Docs: https://sassreduce.readthedocs.io/en/latest/errors.html#r-cfg-002
    ```

"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from sassreduce.environment import terminal

_DOCS_BASE = "https://sassreduce.readthedocs.io/en/latest/errors.html"


class ErrorCode(Enum):
    """Searchable error codes for sassreduce errors.

    Format: R-{CATEGORY}-{NUMBER}
    Categories: CFG (configuration), TRE (tree input), TPL (templatizing)
    """

    MISSING_VARS_FILE = "R-CFG-001"
    UNREADABLE_VARS_FILE = "R-CFG-002"

    MALFORMED_TREE = "R-TRE-001"

    COMPILER_FAILED = "R-TPL-001"

    @property
    def docs_url(self) -> str:
        """Documentation URL for this error code."""
        return f"{_DOCS_BASE}#{self.value.lower()}"

    @property
    def category(self) -> str:
        """Error category (e.g., 'config', 'tree', 'template')."""
        prefix = self.value.split("-")[1]
        return {
            "CFG": "config",
            "TRE": "tree",
            "TPL": "template",
        }.get(prefix, "unknown")


class ReduceError(Exception):
    """Base exception for all sassreduce errors.

    Attributes:
        code: Optional ErrorCode for searchable error identification.
    """

    code: ErrorCode | None = None

    def format_compact(self) -> str:
        """Format error as a short terminal diagnostic without traceback noise."""
        header = str(self)
        if self.code and self.code.value not in header:
            header = f"{terminal.error_code(self.code.value)}: {header}"
        parts = [header]
        cause = self.__cause__
        if cause is not None:
            parts.append(f"  Cause: {terminal.dim_text(str(cause))}")
        if self.code:
            parts.append(f"  Docs: {terminal.docs_url(self.code.docs_url)}")
        return "\n".join(parts)


class ConfigurationError(ReduceError):
    """Required configuration is missing or invalid.

    Raised when a Reducer is constructed without an override-definitions
    file, before any tree is touched.
    """

    code: ErrorCode | None = ErrorCode.MISSING_VARS_FILE

    def __init__(self, message: str, *, option: str | None = None):
        self.option = option
        if option:
            message = f"{message} (option: {option})"
        super().__init__(message)


class VarsFileError(ReduceError):
    """The override-definitions file could not be read.

    The underlying OSError (or decode error) is chained as ``__cause__``.
    """

    code: ErrorCode | None = ErrorCode.UNREADABLE_VARS_FILE

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Cannot read override variables file: {terminal.location(str(path))}")


class TreeDecodeError(ReduceError):
    """Parser output could not be turned into a syntax tree."""

    code: ErrorCode | None = ErrorCode.MALFORMED_TREE

    def __init__(self, message: str, *, where: str | None = None):
        self.message = message
        self.where = where
        if where:
            message = f"{message} at {where}"
        super().__init__(f"Malformed tree: {message}")


class CompilerError(ReduceError):
    """The external Sass compiler failed on the reduced source.

    No partial rendering is returned when this is raised.
    """

    code: ErrorCode | None = ErrorCode.COMPILER_FAILED

    def __init__(self, message: str, *, hint: str | None = None):
        self.message = message
        self.hint = hint
        text = f"Compiler Error: {message}"
        if hint:
            text += f"\n  Hint: {terminal.hint(hint)}"
        super().__init__(text)
