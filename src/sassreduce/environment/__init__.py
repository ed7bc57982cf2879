"""Environment for sassreduce: override loading and error types."""

from sassreduce.environment.exceptions import (
    CompilerError,
    ConfigurationError,
    ErrorCode,
    ReduceError,
    TreeDecodeError,
    VarsFileError,
)
from sassreduce.environment.loaders import (
    OverrideSet,
    load_overrides,
    resolve_vars_file,
    scan_overrides,
)

__all__ = [
    "CompilerError",
    "ConfigurationError",
    "ErrorCode",
    "OverrideSet",
    "ReduceError",
    "TreeDecodeError",
    "VarsFileError",
    "load_overrides",
    "resolve_vars_file",
    "scan_overrides",
]
