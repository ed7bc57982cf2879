"""Placeholder templatizing for reduced trees."""

from sassreduce.template.placeholders import (
    PLACEHOLDER_PATTERN,
    ReferenceFormat,
    find_placeholders,
    make_placeholder,
    parse_placeholder,
    restore_placeholders,
    template_reference,
)
from sassreduce.template.templatizer import Compiler, Templatizer, libsass_compiler

__all__ = [
    "PLACEHOLDER_PATTERN",
    "Compiler",
    "ReferenceFormat",
    "Templatizer",
    "find_placeholders",
    "libsass_compiler",
    "make_placeholder",
    "parse_placeholder",
    "restore_placeholders",
    "template_reference",
]
