"""Placeholder tokens for override variables.

In placeholder mode an override read such as ``color: $banana;`` is
rewritten to ``color: ____banana____;``. The token is a plain identifier,
so the Sass compiler passes it through to the CSS untouched, where it can
be restored to a reference in a second-stage template language.

Example:
    >>> make_placeholder("$brand-color")
    '____brand-color____'
    >>> restore_placeholders("a { color: ____brand-color____; }")
    'a { color: {{ brand_color }}; }'
"""

from __future__ import annotations

import re
from collections.abc import Callable

PLACEHOLDER_DELIMITER = "____"

PLACEHOLDER_PATTERN = re.compile(r"____([A-Za-z0-9_-]+?)____")

# Formats a bare variable name as a template reference
ReferenceFormat = Callable[[str], str]


def make_placeholder(name: str) -> str:
    """Wrap a variable name (with or without its `$`) in placeholder delimiters."""
    return f"{PLACEHOLDER_DELIMITER}{name.lstrip('$')}{PLACEHOLDER_DELIMITER}"


def parse_placeholder(text: str) -> str | None:
    """Return the bare variable name if `text` is exactly one placeholder."""
    match = PLACEHOLDER_PATTERN.fullmatch(text)
    return match.group(1) if match else None


def find_placeholders(text: str) -> list[str]:
    """Variable names of all placeholders in `text`, deduplicated, in order."""
    return list(dict.fromkeys(PLACEHOLDER_PATTERN.findall(text)))


def template_reference(name: str) -> str:
    """Default reference format: a ``{{ name }}`` output expression.

    Sass treats ``-`` and ``_`` in variable names as the same character;
    template identifiers cannot contain ``-``, so it is normalized to ``_``.
    """
    return "{{ " + name.replace("-", "_") + " }}"


def restore_placeholders(text: str, reference_format: ReferenceFormat | None = None) -> str:
    """Replace every placeholder in `text` with a template reference."""
    fmt = reference_format or template_reference
    return PLACEHOLDER_PATTERN.sub(lambda match: fmt(match.group(1)), text)
