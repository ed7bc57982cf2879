"""Render a reduced, placeholder-annotated tree to template text.

Pipeline:
    reduced tree -> SCSS source -> Sass compiler -> CSS with placeholders
    -> placeholders restored as template references

The Sass compiler is injected as a plain callable taking SCSS source and
returning CSS, so the reducer never depends on a particular compiler.
`libsass_compiler()` adapts the `libsass` package.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from sassreduce.environment.exceptions import CompilerError
from sassreduce.template.placeholders import ReferenceFormat, restore_placeholders

if TYPE_CHECKING:
    from sassreduce.nodes import Node

logger = logging.getLogger(__name__)

# Compiles SCSS source text to CSS text
Compiler = Callable[[str], str]


def libsass_compiler(output_style: str = "expanded") -> Compiler:
    """Return a compiler backed by libsass.

    The `sass` module is imported on first use, so libsass is only needed
    when templatizing.
    """

    def compile_scss(source: str) -> str:
        try:
            import sass
        except ImportError:
            raise CompilerError(
                "libsass is not installed",
                hint="pip install 'sassreduce[sass]' or pass compiler=...",
            ) from None
        return sass.compile(string=source, output_style=output_style)

    return compile_scss


class Templatizer:
    """Compile a reduced tree and restore its placeholders.

    Attributes:
        compiler: SCSS -> CSS callable. Defaults to libsass.
        reference_format: Formats a bare variable name as a template
            reference. Defaults to ``{{ name }}``.

    Example:
        >>> templatizer = Templatizer(compiler=lambda scss: scss)
        >>> templatizer.render(tree)
        'a {color: {{ banana }};}'
    """

    __slots__ = ("compiler", "reference_format")

    def __init__(
        self,
        compiler: Compiler | None = None,
        reference_format: ReferenceFormat | None = None,
    ):
        self.compiler = compiler or libsass_compiler()
        self.reference_format = reference_format

    def compile(self, source: str) -> str:
        """Run the compiler, converting any failure to CompilerError."""
        try:
            css = self.compiler(source)
        except CompilerError:
            raise
        except Exception as e:
            raise CompilerError(str(e) or type(e).__name__) from e
        if not isinstance(css, str):
            raise CompilerError(f"compiler returned {type(css).__name__}, expected str")
        return css

    def render(self, tree: Node) -> str:
        """Serialize, compile and restore placeholders for `tree`."""
        source = tree.to_source()
        logger.debug("Compiling reduced source (%d chars):\n%s", len(source), source)
        css = self.compile(source)
        return restore_placeholders(css, self.reference_format)
