"""
Formatting — рендеринг и разбор текстового представления.
"""

from normdec.core.formatting.parser import ParsedNumber, parse_number
from normdec.core.formatting.registry import (
    DEFAULT_FORMATTERS,
    SCIENTIFIC_FORMAT_TAG,
    FormatHook,
    FormatterRegistry,
    scientific_hook,
)
from normdec.core.formatting.renderers import render_plain, render_scientific

__all__ = [
    # Parser
    "ParsedNumber",
    "parse_number",
    # Registry
    "DEFAULT_FORMATTERS",
    "SCIENTIFIC_FORMAT_TAG",
    "FormatHook",
    "FormatterRegistry",
    "scientific_hook",
    # Renderers
    "render_plain",
    "render_scientific",
]
