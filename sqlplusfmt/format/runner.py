"""Format runner: keyword casing, whitespace, wrapping, then indentation."""

from __future__ import annotations

import logging

from sqlplusfmt.format.indent import indent_lines
from sqlplusfmt.format.keywords import normalize_keywords
from sqlplusfmt.format.options import FormatOptions
from sqlplusfmt.format.whitespace import normalize_line
from sqlplusfmt.format.wrap import wrap_line
from sqlplusfmt.pipeline.results import FormatRunResult
from sqlplusfmt.text import split_lines

logger = logging.getLogger(__name__)


def run_format(text: str, options: FormatOptions | None = None) -> FormatRunResult:
    """Format `text` in one pass and report whether anything changed."""
    resolved_options = options if options is not None else FormatOptions()
    formatted_text = format_source(text, resolved_options)
    return FormatRunResult(
        source_text=text,
        formatted_text=formatted_text,
        options=resolved_options,
        changed=formatted_text != text,
    )


def format_source(text: str, options: FormatOptions) -> str:
    cased = normalize_keywords(text, uppercase=options.uppercase_keywords)
    wrapped = [
        wrap_line(normalize_line(line), width=options.line_width, indent_unit=options.indent_unit)
        for line in split_lines(cased)
    ]
    logger.debug("formatting %d lines (width=%d)", len(wrapped), options.line_width)
    return indent_lines(wrapped, indent_width=options.indent_width)
