"""Formatting pipeline."""

from sqlplusfmt.format.indent import IndentState, indent_lines
from sqlplusfmt.format.keywords import KEYWORD_PATTERN, KEYWORDS, ascii_upper, normalize_keywords
from sqlplusfmt.format.options import DEFAULT_LINE_WIDTH, FormatOptions, IndentStyle
from sqlplusfmt.format.runner import format_source, run_format
from sqlplusfmt.format.whitespace import normalize_line
from sqlplusfmt.format.wrap import CLAUSE_BREAKS, find_split, wrap_line

__all__ = [
    "CLAUSE_BREAKS",
    "DEFAULT_LINE_WIDTH",
    "KEYWORDS",
    "KEYWORD_PATTERN",
    "FormatOptions",
    "IndentState",
    "IndentStyle",
    "ascii_upper",
    "find_split",
    "format_source",
    "indent_lines",
    "normalize_keywords",
    "normalize_line",
    "run_format",
    "wrap_line",
]
