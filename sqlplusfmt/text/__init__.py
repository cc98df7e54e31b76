"""Source positions and line handling."""

from sqlplusfmt.text.text import SourceRange, split_lines

__all__ = ["SourceRange", "split_lines"]
