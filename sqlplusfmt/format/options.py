"""Formatter configuration options."""

from dataclasses import dataclass
from enum import IntEnum

DEFAULT_LINE_WIDTH = 88


class IndentStyle(IntEnum):
    """Supported indentation unit widths."""

    TWO = 2
    FOUR = 4


@dataclass(frozen=True, slots=True)
class FormatOptions:
    """Settings for one formatting run; immutable for its duration."""

    line_width: int = DEFAULT_LINE_WIDTH
    indent: IndentStyle = IndentStyle.TWO
    uppercase_keywords: bool = True

    def __post_init__(self):
        if isinstance(self.line_width, bool) or not isinstance(self.line_width, int):
            raise ValueError(f"line_width must be an integer, got {self.line_width!r}")
        if self.line_width < 1:
            raise ValueError(f"line_width must be at least 1, got {self.line_width}")
        try:
            indent = IndentStyle(self.indent)
        except ValueError:
            raise ValueError(f"indent must be 2 or 4, got {self.indent!r}") from None
        object.__setattr__(self, "indent", indent)

    @property
    def indent_width(self) -> int:
        return int(self.indent)

    @property
    def indent_unit(self) -> str:
        return " " * self.indent_width

    @staticmethod
    def from_values(
        *,
        line_width: int = DEFAULT_LINE_WIDTH,
        indent: int = 2,
        uppercase_keywords: bool = True,
    ) -> "FormatOptions":
        return FormatOptions(
            line_width=line_width,
            indent=indent,  # type: ignore[arg-type]  # coerced in __post_init__
            uppercase_keywords=uppercase_keywords,
        )
