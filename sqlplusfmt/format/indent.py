"""Block indentation driven by leading keywords and parentheses."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Final

from sqlplusfmt.format.keywords import ascii_upper

DEDENT_PREFIXES: Final[tuple[str, ...]] = ("END", ")")
INDENT_PREFIXES: Final[tuple[str, ...]] = ("THEN", "BEGIN", "CASE")


@dataclass(slots=True)
class IndentState:
    """Nesting depth carried across the lines of one formatting run."""

    indent_width: int
    depth: int = 0

    def dedent(self) -> None:
        if self.depth > 0:
            self.depth -= 1

    def indent(self) -> None:
        self.depth += 1

    def emit(self, line: str) -> str:
        """Classify `line`, return it re-indented, and update the depth for the next line.

        A wrapped line may span several physical lines; only its first token
        is classified and only its first physical line receives the prefix.
        """
        leading = ascii_upper(line).lstrip()
        if leading.startswith(DEDENT_PREFIXES):
            self.dedent()

        emitted = " " * (self.depth * self.indent_width) + line.strip()

        if leading.startswith(INDENT_PREFIXES) or "(" in emitted:
            self.indent()
        # A standalone END closes its block a second time.
        if leading.startswith("END ") or leading == "END":
            self.dedent()
        return emitted


def indent_lines(lines: Iterable[str], *, indent_width: int) -> str:
    state = IndentState(indent_width=indent_width)
    emitted = [state.emit(line) for line in lines]
    if not emitted:
        return ""
    return ("\n".join(emitted) + "\n").rstrip()
