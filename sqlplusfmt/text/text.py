from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class SourceRange:
    """
    1-based line/column span of a diagnostic in the source text.

    Invariant:
    - line >= 1, column >= 1
    - (line, column) <= (end_line, end_column)
    """

    line: int
    column: int
    end_line: int
    end_column: int

    def __post_init__(self):
        if self.line < 1 or self.end_line < 1:
            raise ValueError("SourceRange lines are 1-based")
        if self.column < 1 or self.end_column < 1:
            raise ValueError("SourceRange columns are 1-based")
        if (self.line, self.column) > (self.end_line, self.end_column):
            raise ValueError("SourceRange invariant violated: start > end")

    @staticmethod
    def on_line(line: int, column: int, end_column: int) -> "SourceRange":
        """Create a SourceRange that starts and ends on the same line."""
        return SourceRange(line, column, line, end_column)


def split_lines(text: str) -> list[str]:
    """Split text into physical lines on `\\n`, dropping a trailing `\\r` from each.

    A final line terminator does not produce an empty trailing line. Unlike
    `str.splitlines`, form feeds and other Unicode separators stay inside the
    line so that line numbers agree with editors.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]
