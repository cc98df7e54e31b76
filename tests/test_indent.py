import textwrap

from sqlplusfmt.format import FormatOptions, IndentState, IndentStyle, indent_lines
from sqlplusfmt.pipeline import format_text


def test_case_indents_following_lines_until_end() -> None:
    source = "CASE\nWHEN a THEN b\nEND"

    assert format_text(source) == "CASE\n  WHEN a THEN b\nEND"


def test_classification_ignores_keyword_case() -> None:
    source = "case\nx\nend"

    formatted = format_text(source, FormatOptions(uppercase_keywords=False))

    assert formatted == "case\n  x\nend"


def test_standalone_end_closes_two_levels() -> None:
    source = "BEGIN\nBEGIN\nx\nEND\ny"

    assert format_text(source) == "BEGIN\n  BEGIN\n    x\n  END\ny"


def test_end_with_terminator_closes_one_level() -> None:
    source = "BEGIN\nBEGIN\nx\nEND;\ny"

    assert format_text(source) == "BEGIN\n  BEGIN\n    x\n  END;\n  y"


def test_parentheses_drive_depth() -> None:
    source = textwrap.dedent(
        """
        (
        a
        )
        b
        """
    ).lstrip()

    assert format_text(source) == "(\n  a\n)\nb"


def test_open_paren_anywhere_in_line_indents_next_line() -> None:
    source = "select max(a)\nfrom t"

    assert format_text(source, FormatOptions(indent=IndentStyle.FOUR)) == "SELECT MAX(a)\n    FROM t"


def test_depth_never_goes_negative() -> None:
    state = IndentState(indent_width=2)

    assert state.emit("END") == "END"
    assert state.emit(")") == ")"
    assert state.depth == 0
    assert state.emit("x") == "x"


def test_indent_lines_trims_trailing_whitespace_and_handles_empty_input() -> None:
    assert indent_lines([], indent_width=2) == ""
    assert indent_lines(["BEGIN", "x", ""], indent_width=4) == "BEGIN\n    x"


def test_existing_indentation_is_replaced() -> None:
    source = "      SELECT a\n        FROM t\n"

    assert format_text(source) == "SELECT a\nFROM t"
