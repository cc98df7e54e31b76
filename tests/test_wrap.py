from sqlplusfmt.format import FormatOptions, IndentStyle, find_split, wrap_line
from sqlplusfmt.pipeline import format_text


def test_short_lines_pass_through_unchanged() -> None:
    line = "SELECT a FROM t"

    assert wrap_line(line, width=len(line), indent_unit="  ") == line


def test_long_line_splits_before_from_clause() -> None:
    line = "SELECT " + "x" * 60 + " FROM " + "y" * 27
    assert len(line) == 100

    formatted = format_text(line, FormatOptions(line_width=88))

    assert formatted == "SELECT " + "x" * 60 + "\n  FROM " + "y" * 27


def test_continuation_indent_follows_indent_width() -> None:
    line = "SELECT " + "x" * 60 + " FROM " + "y" * 27

    formatted = format_text(line, FormatOptions(line_width=88, indent=IndentStyle.FOUR))

    head, continuation = formatted.split("\n")
    assert head == "SELECT " + "x" * 60
    assert continuation == "    FROM " + "y" * 27


def test_marker_priority_beats_position() -> None:
    line = "aa WHERE bb FROM " + "c" * 20

    wrapped = wrap_line(line, width=20, indent_unit="  ")

    assert wrapped == "aa WHERE bb\n  FROM " + "c" * 15 + "\n  " + "c" * 5


def test_falls_back_to_last_comma_before_width() -> None:
    line = "a" * 10 + "," + "b" * 10

    assert wrap_line(line, width=15, indent_unit="  ") == "a" * 10 + ",\n  " + "b" * 10


def test_falls_back_to_hard_cut_at_width() -> None:
    assert wrap_line("a" * 25, width=10, indent_unit="  ") == "a" * 10 + "\n  " + "a" * 10 + "\n  " + "a" * 5


def test_lowercase_clause_words_do_not_count_as_markers() -> None:
    line = "select " + "x" * 10 + " from " + "y" * 10

    assert find_split(line, 20) == 20


def test_find_split_prefers_clause_then_comma_then_width() -> None:
    assert find_split("SELECT a FROM b", 10) == 8
    assert find_split("a,b,c,d", 4) == 4
    assert find_split("abcdef", 3) == 3


def test_marker_past_width_is_ignored() -> None:
    line = "a" * 30 + " FROM b"

    assert find_split(line, 20) == 20
