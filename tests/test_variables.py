import textwrap

from sqlplusfmt.lint import count_occurrences, extract_declarations, group_declarations


def test_extracts_declarations_with_one_based_positions() -> None:
    source = "\nLOCAL i real;\nSELECT * FROM table;\nLOCAL i real;\n"

    declarations = extract_declarations(source)

    assert [(d.name, d.declaration_kind, d.line, d.column, d.end_column) for d in declarations] == [
        ("i", "LOCAL", 2, 7, 8),
        ("i", "LOCAL", 4, 7, 8),
    ]


def test_end_column_points_one_past_exclusive_end() -> None:
    (declaration,) = extract_declarations("DECLARE total real;")

    assert declaration.column == 9
    assert declaration.end_column == declaration.column + len("total") + 1


def test_every_match_on_a_line_is_recorded_left_to_right() -> None:
    declarations = extract_declarations("declare a; set b = a; Local c real;")

    assert [(d.name, d.declaration_kind, d.column) for d in declarations] == [
        ("a", "DECLARE", 9),
        ("b", "SET", 16),
        ("c", "LOCAL", 29),
    ]


def test_update_set_columns_count_as_declarations() -> None:
    declarations = extract_declarations("UPDATE t SET col = 1;")

    assert [d.name for d in declarations] == ["col"]


def test_declaration_keyword_needs_a_whole_word() -> None:
    assert extract_declarations("RESET x; OFFSET 5; LOCALE y") == []


def test_group_declarations_keeps_first_seen_order() -> None:
    source = textwrap.dedent(
        """
        LOCAL b real;
        LOCAL a real;
        LOCAL B integer;
        """
    )

    grouped = group_declarations(extract_declarations(source))

    assert list(grouped) == ["b", "a"]
    assert [d.line for d in grouped["b"]] == [2, 4]


def test_count_occurrences_is_case_insensitive_and_whole_word() -> None:
    text = "LOCAL used_var real;\nWRITE USED_VAR, unused_var, 'used_var';"

    assert count_occurrences(text, "used_var") == 3
