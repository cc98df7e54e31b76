from sqlplusfmt.format import KEYWORDS, ascii_upper, normalize_keywords


def test_keywords_are_uppercased_as_whole_words() -> None:
    source = "select name from users where id in (1, 2) order by name"

    assert normalize_keywords(source) == "SELECT name FROM users WHERE id IN (1, 2) ORDER BY name"


def test_keywords_inside_identifiers_are_left_alone() -> None:
    source = "local selected_count integer; write fromage;"

    assert normalize_keywords(source) == "LOCAL selected_count INTEGER; WRITE fromage;"


def test_mixed_case_keywords_are_normalized() -> None:
    assert normalize_keywords("SeLeCt a FrOm t") == "SELECT a FROM t"


def test_disabled_uppercasing_is_a_no_op() -> None:
    source = "select a From t"

    assert normalize_keywords(source, uppercase=False) is source


def test_keyword_casing_is_idempotent() -> None:
    source = "begin\n  declare x real;\n  set x = abs(y);\nend"

    once = normalize_keywords(source)

    assert normalize_keywords(once) == once


def test_lexicon_keeps_repeated_words() -> None:
    assert KEYWORDS.count("set") == 2
    assert normalize_keywords("set x; set y;") == "SET x; SET y;"


def test_uppercasing_only_touches_ascii_letters() -> None:
    assert ascii_upper("\u017felect \u00e9t\u00e9") == "\u017fELECT \u00e9T\u00e9"
    assert normalize_keywords("\u017felect a from t") == "\u017fELECT a FROM t"
