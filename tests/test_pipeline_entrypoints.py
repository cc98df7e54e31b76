from sqlplusfmt import FormatOptions, analyze, format_text, run_check, run_format


def test_format_text_runs_every_stage() -> None:
    source = "  select a,b from t where x=1\n"

    assert format_text(source) == "SELECT a, b FROM t WHERE x = 1"


def test_run_format_reports_change_state() -> None:
    changed = run_format("select a from t")
    unchanged = run_format("SELECT a FROM t")

    assert changed.changed is True
    assert changed.formatted_text == "SELECT a FROM t"
    assert changed.options == FormatOptions()
    assert unchanged.changed is False


def test_run_format_respects_disabled_uppercasing() -> None:
    result = run_format("select a from t", FormatOptions(uppercase_keywords=False))

    assert result.formatted_text == "select a from t"
    assert result.changed is False


def test_format_of_empty_text_is_empty() -> None:
    assert format_text("") == ""


def test_run_check_runs_both_pipelines_on_raw_input() -> None:
    source = "local i real;\nlocal i real;\n"

    result = run_check(source)

    assert result.format.formatted_text == "LOCAL i REAL;\nLOCAL i REAL;"
    assert result.lint.source_text == source
    assert result.has_errors is True
    assert result.diagnostics == analyze(source)
