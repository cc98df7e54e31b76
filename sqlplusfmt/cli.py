"""Command-line interface for the SQLplus formatter."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
import difflib
import logging
from pathlib import Path
import sys
from typing import TextIO

from tqdm import tqdm

from sqlplusfmt.diagnostics import has_errors, render_diagnostic
from sqlplusfmt.format import DEFAULT_LINE_WIDTH, FormatOptions
from sqlplusfmt.pipeline import run_format, run_lint
from sqlplusfmt.text import split_lines

logger = logging.getLogger(__name__)


class SourceFileError(Exception):
    """Reading or writing an input file failed."""

    def __init__(self, action: str, path: Path, reason: OSError | UnicodeDecodeError) -> None:
        super().__init__(f"failed to {action} {path}: {getattr(reason, 'strerror', None) or reason}")
        self.action = action
        self.path = path
        self.reason = reason


def _parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in {"true", "1", "yes", "on"}:
        return True
    if lowered in {"false", "0", "no", "off"}:
        return False
    raise argparse.ArgumentTypeError(f"expected true or false, got {value!r}")


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sqlplusfmt",
        description="Aspen SQLplus formatter",
    )
    parser.add_argument(
        "files",
        nargs="*",
        type=Path,
        metavar="FILES",
        help="Input file(s) to format. If none provided, read from STDIN",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--write", action="store_true", help="Write result back to the file(s)")
    mode.add_argument("--diff", action="store_true", help="Print diff of changes")
    mode.add_argument(
        "--check",
        action="store_true",
        help="Report duplicate/unused variable diagnostics instead of formatting",
    )
    parser.add_argument(
        "--line-width",
        type=_positive_int,
        default=DEFAULT_LINE_WIDTH,
        help=f"Maximum line width (default: {DEFAULT_LINE_WIDTH})",
    )
    parser.add_argument(
        "--indent",
        type=int,
        choices=(2, 4),
        default=2,
        help="Indentation spaces (2 or 4, default: 2)",
    )
    parser.add_argument(
        "--uppercase-keywords",
        type=_parse_bool,
        default=True,
        metavar="{true,false}",
        help="Force uppercase SQL keywords (default: true)",
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a tqdm progress bar while processing multiple files",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    options = FormatOptions.from_values(
        line_width=args.line_width,
        indent=args.indent,
        uppercase_keywords=args.uppercase_keywords,
    )
    out = sys.stdout

    if not args.files:
        source = sys.stdin.read()
        if args.check:
            return _check_text(source, label=None, out=out)
        out.write(run_format(source, options).formatted_text)
        return 0

    files: list[Path] = args.files
    iterator: Iterable[Path] = (
        tqdm(files, desc="sqlplusfmt", unit="file", file=sys.stderr)
        if args.progress
        else files
    )
    status = 0
    try:
        for path in iterator:
            source = _read_source(path)
            if args.check:
                status = max(status, _check_text(source, label=str(path), out=out))
                continue
            result = run_format(source, options)
            if args.write:
                if result.changed:
                    _write_source(path, result.formatted_text)
                logger.debug("%s: %s", path, "reformatted" if result.changed else "unchanged")
            elif args.diff:
                out.write(render_diff(source, result.formatted_text))
            else:
                out.write(result.formatted_text)
    except SourceFileError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return status


def render_diff(original: str, formatted: str) -> str:
    """List every line of both texts prefixed with `-`, `+` or a space."""
    rendered: list[str] = []
    for entry in difflib.ndiff(split_lines(original), split_lines(formatted)):
        sign, line = entry[0], entry[2:]
        if sign == "?":
            continue
        rendered.append(f"{sign}{line}\n")
    return "".join(rendered)


def _check_text(source: str, *, label: str | None, out: TextIO) -> int:
    result = run_lint(source)
    for diagnostic in result.diagnostics:
        rendered = render_diagnostic(diagnostic)
        out.write(f"{label}:{rendered}\n" if label is not None else f"{rendered}\n")
    return 1 if has_errors(result.diagnostics) else 0


def _read_source(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceFileError("read", path, exc) from exc


def _write_source(path: Path, text: str) -> None:
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise SourceFileError("write", path, exc) from exc
