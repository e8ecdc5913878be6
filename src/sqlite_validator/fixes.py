"""Apply fix-its to source text."""

from typing import Iterable, List

from sqlite_validator.result import Diagnostic, FixIt
from sqlite_validator.segments import SourceRange


def applicable_fixits(diagnostics: Iterable[Diagnostic]) -> List[FixIt]:
    """Fix-its that can be applied without a choice: one per diagnostic."""
    return [d.fixits[0] for d in diagnostics if len(d.fixits) == 1]


def apply_fixits(source: str, fixits: Iterable[FixIt]) -> str:
    """
    Return ``source`` with every fix-it applied.

    Raises:
        ValueError: two fix-its replace overlapping text.
    """
    lines = source.splitlines(keepends=True)
    edits = sorted(
        (
            (_offset(lines, f.range.start_line, f.range.start_col),
             _offset(lines, f.range.end_line, f.range.end_col),
             f.replacement)
            for f in fixits
        ),
        reverse=True,
    )

    result = source
    previous_start = None
    for start, end, replacement in edits:
        if previous_start is not None and end > previous_start:
            raise ValueError(f"Overlapping fix-its at offset {start}")
        result = result[:start] + replacement + result[end:]
        previous_start = start
    return result


def range_text(source: str, r: SourceRange) -> str:
    lines = source.splitlines(keepends=True)
    return source[_offset(lines, r.start_line, r.start_col):_offset(lines, r.end_line, r.end_col)]


def _offset(lines: List[str], line: int, byte_col: int) -> int:
    """Character offset of a (1-based line, UTF-8 byte column) position."""
    prefix = sum(len(text) for text in lines[: line - 1])
    if line - 1 >= len(lines):
        return prefix
    column = lines[line - 1].encode("utf-8")[:byte_col].decode("utf-8")
    return prefix + len(column)
