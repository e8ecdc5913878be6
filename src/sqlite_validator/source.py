# -*- coding: utf-8 -*-
"""
Find entry-point calls in Python source and turn their literals into segments.

    invocations = find_invocations(source, "app/queries.py")
    results = check_source(source, "app/queries.py")

Interpolations are labeled by wrapping the value in a label function:
``f"SELECT * FROM {table(name)}"``.
"""

from __future__ import annotations

import ast
from pathlib import Path
from typing import List, Optional, Tuple

from sqlite_validator.errors import QueryNotLiteralError
from sqlite_validator.logger_config import get_logger
from sqlite_validator.result import ValidationOutcome
from sqlite_validator.segments import (
    EntryPoint,
    InterpolationHole,
    LiteralFragment,
    QueryInvocation,
    Segment,
    SourceRange,
)
from sqlite_validator.validator import validate

logger = get_logger("source")


def find_invocations(source: str, filename: str = "<unknown>") -> List[QueryInvocation]:
    """
    Every ``sql_query`` / ``sql_query_unsafe`` call in ``source``, in source order.

    Calls are matched by name, bare or as an attribute (``sv.sql_query``).
    An invocation whose argument is not a single string literal is still
    returned, with ``segments=None``.

    Raises:
        SyntaxError: ``source`` is not valid Python.
    """
    tree = ast.parse(source, filename=filename)
    invocations = []

    for node in ast.walk(tree):
        if not isinstance(node, ast.Call):
            continue
        match = _match_entry_point(node.func)
        if match is None:
            continue
        entry_point, name_range = match

        segments = None
        literal = ""
        arg = _single_argument(node)
        if arg is not None:
            segments = _segments_of(arg, source)
            if segments is not None:
                literal = ast.get_source_segment(source, arg) or ""

        invocations.append(
            QueryInvocation(
                entry_point=entry_point,
                range=SourceRange.of(node),
                name_range=name_range,
                segments=segments,
                literal=literal,
            )
        )

    invocations.sort(key=lambda inv: (inv.range.start_line, inv.range.start_col))
    logger.debug("%s: %d invocation(s)", filename, len(invocations))
    return invocations


def check_source(
    source: str,
    filename: str = "<unknown>",
    usage_errors: Optional[List[QueryNotLiteralError]] = None,
) -> List[Tuple[QueryInvocation, ValidationOutcome]]:
    """Validate every invocation in ``source``.

    Args:
        source: Python source text
        filename: Reported in usage errors
        usage_errors: When given, a non-literal argument is appended here
                      and the remaining invocations are still checked

    Raises:
        QueryNotLiteralError: an invocation's argument is not a literal and
                              ``usage_errors`` was not given.
        SyntaxError: ``source`` is not valid Python.
    """
    results = []
    for invocation in find_invocations(source, filename):
        try:
            outcome = validate(invocation)
        except QueryNotLiteralError as exc:
            exc.filename = filename
            if usage_errors is None:
                raise
            usage_errors.append(exc)
            continue
        results.append((invocation, outcome))
    return results


def check_file(path: Path) -> List[Tuple[QueryInvocation, ValidationOutcome]]:
    path = Path(path)
    return check_source(path.read_text(encoding="utf-8"), str(path))


# ─── Internal: AST matching ───────────────────────────────────────────────────


def _match_entry_point(func: ast.expr) -> Optional[Tuple[EntryPoint, SourceRange]]:
    """Entry point named by a call's callee, with the range of the name itself."""
    if isinstance(func, ast.Name):
        entry_point = EntryPoint.from_name(func.id)
        if entry_point is not None:
            return entry_point, SourceRange.of(func)
    elif isinstance(func, ast.Attribute):
        entry_point = EntryPoint.from_name(func.attr)
        if entry_point is not None:
            # The attribute name is the last thing in the node's span
            width = len(func.attr.encode("utf-8"))
            name_range = SourceRange(
                func.end_lineno, func.end_col_offset - width,
                func.end_lineno, func.end_col_offset,
            )
            return entry_point, name_range
    return None


def _single_argument(call: ast.Call) -> Optional[ast.expr]:
    if len(call.args) != 1 or call.keywords:
        return None
    arg = call.args[0]
    if isinstance(arg, ast.Starred):
        return None
    return arg


def _segments_of(arg: ast.expr, source: str) -> Optional[Tuple[Segment, ...]]:
    """Segments of a string literal or f-string; None for anything else."""
    if isinstance(arg, ast.Constant):
        if isinstance(arg.value, str):
            return (LiteralFragment(arg.value),)
        return None

    if not isinstance(arg, ast.JoinedStr):
        return None

    segments: List[Segment] = []
    for part in arg.values:
        if isinstance(part, ast.Constant):
            segments.append(LiteralFragment(part.value))
        elif isinstance(part, ast.FormattedValue):
            segments.append(_hole_of(part.value, source))
    return tuple(segments)


def _hole_of(value: ast.expr, source: str) -> InterpolationHole:
    """
    ``{table(name)}`` → label ``table``, expression ``name``.

    A replacement field is labeled when its value is a call of a bare
    function name with exactly one positional argument.
    """
    label = None
    inner = value
    if (
        isinstance(value, ast.Call)
        and isinstance(value.func, ast.Name)
        and len(value.args) == 1
        and not value.keywords
        and not isinstance(value.args[0], ast.Starred)
    ):
        label = value.func.id
        inner = value.args[0]

    expression = ast.get_source_segment(source, inner) or ast.unparse(inner)
    identifier = inner.id if isinstance(inner, ast.Name) else None
    return InterpolationHole(
        label=label,
        expression=expression,
        range=SourceRange.of(value),
        identifier=identifier,
    )
