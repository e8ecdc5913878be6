# -*- coding: utf-8 -*-
"""
Query literal validation with a single entry point.

    outcome = validate(invocation)          # one entry-point call from source
    outcome = validate_segments(segments)   # a literal built by hand

Classification, syntax and safety diagnostics are all collected: a label
error does not stop the syntax check, and a syntax error does not stop the
safety check. One invocation in, one ValidationOutcome out.
"""

from __future__ import annotations

from typing import Optional, Sequence

from sqlite_validator.classifier import classify
from sqlite_validator.diagnostics import assemble
from sqlite_validator.errors import QueryNotLiteralError
from sqlite_validator.logger_config import get_logger
from sqlite_validator.normalizer import normalize
from sqlite_validator.result import ValidationOutcome
from sqlite_validator.safety import check_safety
from sqlite_validator.segments import (
    EntryPoint,
    InterpolationHole,
    LiteralFragment,
    QueryInvocation,
    Segment,
    SourceRange,
)
from sqlite_validator.syntax import check_syntax

logger = get_logger("validator")

# Anchor used when a literal is validated outside of any source file.
NO_RANGE = SourceRange(1, 0, 1, 0)


def validate(invocation: QueryInvocation) -> ValidationOutcome:
    """
    Validate one entry-point invocation.

    Raises:
        QueryNotLiteralError: the invocation's argument was not a literal.
    """
    if invocation.segments is None:
        raise QueryNotLiteralError(invocation.range)
    return validate_segments(
        invocation.segments,
        literal=invocation.literal,
        entry_point=invocation.entry_point,
        anchor=invocation.range,
        name_range=invocation.name_range,
    )


def validate_segments(
    segments: Sequence[Segment],
    literal: Optional[str] = None,
    entry_point: EntryPoint = EntryPoint.CHECKED,
    anchor: SourceRange = NO_RANGE,
    name_range: Optional[SourceRange] = None,
) -> ValidationOutcome:
    """
    Run the full pipeline over a segment sequence.

    Args:
        segments:    Literal fragments and interpolation holes, source order.
        literal:     Text returned as the expansion on success. Defaults to
                     the segments rendered back with ``label(expression)``
                     interpolations.
        entry_point: Which entry point was used; only CHECKED warns on DROP.
        anchor:      Range of the whole invocation.
        name_range:  Range of the entry-point name (safety fix-it target).

    Returns:
        ValidationOutcome with diagnostics in detection order.
    """
    if literal is None:
        literal = render_literal(segments)

    classification = classify(segments)
    probe = normalize(classification.segments)
    logger.debug("Probe for %s: %r", entry_point.value, probe)

    syntax = check_syntax(probe, anchor)
    safety = check_safety(probe, entry_point, anchor, name_range or anchor)
    return assemble(literal, classification.diagnostics, syntax, safety)


def validate_query(
    query: str, entry_point: EntryPoint = EntryPoint.CHECKED
) -> ValidationOutcome:
    """Validate interpolation-free SQL text."""
    return validate_segments([LiteralFragment(query)], literal=query, entry_point=entry_point)


def render_literal(segments: Sequence[Segment]) -> str:
    parts = []
    for segment in segments:
        if isinstance(segment, InterpolationHole):
            if segment.label is None:
                parts.append("{" + segment.expression + "}")
            else:
                parts.append("{" + f"{segment.label}({segment.expression})" + "}")
        else:
            parts.append(segment.text)
    return "".join(parts)
