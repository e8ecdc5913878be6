# -*- coding: utf-8 -*-
"""Build the lowercase probe string submitted to the engine."""

from __future__ import annotations

from typing import Sequence

from sqlite_validator.logger_config import get_logger
from sqlite_validator.segments import LiteralFragment, Placeholder, RoleKind, TypedSegment

logger = get_logger("normalizer")

# Substituted for table/column values that are not a bare name.
STAND_IN_NAME = "some_name"

# Substituted for a subquery written between literal parentheses, where an
# empty substitution would leave "()" behind.
STAND_IN_SUBQUERY = "select null"


def normalize(segments: Sequence[TypedSegment]) -> str:
    """Concatenate classified segments into a probe string.

    Table and column placeholders become their identifier; every other
    placeholder contributes nothing, except a subquery wrapped in literal
    parentheses, which becomes a minimal SELECT.
    """
    parts = []
    for index, segment in enumerate(segments):
        if isinstance(segment, LiteralFragment):
            parts.append(segment.text)
        elif segment.role.kind is RoleKind.SUBQUERY:
            parts.append(STAND_IN_SUBQUERY if _parenthesized(segments, index) else "")
        else:
            parts.append(_substitute(segment))
    return "".join(parts).lower()


def _substitute(placeholder: Placeholder) -> str:
    if placeholder.role.kind not in (RoleKind.TABLE, RoleKind.COLUMN):
        return ""
    name = placeholder.hole.identifier
    if name is None:
        logger.debug(
            "%s value %r is not a bare name, using %r",
            placeholder.role.kind.value,
            placeholder.hole.expression,
            STAND_IN_NAME,
        )
        return STAND_IN_NAME
    return name


def _parenthesized(segments: Sequence[TypedSegment], index: int) -> bool:
    before = segments[index - 1] if index > 0 else None
    after = segments[index + 1] if index + 1 < len(segments) else None
    return (
        isinstance(before, LiteralFragment)
        and isinstance(after, LiteralFragment)
        and before.text.rstrip().endswith("(")
        and after.text.lstrip().startswith(")")
    )
