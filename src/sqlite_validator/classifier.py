# -*- coding: utf-8 -*-
"""Assign a PlaceholderRole to every interpolation hole of a literal."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from sqlite_validator.diagnostics import label_error
from sqlite_validator.result import Diagnostic
from sqlite_validator.segments import (
    InterpolationHole,
    LiteralFragment,
    Placeholder,
    Segment,
    TypedSegment,
    role_for_label,
)


@dataclass(frozen=True)
class Classification:
    segments: Tuple[TypedSegment, ...]
    diagnostics: List[Diagnostic] = field(default_factory=list)

    @property
    def placeholders(self) -> List[Placeholder]:
        return [s for s in self.segments if isinstance(s, Placeholder)]


def classify(segments: Sequence[Segment]) -> Classification:
    """
    Classify every hole and collect label errors.

    Label errors never stop classification: every bad hole gets its own
    diagnostic, in source order, and the typed sequence is always complete
    so later stages still run.
    """
    typed: List[TypedSegment] = []
    diagnostics: List[Diagnostic] = []

    for segment in segments:
        if isinstance(segment, LiteralFragment):
            typed.append(segment)
            continue
        if not isinstance(segment, InterpolationHole):
            raise TypeError(f"Unexpected segment: {segment!r}")

        role = role_for_label(segment.label)
        typed.append(Placeholder(segment, role))
        if role.is_error:
            diagnostics.append(label_error(segment, role))

    return Classification(tuple(typed), diagnostics)
