# -*- coding: utf-8 -*-
"""
Diagnostic construction and assembly.

Every diagnostic the validator can emit is built here, so message text,
message ids and fix-it wording live in one place.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from sqlite_validator.result import Diagnostic, FixIt, Severity, ValidationOutcome
from sqlite_validator.segments import (
    RECOGNIZED_LABELS,
    EntryPoint,
    InterpolationHole,
    PlaceholderRole,
    RoleKind,
    SourceRange,
)
from sqlite_validator.taxonomy import (
    INTERPOLATION_MESSAGE_ID,
    QUERY_MESSAGE_ID,
    SAFETY_MESSAGE_ID,
    EngineError,
)

UNLABELED_MESSAGE = "Interpolation must be labeled"
UNRECOGNIZED_MESSAGE = "Interpolations must be labeled 'table', 'column' or 'subquery'"
DROP_WARNING_MESSAGE = "Dropping the table may be dangerous"
DROP_FIXIT_DESCRIPTION = "Mark it unsafe to mute this warning"


def label_error(hole: InterpolationHole, role: PlaceholderRole) -> Diagnostic:
    """Error for an unlabeled or wrongly labeled interpolation.

    Carries one fix-it per recognized label, each keeping the expression.
    """
    if role.kind is RoleKind.UNLABELED:
        message = UNLABELED_MESSAGE
        descriptions = [f"Add '{label}'" for label in RECOGNIZED_LABELS]
    else:
        message = UNRECOGNIZED_MESSAGE
        descriptions = [
            f"Replace '{role.label}' with '{label}'" for label in RECOGNIZED_LABELS
        ]

    fixits = [
        FixIt(
            description=description,
            range=hole.range,
            replacement=f"{label}({hole.expression})",
        )
        for label, description in zip(RECOGNIZED_LABELS, descriptions)
    ]
    return Diagnostic(
        severity=Severity.ERROR,
        message=message,
        range=hole.range,
        message_id=INTERPOLATION_MESSAGE_ID,
        fixits=fixits,
    )


def syntax_error(
    error: EngineError,
    anchor: SourceRange,
    location: Optional[int] = None,
) -> Optional[Diagnostic]:
    """Error for a reported engine error; None when the category is ignored."""
    message = error.message
    if message is None:
        return None
    return Diagnostic(
        severity=Severity.ERROR,
        message=message,
        range=anchor,
        message_id=QUERY_MESSAGE_ID,
        location=location,
    )


def drop_warning(anchor: SourceRange, name_range: SourceRange) -> Diagnostic:
    return Diagnostic(
        severity=Severity.WARNING,
        message=DROP_WARNING_MESSAGE,
        range=anchor,
        message_id=SAFETY_MESSAGE_ID,
        fixits=[
            FixIt(
                description=DROP_FIXIT_DESCRIPTION,
                range=name_range,
                replacement=EntryPoint.UNSAFE.value,
            )
        ],
    )


def assemble(
    literal: str,
    classification: Sequence[Diagnostic],
    syntax: Sequence[Diagnostic],
    safety: Sequence[Diagnostic],
) -> ValidationOutcome:
    """Merge diagnostics in detection order and decide the expansion."""
    diagnostics: List[Diagnostic] = [*classification, *syntax, *safety]
    has_error = any(d.is_error for d in diagnostics)
    return ValidationOutcome(
        diagnostics=diagnostics,
        expansion=None if has_error else literal,
    )
