# -*- coding: utf-8 -*-
"""Destructive-statement check."""

from __future__ import annotations

from typing import List

from sqlite_validator.diagnostics import drop_warning
from sqlite_validator.result import Diagnostic
from sqlite_validator.segments import EntryPoint, SourceRange

DESTRUCTIVE_KEYWORD = "drop"


def is_destructive(probe: str) -> bool:
    return probe.lstrip().startswith(DESTRUCTIVE_KEYWORD)


def check_safety(
    probe: str,
    entry_point: EntryPoint,
    anchor: SourceRange,
    name_range: SourceRange,
) -> List[Diagnostic]:
    """Warn about a leading DROP unless the unsafe entry point was used."""
    if entry_point is EntryPoint.UNSAFE or not is_destructive(probe):
        return []
    return [drop_warning(anchor, name_range)]
