# -*- coding: utf-8 -*-
"""
Structured representation of one query literal.

A literal is an ordered tuple of segments: plain text runs
(``LiteralFragment``) and interpolation sites (``InterpolationHole``).
Classification pairs every hole with exactly one ``PlaceholderRole``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class SourceRange:
    """Span in a source file: 1-based lines, 0-based UTF-8 byte columns."""

    start_line: int
    start_col: int
    end_line: int
    end_col: int

    @classmethod
    def of(cls, node) -> "SourceRange":
        """Range of an ``ast`` node."""
        return cls(node.lineno, node.col_offset, node.end_lineno, node.end_col_offset)

    def __str__(self) -> str:
        return f"{self.start_line}:{self.start_col + 1}"


@dataclass(frozen=True)
class LiteralFragment:
    text: str


@dataclass(frozen=True)
class InterpolationHole:
    """One interpolation site.

    ``expression`` is the source text of the interpolated value (label
    wrapper excluded); ``identifier`` is set only when that value is a bare
    name reference.
    """

    label: Optional[str]
    expression: str
    range: SourceRange
    identifier: Optional[str] = None


Segment = Union[LiteralFragment, InterpolationHole]


class EntryPoint(str, Enum):
    """The two invocation forms; they differ only in the safety warning."""

    CHECKED = "sql_query"
    UNSAFE = "sql_query_unsafe"

    @classmethod
    def from_name(cls, name: str) -> Optional["EntryPoint"]:
        try:
            return cls(name)
        except ValueError:
            return None


class RoleKind(str, Enum):
    TABLE = "table"
    COLUMN = "column"
    SUBQUERY = "subquery"
    UNLABELED = "unlabeled"
    UNRECOGNIZED = "unrecognized"


# Labels accepted on an interpolation, in fix-it order.
RECOGNIZED_LABELS: Tuple[str, ...] = ("table", "column", "subquery")


@dataclass(frozen=True)
class PlaceholderRole:
    kind: RoleKind
    label: Optional[str] = None

    @property
    def is_error(self) -> bool:
        return self.kind in (RoleKind.UNLABELED, RoleKind.UNRECOGNIZED)


def role_for_label(label: Optional[str]) -> PlaceholderRole:
    """Role of a hole, decided from its label alone."""
    if label is None:
        return PlaceholderRole(RoleKind.UNLABELED)
    if label in RECOGNIZED_LABELS:
        return PlaceholderRole(RoleKind(label), label)
    return PlaceholderRole(RoleKind.UNRECOGNIZED, label)


@dataclass(frozen=True)
class Placeholder:
    """A hole after classification."""

    hole: InterpolationHole
    role: PlaceholderRole


TypedSegment = Union[LiteralFragment, Placeholder]


@dataclass(frozen=True)
class QueryInvocation:
    """One call of an entry point as found in source.

    ``segments`` is ``None`` when the argument was not a literal.
    """

    entry_point: EntryPoint
    range: SourceRange
    name_range: SourceRange
    segments: Optional[Tuple[Segment, ...]]
    literal: str = ""
