# -*- coding: utf-8 -*-
"""
sqlite_validator: static checks for SQLite queries embedded in Python.

Public API
----------
In application code::

    from sqlite_validator import sql_query, sql_query_unsafe, table, column, subquery
    query = sql_query(f"SELECT * FROM {table(name)}")

Checking source::

    from sqlite_validator import check_source
    for invocation, outcome in check_source(source, "app/queries.py"):
        for diagnostic in outcome.diagnostics: ...

Validating a literal directly::

    from sqlite_validator import validate_query, validate_segments
    outcome = validate_query("SEELECT * FROM my_table")
    outcome.messages   # ["Keyword 'seelect' not found"]
"""

from sqlite_validator.errors import QueryNotLiteralError
from sqlite_validator.fixes import applicable_fixits, apply_fixits
from sqlite_validator.result import (
    Diagnostic,
    FixIt,
    MessageID,
    Severity,
    ValidationOutcome,
)
from sqlite_validator.runtime import column, sql_query, sql_query_unsafe, subquery, table
from sqlite_validator.segments import (
    EntryPoint,
    InterpolationHole,
    LiteralFragment,
    PlaceholderRole,
    QueryInvocation,
    RoleKind,
    SourceRange,
)
from sqlite_validator.source import check_file, check_source, find_invocations
from sqlite_validator.taxonomy import SqlErrorCategory, classify_engine_error
from sqlite_validator.validator import validate, validate_query, validate_segments

__all__ = [
    # ── Runtime entry points and labels ───────────────────────────────────
    "sql_query",
    "sql_query_unsafe",
    "table",
    "column",
    "subquery",
    # ── Validation ────────────────────────────────────────────────────────
    "validate",
    "validate_query",
    "validate_segments",
    "check_source",
    "check_file",
    "find_invocations",
    "QueryNotLiteralError",
    # ── Result types ──────────────────────────────────────────────────────
    "ValidationOutcome",
    "Diagnostic",
    "FixIt",
    "MessageID",
    "Severity",
    # ── Literal model ─────────────────────────────────────────────────────
    "EntryPoint",
    "LiteralFragment",
    "InterpolationHole",
    "PlaceholderRole",
    "RoleKind",
    "QueryInvocation",
    "SourceRange",
    # ── Taxonomy ──────────────────────────────────────────────────────────
    "SqlErrorCategory",
    "classify_engine_error",
    # ── Fix-its ───────────────────────────────────────────────────────────
    "applicable_fixits",
    "apply_fixits",
]
