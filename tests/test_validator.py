# -*- coding: utf-8 -*-
"""
Tests for the query literal validator

Literals are built by hand from segments; source scanning is covered in
test_source.py.
"""

import pytest
from sqlite_validator import (
    EntryPoint,
    InterpolationHole,
    LiteralFragment,
    QueryInvocation,
    QueryNotLiteralError,
    Severity,
    SourceRange,
    validate,
    validate_query,
    validate_segments,
)
from sqlite_validator.classifier import classify
from sqlite_validator.normalizer import STAND_IN_NAME, normalize
from sqlite_validator.segments import RoleKind
from sqlite_validator.taxonomy import INTERPOLATION_MESSAGE_ID, QUERY_MESSAGE_ID


def hole(label, expression="value", identifier="value", col=20):
    return InterpolationHole(
        label=label,
        expression=expression,
        range=SourceRange(1, col, 1, col + len(expression)),
        identifier=identifier,
    )


# =============================================================================
# Syntax Validation
# =============================================================================

class TestSyntaxValidation:
    """Tests for plain SQL through validate_query()."""

    def test_valid_select_round_trips(self):
        """Valid SQL should return the literal unchanged."""
        outcome = validate_query("SELECT * FROM my_table")

        assert outcome.ok is True
        assert outcome.diagnostics == []
        assert outcome.expansion == "SELECT * FROM my_table"

    def test_valid_insert_round_trips(self):
        sql = "INSERT INTO my_table (my_column) VALUES ('my_value')"
        outcome = validate_query(sql)

        assert outcome.ok is True
        assert outcome.expansion == sql

    def test_keyword_typo(self):
        """A misspelled keyword is reported lower-cased."""
        outcome = validate_query("SEELECT * FROM my_table")

        assert outcome.messages == ["Keyword 'seelect' not found"]
        assert outcome.expansion is None

    def test_keyword_typo_location(self):
        """The offending keyword's offset in the probe string is recorded."""
        outcome = validate_query("SEELECT * FROM my_table")

        assert outcome.diagnostics[0].location == 0

    def test_table_not_specified(self):
        outcome = validate_query("SELECT *")

        assert outcome.messages == ["Table not specified in query"]

    def test_incomplete_query(self):
        outcome = validate_query("SELECT * FROM my_table WHERE")

        assert outcome.messages == ["Query incomplete"]

    def test_syntax_error_shape(self):
        """Syntax errors are errors with the Query id and no fix-its."""
        diagnostic = validate_query("SELECT *").diagnostics[0]

        assert diagnostic.severity is Severity.ERROR
        assert diagnostic.message_id == QUERY_MESSAGE_ID
        assert diagnostic.fixits == []

    def test_missing_table_is_ignored(self):
        """Errors outside the taxonomy produce no diagnostic."""
        outcome = validate_query("SELECT my_column FROM missing_table WHERE my_column = 1")

        assert outcome.ok is True

    def test_case_insensitive(self):
        assert validate_query("select * from MY_TABLE").ok is True

    def test_only_first_statement_checked(self):
        """The probe runs as one statement; later statements are not reported."""
        outcome = validate_query("SELECT * FROM my_table; SEELECT 1")

        assert outcome.messages == []
        assert outcome.expansion == "SELECT * FROM my_table; SEELECT 1"

    def test_unencodable_literal(self):
        """Text the driver cannot encode is not a taxonomy error."""
        outcome = validate_query("SELECT '\ud800'")

        assert outcome.ok is True
        assert outcome.expansion == "SELECT '\ud800'"


# =============================================================================
# Safety
# =============================================================================

class TestSafety:
    """Tests for the destructive-statement warning."""

    def test_drop_warns_when_checked(self):
        outcome = validate_query("DROP TABLE my_table")

        assert len(outcome.diagnostics) == 1
        warning = outcome.diagnostics[0]
        assert warning.severity is Severity.WARNING
        assert warning.message == "Dropping the table may be dangerous"
        assert len(warning.fixits) == 1
        assert warning.fixits[0].description == "Mark it unsafe to mute this warning"
        assert warning.fixits[0].replacement == "sql_query_unsafe"

    def test_warning_keeps_expansion(self):
        """Warnings alone do not block the expansion."""
        outcome = validate_query("DROP TABLE my_table")

        assert outcome.ok is False
        assert outcome.expansion == "DROP TABLE my_table"

    def test_drop_silent_when_unsafe(self):
        outcome = validate_query("DROP TABLE my_table", entry_point=EntryPoint.UNSAFE)

        assert outcome.ok is True
        assert outcome.expansion == "DROP TABLE my_table"

    def test_drop_any_case_and_leading_whitespace(self):
        outcome = validate_query("  Drop table my_table")

        assert [d.severity for d in outcome.diagnostics] == [Severity.WARNING]

    def test_syntax_error_and_warning_together(self):
        """Syntax errors come first, then the safety warning."""
        outcome = validate_query("DROP TABEL my_table")

        assert [d.severity for d in outcome.diagnostics] == [
            Severity.ERROR,
            Severity.WARNING,
        ]
        assert outcome.diagnostics[0].message == "Keyword 'tabel' not found"
        assert outcome.expansion is None

    def test_fixit_targets_entry_point_name(self):
        name_range = SourceRange(3, 0, 3, 9)
        outcome = validate_segments(
            [LiteralFragment("DROP TABLE my_table")],
            anchor=SourceRange(3, 0, 3, 31),
            name_range=name_range,
        )

        assert outcome.diagnostics[0].fixits[0].range == name_range


# =============================================================================
# Interpolation
# =============================================================================

class TestInterpolation:
    """Tests for labeled and unlabeled interpolations."""

    def test_table_label(self):
        segments = [LiteralFragment("SELECT * FROM "), hole("table", "name", "name")]
        outcome = validate_segments(segments, literal='f"SELECT * FROM {table(name)}"')

        assert outcome.ok is True
        assert outcome.expansion == 'f"SELECT * FROM {table(name)}"'

    def test_column_label(self):
        segments = [
            LiteralFragment("SELECT "),
            hole("column", "col", "col"),
            LiteralFragment(" FROM my_table"),
        ]
        assert validate_segments(segments).ok is True

    def test_parenthesized_subquery(self):
        """A subquery between literal parentheses is accepted unchanged."""
        segments = [
            LiteralFragment("SELECT trackid, name FROM tracks WHERE albumid = ("),
            hole("subquery", "sub", "sub"),
            LiteralFragment(")"),
        ]
        literal = 'f"SELECT trackid, name FROM tracks WHERE albumid = ({subquery(sub)})"'
        outcome = validate_segments(segments, literal=literal)

        assert outcome.ok is True
        assert outcome.expansion == literal

    def test_clause_subquery(self):
        segments = [LiteralFragment("SELECT * FROM my_table "), hole("subquery", "cond")]

        assert validate_segments(segments).ok is True

    def test_unlabeled(self):
        """An unlabeled hole yields one error with three fix-its."""
        segments = [
            LiteralFragment("SELECT * FROM my_table WHERE a = 1 "),
            hole(None, "cond", "cond"),
        ]
        outcome = validate_segments(segments)

        assert len(outcome.diagnostics) == 1
        error = outcome.diagnostics[0]
        assert error.message == "Interpolation must be labeled"
        assert error.message_id == INTERPOLATION_MESSAGE_ID
        assert [f.description for f in error.fixits] == [
            "Add 'table'",
            "Add 'column'",
            "Add 'subquery'",
        ]
        assert [f.replacement for f in error.fixits] == [
            "table(cond)",
            "column(cond)",
            "subquery(cond)",
        ]
        assert outcome.expansion is None

    def test_unrecognized_label(self):
        segments = [
            LiteralFragment("SELECT * FROM my_table WHERE a = 1 "),
            hole("where", "cond", "cond"),
        ]
        outcome = validate_segments(segments)

        assert len(outcome.diagnostics) == 1
        error = outcome.diagnostics[0]
        assert error.message == (
            "Interpolations must be labeled 'table', 'column' or 'subquery'"
        )
        assert [f.description for f in error.fixits] == [
            "Replace 'where' with 'table'",
            "Replace 'where' with 'column'",
            "Replace 'where' with 'subquery'",
        ]

    def test_labels_are_case_sensitive(self):
        segments = [LiteralFragment("SELECT * FROM "), hole("Table", "name", "name")]
        outcome = validate_segments(segments)

        assert outcome.errors[0].message.startswith("Interpolations must be labeled")

    def test_label_error_does_not_stop_syntax_check(self):
        """Label errors come first, then syntax errors."""
        segments = [LiteralFragment("SELECT * FROM "), hole(None, "name", "name")]
        outcome = validate_segments(segments)

        assert outcome.messages == [
            "Interpolation must be labeled",
            "Query incomplete",
        ]

    def test_every_bad_hole_reported(self):
        segments = [
            LiteralFragment("SELECT "),
            hole(None, "a", "a", col=10),
            LiteralFragment(" FROM "),
            hole("tbl", "b", "b", col=30),
        ]
        outcome = validate_segments(segments)
        label_errors = [d for d in outcome.diagnostics if d.message_id == INTERPOLATION_MESSAGE_ID]

        assert [d.range.start_col for d in label_errors] == [10, 30]

    def test_idempotent(self):
        segments = [
            LiteralFragment("SELECT * FROM "),
            hole(None, "name", "name"),
            LiteralFragment(" WHERE"),
        ]

        assert validate_segments(segments) == validate_segments(segments)


# =============================================================================
# Classification and normalization
# =============================================================================

class TestNormalizer:
    """Tests for classify() and normalize()."""

    def test_roles(self):
        segments = [
            hole("table"),
            hole("column"),
            hole("subquery"),
            hole(None),
            hole("other"),
        ]
        roles = [p.role.kind for p in classify(segments).placeholders]

        assert roles == [
            RoleKind.TABLE,
            RoleKind.COLUMN,
            RoleKind.SUBQUERY,
            RoleKind.UNLABELED,
            RoleKind.UNRECOGNIZED,
        ]

    def test_probe_is_lowercase(self):
        segments = [LiteralFragment("SELECT * FROM "), hole("table", "Name", "MyTable")]

        assert normalize(classify(segments).segments) == "select * from mytable"

    def test_non_identifier_uses_stand_in(self):
        segments = [LiteralFragment("SELECT * FROM "), hole("table", "names[0]", None)]

        assert normalize(classify(segments).segments) == f"select * from {STAND_IN_NAME}"

    def test_bad_labels_substitute_nothing(self):
        segments = [
            LiteralFragment("SELECT 1 "),
            hole(None),
            hole("nope"),
            hole("subquery"),
        ]

        assert normalize(classify(segments).segments) == "select 1 "


# =============================================================================
# Invocations
# =============================================================================

class TestInvocation:
    """Tests for validate() on QueryInvocation."""

    def test_not_literal_raises(self):
        invocation = QueryInvocation(
            entry_point=EntryPoint.CHECKED,
            range=SourceRange(1, 0, 1, 12),
            name_range=SourceRange(1, 0, 1, 9),
            segments=None,
        )

        with pytest.raises(QueryNotLiteralError, match="argument must be a literal"):
            validate(invocation)

    def test_anchored_at_invocation(self):
        call_range = SourceRange(5, 4, 5, 30)
        invocation = QueryInvocation(
            entry_point=EntryPoint.CHECKED,
            range=call_range,
            name_range=SourceRange(5, 4, 5, 13),
            segments=(LiteralFragment("SELECT *"),),
            literal='"SELECT *"',
        )
        outcome = validate(invocation)

        assert outcome.diagnostics[0].range == call_range
