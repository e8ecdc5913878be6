# -*- coding: utf-8 -*-
"""Tests for engine error classification and the probe database."""

import pytest
from sqlite_validator.engine import probe_database, run_probe
from sqlite_validator.syntax import keyword_offset
from sqlite_validator.taxonomy import SqlErrorCategory, classify_engine_error


class TestClassifyEngineError:
    """Tests for classify_engine_error()."""

    @pytest.mark.parametrize(
        "text, category, message",
        [
            ("no tables specified", SqlErrorCategory.TABLE_NOT_SPECIFIED, "Table not specified in query"),
            ("incomplete input", SqlErrorCategory.INCOMPLETE_QUERY, "Query incomplete"),
            ('near "seelect": syntax error', SqlErrorCategory.UNKNOWN_KEYWORD, "Keyword 'seelect' not found"),
            ("no such table: my_table", SqlErrorCategory.OTHER, None),
            ('unrecognized token: "#"', SqlErrorCategory.OTHER, None),
        ],
    )
    def test_categories(self, text, category, message):
        error = classify_engine_error(text)

        assert error.category is category
        assert error.message == message
        assert error.text == text

    def test_keyword_with_single_quotes(self):
        assert classify_engine_error("near 'form': syntax error").keyword == "form"

    def test_prefix_must_match_at_start(self):
        """Only prefixes count, not substrings."""
        error = classify_engine_error("sub-select returns 2 columns - incomplete")

        assert error.category is SqlErrorCategory.OTHER


class TestProbeDatabase:
    """Tests for the throwaway SQLite session."""

    def test_valid_statement(self):
        assert run_probe("select 1") is None

    def test_error_text_verbatim(self):
        assert run_probe("seelect * from my_table") == 'near "seelect": syntax error'

    def test_databases_are_isolated(self):
        """Each probe starts from an empty database."""
        assert run_probe("create table t (x integer)") is None
        assert run_probe("select x from t") == "no such table: t"

    def test_one_statement_at_a_time(self):
        error = run_probe("select 1; seelect 2")

        assert error.startswith("You can only execute one statement at a time")
        assert classify_engine_error(error).category is SqlErrorCategory.OTHER

    def test_unencodable_text_returned_as_error(self):
        error = run_probe("select '\ud800'")

        assert "surrogates not allowed" in error
        assert classify_engine_error(error).category is SqlErrorCategory.OTHER

    def test_connection_closed_after_error(self):
        with pytest.raises(RuntimeError):
            with probe_database() as conn:
                held = conn
                raise RuntimeError("boom")

        assert held.closed is True


class TestKeywordOffset:
    """Tests for keyword_offset()."""

    def test_first_match(self):
        assert keyword_offset("select * from my_table", "from") == 9

    def test_missing(self):
        assert keyword_offset("select 1", "from") is None
