# -*- coding: utf-8 -*-
"""Syntax verification of a probe string."""

from __future__ import annotations

from typing import List, Optional

from sqlglot.errors import TokenError
from sqlglot.tokens import Tokenizer

from sqlite_validator.diagnostics import syntax_error
from sqlite_validator.engine import run_probe
from sqlite_validator.logger_config import get_logger
from sqlite_validator.result import Diagnostic
from sqlite_validator.segments import SourceRange
from sqlite_validator.taxonomy import SqlErrorCategory, classify_engine_error

logger = get_logger("syntax")


def check_syntax(probe: str, anchor: SourceRange) -> List[Diagnostic]:
    """
    Run the probe through SQLite and translate its complaint, if any.

    Errors outside the taxonomy (missing tables, binding counts, ...) are
    expected against an empty database and produce no diagnostic.
    """
    text = run_probe(probe)
    if text is None:
        return []

    error = classify_engine_error(text)
    if error.category is SqlErrorCategory.OTHER:
        logger.debug("Ignoring engine error: %s", text)
        return []

    location = None
    if error.keyword is not None:
        location = keyword_offset(probe, error.keyword)

    diagnostic = syntax_error(error, anchor, location)
    return [diagnostic] if diagnostic is not None else []


def keyword_offset(probe: str, keyword: str) -> Optional[int]:
    """Offset in ``probe`` of the first token whose text is ``keyword``."""
    try:
        tokens = Tokenizer().tokenize(probe)
    except TokenError:
        tokens = []

    for token in tokens:
        if token.text.lower() == keyword:
            return token.start

    # Tokenizer unavailable or disagrees with SQLite: whitespace-delimited scan
    offset = 0
    for word in probe.split():
        offset = probe.index(word, offset)
        if word == keyword:
            return offset
        offset += len(word)
    return None
