# -*- coding: utf-8 -*-
"""
SQLite error text → error category, and category → user-facing message.

This module is the single source of truth for:
  - The SqlErrorCategory enum
  - Which engine message prefixes map onto which category
  - The message each category reports
  - Stable message ids for every diagnostic the validator emits
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from sqlite_validator.result import MessageID

DOMAIN = "QueryValidation"

QUERY_MESSAGE_ID = MessageID(domain=DOMAIN, id="Query")
INTERPOLATION_MESSAGE_ID = MessageID(domain=DOMAIN, id="Interpolation")
SAFETY_MESSAGE_ID = MessageID(domain=DOMAIN, id="Safety")


class SqlErrorCategory(str, Enum):
    INCOMPLETE_QUERY = "incomplete_query"
    TABLE_NOT_SPECIFIED = "table_not_specified"
    UNKNOWN_KEYWORD = "unknown_keyword"
    OTHER = "other"


# Checked in order; first matching prefix wins.
_PREFIX_TO_CATEGORY: tuple[tuple[str, SqlErrorCategory], ...] = (
    ("no tables specified", SqlErrorCategory.TABLE_NOT_SPECIFIED),
    ("incomplete", SqlErrorCategory.INCOMPLETE_QUERY),
    ("near ", SqlErrorCategory.UNKNOWN_KEYWORD),
)

_CATEGORY_MESSAGES: dict[SqlErrorCategory, str] = {
    SqlErrorCategory.TABLE_NOT_SPECIFIED: "Table not specified in query",
    SqlErrorCategory.INCOMPLETE_QUERY: "Query incomplete",
}


@dataclass(frozen=True)
class EngineError:
    """Engine error text after classification."""

    category: SqlErrorCategory
    text: str
    keyword: Optional[str] = None

    @property
    def message(self) -> Optional[str]:
        """User-facing message, or None for errors that are not reported."""
        if self.category is SqlErrorCategory.UNKNOWN_KEYWORD:
            return f"Keyword '{self.keyword}' not found"
        return _CATEGORY_MESSAGES.get(self.category)


def classify_engine_error(text: str) -> EngineError:
    """Map SQLite error text onto the taxonomy."""
    for prefix, category in _PREFIX_TO_CATEGORY:
        if text.startswith(prefix):
            keyword = None
            if category is SqlErrorCategory.UNKNOWN_KEYWORD:
                keyword = extract_keyword(text)
            return EngineError(category, text, keyword)
    return EngineError(SqlErrorCategory.OTHER, text)


def extract_keyword(text: str) -> str:
    """``near "seelect": syntax error`` → ``seelect``."""
    keyword = text[len("near "):].split(":", 1)[0]
    return keyword.strip("\"'")
