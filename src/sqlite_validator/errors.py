# -*- coding: utf-8 -*-
"""Exceptions raised across the validator boundary."""

from typing import Optional

from sqlite_validator.segments import SourceRange

NOT_LITERAL_MESSAGE = "argument must be a literal"


class QueryNotLiteralError(ValueError):
    """An entry point was called with something other than one string literal."""

    def __init__(
        self,
        range: Optional[SourceRange] = None,
        filename: Optional[str] = None,
    ):
        self.range = range
        self.filename = filename
        super().__init__(NOT_LITERAL_MESSAGE)

    def __str__(self) -> str:
        if self.range is None:
            return NOT_LITERAL_MESSAGE
        where = f"{self.filename}:{self.range}" if self.filename else str(self.range)
        return f"{where}: {NOT_LITERAL_MESSAGE}"
