# -*- coding: utf-8 -*-
"""
Pydantic v2 models for validation results.

  FixIt             – one suggested textual replacement
  Diagnostic        – one error or warning with its fix-its
  ValidationOutcome – ordered diagnostics plus the expansion, if any
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from sqlite_validator.segments import SourceRange


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


class MessageID(BaseModel):
    """Stable identifier for tooling."""

    domain: str
    id: str

    def __str__(self) -> str:
        return f"{self.domain}.{self.id}"

    model_config = {"frozen": True, "extra": "forbid"}


class FixIt(BaseModel):
    """Replace the text at ``range`` with ``replacement``."""

    description: str
    range: SourceRange
    replacement: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "description": self.description,
            "range": _range_dict(self.range),
            "replacement": self.replacement,
        }

    model_config = {"frozen": True, "extra": "forbid"}


class Diagnostic(BaseModel):
    severity: Severity
    message: str
    range: SourceRange
    message_id: Optional[MessageID] = None
    fixits: List[FixIt] = Field(default_factory=list)
    location: Optional[int] = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {
            "severity": self.severity.value,
            "message": self.message,
            "range": _range_dict(self.range),
            "fixits": [f.to_dict() for f in self.fixits],
        }
        if self.message_id is not None:
            d["message_id"] = str(self.message_id)
        if self.location is not None:
            d["location"] = self.location
        return d

    model_config = {"frozen": True, "extra": "forbid"}


class ValidationOutcome(BaseModel):
    """Result of validating one query literal.

    ``expansion`` holds the original literal text unless an error was
    reported, in which case it is ``None`` and must not be used as SQL.
    """

    diagnostics: List[Diagnostic] = Field(default_factory=list)
    expansion: Optional[str] = None

    @property
    def ok(self) -> bool:
        return not self.diagnostics

    @property
    def errors(self) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.is_error]

    @property
    def warnings(self) -> List[Diagnostic]:
        return [d for d in self.diagnostics if not d.is_error]

    @property
    def messages(self) -> List[str]:
        return [d.message for d in self.diagnostics]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ok": self.ok,
            "expansion": self.expansion,
            "diagnostics": [d.to_dict() for d in self.diagnostics],
        }

    def __repr__(self) -> str:
        if self.ok:
            return f"ValidationOutcome(ok=True, expansion={self.expansion!r})"
        return f"ValidationOutcome(ok=False, messages={self.messages})"

    model_config = {"extra": "forbid"}


def _range_dict(r: SourceRange) -> Dict[str, int]:
    return {
        "start_line": r.start_line,
        "start_col": r.start_col,
        "end_line": r.end_line,
        "end_col": r.end_col,
    }
