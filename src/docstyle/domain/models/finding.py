"""Findings produced by rules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from docstyle.domain.models.enums import RuleId, Severity


@dataclass(frozen=True)
class Location:
    """Where a finding was detected."""

    document: str
    section: Optional[int] = None  # 0-based section index
    line: Optional[int] = None  # 1-based source line


@dataclass(frozen=True)
class Finding:
    """A single rule violation."""

    rule: RuleId
    location: Location
    message: str
    severity: Severity = Severity.WARNING

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def icon(self) -> str:
        return "❌" if self.is_error else "⚠️"

    def to_dict(self) -> dict[str, Any]:
        return {
            "rule": self.rule.value,
            "severity": self.severity.value,
            "document": self.location.document,
            "section": self.location.section,
            "line": self.location.line,
            "message": self.message,
        }
