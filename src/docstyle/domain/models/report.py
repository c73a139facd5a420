"""Aggregated result of one validation run."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from docstyle.domain.models.enums import RuleId, Severity
from docstyle.domain.models.finding import Finding


@dataclass(frozen=True)
class Report:
    """Findings across one or more documents, in discovery order."""

    documents: tuple[str, ...] = ()
    findings: tuple[Finding, ...] = ()
    by_severity: Mapping[Severity, int] = field(default_factory=dict)
    by_rule: Mapping[RuleId, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Counts are read-only once the report is built.
        object.__setattr__(self, "by_severity", MappingProxyType(dict(self.by_severity)))
        object.__setattr__(self, "by_rule", MappingProxyType(dict(self.by_rule)))

    @property
    def total(self) -> int:
        return len(self.findings)

    @property
    def error_count(self) -> int:
        return self.by_severity.get(Severity.ERROR, 0)

    @property
    def warning_count(self) -> int:
        return self.by_severity.get(Severity.WARNING, 0)

    @property
    def has_errors(self) -> bool:
        return self.error_count > 0

    def findings_for(self, doc_id: str) -> list[Finding]:
        return [f for f in self.findings if f.location.document == doc_id]

    def grouped(self) -> dict[str, dict[RuleId, list[Finding]]]:
        """Findings grouped by document, then by rule.

        Documents without findings are omitted; insertion order follows
        the order in which documents were checked.
        """
        groups: dict[str, dict[RuleId, list[Finding]]] = {}
        for finding in self.findings:
            by_rule = groups.setdefault(finding.location.document, {})
            by_rule.setdefault(finding.rule, []).append(finding)
        return groups

    def summary(self) -> str:
        return (
            f"{len(self.documents)} document(s) checked: "
            f"{self.error_count} error(s), {self.warning_count} warning(s)"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "documents": list(self.documents),
            "summary": {
                "total": self.total,
                "by_severity": {s.value: n for s, n in self.by_severity.items()},
                "by_rule": {r.value: n for r, n in self.by_rule.items()},
            },
            "findings": [f.to_dict() for f in self.findings],
        }
