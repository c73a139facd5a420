"""Report builder — aggregates per-document findings into a Report."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

from docstyle.domain.models.enums import Severity
from docstyle.domain.models.finding import Finding
from docstyle.domain.models.report import Report


def build_report(results: Iterable[tuple[str, Sequence[Finding]]]) -> Report:
    """Build a Report from ``(document id, findings)`` pairs.

    Findings keep the order in which they are given. Both severities are
    always present in the severity counts; rule counts only list rules
    that produced at least one finding.
    """
    documents: list[str] = []
    findings: list[Finding] = []
    for doc_id, doc_findings in results:
        documents.append(doc_id)
        findings.extend(doc_findings)

    by_severity = {severity: 0 for severity in Severity}
    by_severity.update(Counter(f.severity for f in findings))
    by_rule = dict(Counter(f.rule for f in findings))

    return Report(
        documents=tuple(documents),
        findings=tuple(findings),
        by_severity=by_severity,
        by_rule=by_rule,
    )
