"""Explanation line width rule.

Every explanation line, measured as written (trailing marker included),
must fit within the configured maximum width.
"""

from __future__ import annotations

from docstyle.domain.models.document import Document
from docstyle.domain.models.enums import RuleId, Severity
from docstyle.domain.models.finding import Finding
from docstyle.rules.base import BaseRule, iter_examples


class LineWidthRule(BaseRule):
    """Flag explanation lines longer than ``max_line_width``."""

    def __init__(self, max_line_width: int = 80, severity: Severity = Severity.ERROR) -> None:
        super().__init__(severity)
        self.max_line_width = max_line_width

    @property
    def rule_id(self) -> RuleId:
        return RuleId.LINE_WIDTH

    @property
    def description(self) -> str:
        return f"Explanation lines are at most {self.max_line_width} characters"

    def check(self, document: Document) -> list[Finding]:
        findings = []
        for section, example in iter_examples(document):
            for line in example.explanation:
                width = len(line.text)
                if width > self.max_line_width:
                    findings.append(
                        self._finding(
                            document,
                            f"Line is {width} characters long (maximum {self.max_line_width})",
                            section=section,
                            line=line.number,
                        )
                    )
        return findings
