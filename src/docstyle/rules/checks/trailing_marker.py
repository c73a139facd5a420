"""Trailing marker rule.

Explanation lines end with two spaces so Markdown renders the author's
line breaks. Under the ``all_but_last`` policy the last line of every
paragraph is exempt; under ``all`` every non-blank line needs the marker.
"""

from __future__ import annotations

from docstyle.domain.models.document import Document, paragraphs
from docstyle.domain.models.enums import RuleId, Severity, TrailingMarkerPolicy
from docstyle.domain.models.finding import Finding
from docstyle.rules.base import BaseRule, iter_examples


class TrailingMarkerRule(BaseRule):
    """Flag explanation lines missing the trailing marker."""

    def __init__(
        self,
        marker: str = "  ",
        policy: TrailingMarkerPolicy = TrailingMarkerPolicy.ALL_BUT_LAST,
        severity: Severity = Severity.WARNING,
    ) -> None:
        super().__init__(severity)
        self.marker = marker
        self.policy = policy

    @property
    def rule_id(self) -> RuleId:
        return RuleId.TRAILING_MARKER

    @property
    def description(self) -> str:
        if self.policy is TrailingMarkerPolicy.ALL:
            return f"Every explanation line ends with {self.marker!r}"
        return f"Explanation lines end with {self.marker!r} except the last of a paragraph"

    def check(self, document: Document) -> list[Finding]:
        findings = []
        for section, example in iter_examples(document):
            for paragraph in paragraphs(example.explanation):
                if self.policy is TrailingMarkerPolicy.ALL_BUT_LAST:
                    paragraph = paragraph[:-1]
                for line in paragraph:
                    if not line.text.endswith(self.marker):
                        findings.append(
                            self._finding(
                                document,
                                "Line does not end with the trailing marker",
                                section=section,
                                line=line.number,
                            )
                        )
        return findings
