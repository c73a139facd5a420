"""Every fenced code block declares the expected language tag."""

from __future__ import annotations

from docstyle.domain.models.document import Document
from docstyle.domain.models.enums import RuleId, Severity
from docstyle.domain.models.finding import Finding
from docstyle.rules.base import BaseRule, iter_examples


class CodeFenceLanguageTagRule(BaseRule):
    """Flag fences without the expected language tag."""

    def __init__(self, expected_language: str = "java", severity: Severity = Severity.ERROR) -> None:
        super().__init__(severity)
        self.expected_language = expected_language

    @property
    def rule_id(self) -> RuleId:
        return RuleId.CODE_FENCE_LANGUAGE_TAG

    @property
    def description(self) -> str:
        return f"Code fences declare the {self.expected_language!r} language"

    def check(self, document: Document) -> list[Finding]:
        findings = []
        for section, example in iter_examples(document):
            if example.language.lower() == self.expected_language.lower():
                continue
            if example.language:
                message = (
                    f"Code fence declares {example.language!r}, "
                    f"expected {self.expected_language!r}"
                )
            else:
                message = f"Code fence has no language tag, expected {self.expected_language!r}"
            findings.append(self._finding(document, message, section=section, line=example.line))
        return findings
