"""Explanation length rule.

A code block must be followed by an explanation. Complex blocks (more
source lines than ``complex_example_lines``) need at least
``min_sentences`` sentences; simpler blocks need one.
"""

from __future__ import annotations

from docstyle.domain.models.document import Document, join_text
from docstyle.domain.models.enums import RuleId, Severity
from docstyle.domain.models.finding import Finding
from docstyle.rules.base import BaseRule, iter_examples
from docstyle.rules.text import count_sentences


class ExplanationMinLengthRule(BaseRule):
    """Flag code blocks whose explanation is missing or too short."""

    def __init__(
        self,
        min_sentences: int = 2,
        complex_example_lines: int = 8,
        severity: Severity = Severity.WARNING,
    ) -> None:
        super().__init__(severity)
        self.min_sentences = min_sentences
        self.complex_example_lines = complex_example_lines

    @property
    def rule_id(self) -> RuleId:
        return RuleId.EXPLANATION_MIN_LENGTH

    @property
    def description(self) -> str:
        return (
            f"Code blocks are followed by at least one sentence "
            f"({self.min_sentences} when longer than {self.complex_example_lines} lines)"
        )

    def required_sentences(self, line_count: int) -> int:
        if line_count > self.complex_example_lines:
            return self.min_sentences
        return 1

    def check(self, document: Document) -> list[Finding]:
        findings = []
        for section, example in iter_examples(document):
            required = self.required_sentences(example.line_count)
            found = count_sentences(join_text(example.explanation))
            if found >= required:
                continue
            if found == 0:
                message = "Code block is not followed by an explanation"
            else:
                message = (
                    f"Explanation has {found} sentence(s); "
                    f"a {example.line_count}-line example needs {required}"
                )
            findings.append(self._finding(document, message, section=section, line=example.line))
        return findings
