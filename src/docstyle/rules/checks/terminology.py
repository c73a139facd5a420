"""Prose names methods without trailing parentheses.

``the size method`` rather than ``the size() method``. Code blocks and
inline code spans are exempt, including spans that wrap across lines.
"""

from __future__ import annotations

import re

from docstyle.domain.models.document import Document, paragraphs
from docstyle.domain.models.enums import RuleId, Severity
from docstyle.domain.models.finding import Finding
from docstyle.rules.base import BaseRule
from docstyle.rules.text import mask_inline_code

_CALL = re.compile(r"\b[A-Za-z_$][\w$]*(?:\.[A-Za-z_$][\w$]*)*\(\)")


class TerminologyNoParensRule(BaseRule):
    """Flag ``name()`` references in prose."""

    def __init__(self, severity: Severity = Severity.WARNING) -> None:
        super().__init__(severity)

    @property
    def rule_id(self) -> RuleId:
        return RuleId.TERMINOLOGY_NO_PARENS_ON_NAMES

    @property
    def description(self) -> str:
        return "Prose refers to methods without trailing parentheses"

    def check(self, document: Document) -> list[Finding]:
        findings = []
        for section, block in document.prose():
            for paragraph in paragraphs(block):
                text = mask_inline_code("\n".join(line.text for line in paragraph))
                for match in _CALL.finditer(text):
                    line = paragraph[text.count("\n", 0, match.start())]
                    findings.append(
                        self._finding(
                            document,
                            f"Refer to {match.group(0)[:-2]!r} without parentheses",
                            section=section,
                            line=line.number,
                        )
                    )
        return findings
