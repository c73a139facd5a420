"""Section headings are not numbered (``1. Basic string creation``)."""

from __future__ import annotations

import re

from docstyle.domain.models.document import Document
from docstyle.domain.models.enums import RuleId, Severity
from docstyle.domain.models.finding import Finding
from docstyle.rules.base import BaseRule

_NUMBERED = re.compile(r"^\s*\d+\s*[.:]")


class SectionTitleNoNumberingRule(BaseRule):
    """Flag section headings that start with a numeral and ``.`` or ``:``."""

    def __init__(self, severity: Severity = Severity.ERROR) -> None:
        super().__init__(severity)

    @property
    def rule_id(self) -> RuleId:
        return RuleId.SECTION_TITLE_NO_NUMBERING

    @property
    def description(self) -> str:
        return "Section headings do not start with a number"

    def check(self, document: Document) -> list[Finding]:
        return [
            self._finding(
                document,
                f"Section heading is numbered: {section.heading!r}",
                section=section.index,
                line=section.line,
            )
            for section in document.sections
            if _NUMBERED.match(section.heading)
        ]
