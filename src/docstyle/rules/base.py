"""Base interface for style rules.

Every rule follows the same contract:
  1. Receives a parsed ``Document``
  2. Returns the list of ``Finding``s it detected, in document order

Rules are bound to their settings at construction time and never mutate
their input, so one instance can be shared by every document of a run.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Optional

from docstyle.domain.models.document import CodeExample, Document
from docstyle.domain.models.enums import RuleId, Severity
from docstyle.domain.models.finding import Finding, Location


class BaseRule(ABC):
    """Abstract base for every rule in the rule set.

    Subclasses must implement ``rule_id``, ``description`` and
    ``check(document) -> list[Finding]``.
    """

    def __init__(self, severity: Severity = Severity.WARNING) -> None:
        self._severity = severity

    @property
    @abstractmethod
    def rule_id(self) -> RuleId:
        """Unique identifier reported in findings."""

    @property
    @abstractmethod
    def description(self) -> str:
        """One-line human-readable description."""

    @property
    def severity(self) -> Severity:
        return self._severity

    @abstractmethod
    def check(self, document: Document) -> list[Finding]:
        """Evaluate the rule against *document*."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.rule_id.value}, {self.severity.value})"

    # Convenience helper used by concrete rules
    def _finding(
        self,
        document: Document,
        message: str,
        *,
        section: Optional[int] = None,
        line: Optional[int] = None,
    ) -> Finding:
        return Finding(
            rule=self.rule_id,
            location=Location(document=document.doc_id, section=section, line=line),
            message=message,
            severity=self.severity,
        )


def iter_examples(document: Document) -> Iterator[tuple[Optional[int], CodeExample]]:
    """Yield ``(section_index, example)`` in document order.

    Examples that appear before the first section have no section index.
    """
    for example in document.introduction_examples:
        yield None, example
    for section in document.sections:
        for example in section.examples:
            yield section.index, example
