"""Validator — runs the rule set against one document.

Rules run in rule set order and each rule walks the document in source
order, so the resulting finding sequence is deterministic. A rule that
raises does not abort the run: the failure is reported as one
``INTERNAL`` finding and the remaining rules still run.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from docstyle.domain.errors import RuleEvaluationError
from docstyle.domain.models.document import Document
from docstyle.domain.models.enums import RuleId, Severity
from docstyle.domain.models.finding import Finding, Location
from docstyle.rules.base import BaseRule
from docstyle.rules.registry import build_rule_set

logger = logging.getLogger(__name__)


class Validator:
    """Apply a fixed sequence of rules to documents.

    Usage::

        validator = Validator(build_rule_set(config))
        findings = validator.validate(document)
    """

    def __init__(
        self,
        rules: Sequence[BaseRule] | None = None,
        internal_severity: Severity = Severity.ERROR,
    ) -> None:
        self._rules: tuple[BaseRule, ...] = tuple(rules) if rules is not None else build_rule_set()
        self._internal_severity = internal_severity

    @property
    def rules(self) -> tuple[BaseRule, ...]:
        return self._rules

    @property
    def rule_ids(self) -> list[RuleId]:
        return [rule.rule_id for rule in self._rules]

    def validate(self, document: Document) -> list[Finding]:
        """Run every rule on *document* and return the findings in order.

        Raises:
            TypeError: If *document* is not a ``Document``.
        """
        if not isinstance(document, Document):
            raise TypeError(f"Expected a Document, got {type(document).__name__}")

        findings: list[Finding] = []
        for rule in self._rules:
            try:
                findings.extend(rule.check(document))
            except Exception as exc:
                error = RuleEvaluationError(rule.rule_id.value, exc)
                logger.exception("%s on %s", error, document.doc_id)
                findings.append(
                    Finding(
                        rule=RuleId.INTERNAL,
                        location=Location(document=document.doc_id),
                        message=str(error),
                        severity=self._internal_severity,
                    )
                )
        return findings
