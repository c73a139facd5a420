"""Composition Root — wires configuration, parser, rules and use cases.

This module is the only place where the concrete parser and rule set
are assembled for the presentation layer.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

from docstyle.application.use_cases.validate_corpus import ValidateCorpusUseCase
from docstyle.config.models import CheckerConfig
from docstyle.domain.models.enums import RuleId
from docstyle.parsers.markdown_parser import DocumentParser
from docstyle.rules.registry import RuleSet, build_rule_set, select_rules
from docstyle.validation.validator import Validator


class Container:
    """Simple dependency injection container.

    The rule set is built once per container and shared, read-only, by
    every document the container validates.

    Usage::

        container = Container(config, rule_ids=[RuleId.LINE_WIDTH])
        report = container.validate_corpus().execute(Path("docs"))
    """

    def __init__(
        self,
        config: Optional[CheckerConfig] = None,
        rule_ids: Optional[Iterable[RuleId]] = None,
    ) -> None:
        self._config = config or CheckerConfig()
        rules = build_rule_set(self._config)
        if rule_ids is not None:
            rules = select_rules(rules, rule_ids)
        self._rules: RuleSet = rules
        self._parser = DocumentParser(self._config.parsing)
        self._validator = Validator(
            self._rules,
            internal_severity=self._config.severity_for(RuleId.INTERNAL),
        )

    @property
    def config(self) -> CheckerConfig:
        return self._config

    @property
    def rules(self) -> RuleSet:
        return self._rules

    @property
    def parser(self) -> DocumentParser:
        return self._parser

    @property
    def validator(self) -> Validator:
        return self._validator

    # -- Use Case factories --------------------------------------------------

    def validate_corpus(self) -> ValidateCorpusUseCase:
        """Create a use case for validating a corpus directory."""
        return ValidateCorpusUseCase(
            parser=self._parser,
            validator=self._validator,
            parse_error_severity=self._config.severity_for(RuleId.PARSE_ERROR),
        )
