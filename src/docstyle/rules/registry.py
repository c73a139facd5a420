"""The rule set: every rule in canonical application order.

The rule set is built once from a ``CheckerConfig`` and treated as
read-only for the rest of the process.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

from docstyle.config.models import CheckerConfig
from docstyle.domain.errors import ConfigurationError
from docstyle.domain.models.enums import RuleId
from docstyle.rules.base import BaseRule
from docstyle.rules.checks import (
    CodeFenceLanguageTagRule,
    ExplanationMinLengthRule,
    LineWidthRule,
    SectionTitleNoNumberingRule,
    TerminologyNoParensRule,
    TrailingMarkerRule,
)

RuleSet = tuple[BaseRule, ...]

# Ids that name rules (PARSE_ERROR and INTERNAL are reported by the pipeline)
RULE_IDS: tuple[RuleId, ...] = (
    RuleId.LINE_WIDTH,
    RuleId.TRAILING_MARKER,
    RuleId.SECTION_TITLE_NO_NUMBERING,
    RuleId.EXPLANATION_MIN_LENGTH,
    RuleId.CODE_FENCE_LANGUAGE_TAG,
    RuleId.TERMINOLOGY_NO_PARENS_ON_NAMES,
)


def build_rule_set(config: Optional[CheckerConfig] = None) -> RuleSet:
    """Instantiate every rule with its settings from *config*."""
    config = config or CheckerConfig()
    rules: RuleSet = (
        LineWidthRule(
            max_line_width=config.formatting.max_line_width,
            severity=config.severity_for(RuleId.LINE_WIDTH),
        ),
        TrailingMarkerRule(
            marker=config.formatting.trailing_marker,
            policy=config.formatting.trailing_marker_policy,
            severity=config.severity_for(RuleId.TRAILING_MARKER),
        ),
        SectionTitleNoNumberingRule(
            severity=config.severity_for(RuleId.SECTION_TITLE_NO_NUMBERING),
        ),
        ExplanationMinLengthRule(
            min_sentences=config.explanations.min_sentences,
            complex_example_lines=config.explanations.complex_example_lines,
            severity=config.severity_for(RuleId.EXPLANATION_MIN_LENGTH),
        ),
        CodeFenceLanguageTagRule(
            expected_language=config.code.expected_language,
            severity=config.severity_for(RuleId.CODE_FENCE_LANGUAGE_TAG),
        ),
        TerminologyNoParensRule(
            severity=config.severity_for(RuleId.TERMINOLOGY_NO_PARENS_ON_NAMES),
        ),
    )
    if config.enabled_rules is not None:
        rules = select_rules(rules, config.enabled_rules)
    return rules


def parse_rule_ids(raw: str) -> list[RuleId]:
    """Parse a comma-separated list of rule ids (case-insensitive).

    Raises:
        ConfigurationError: If an id is unknown or the list is empty.
    """
    ids: list[RuleId] = []
    for token in raw.split(","):
        token = token.strip().upper()
        if not token:
            continue
        try:
            rule_id = RuleId(token)
        except ValueError:
            rule_id = None
        if rule_id not in RULE_IDS:
            known = ", ".join(r.value for r in RULE_IDS)
            raise ConfigurationError(f"Unknown rule id {token!r}. Known rules: {known}")
        ids.append(rule_id)
    if not ids:
        raise ConfigurationError("No rule ids given")
    return ids


def select_rules(rules: RuleSet, ids: Iterable[RuleId]) -> RuleSet:
    """Return the rules named by *ids*, keeping canonical order.

    Raises:
        ConfigurationError: If an id does not name a rule in *rules*.
    """
    wanted = set(ids)
    available = {rule.rule_id for rule in rules}
    missing = wanted - available
    if missing:
        names = ", ".join(sorted(r.value for r in missing))
        raise ConfigurationError(f"Rules not available: {names}")
    return tuple(rule for rule in rules if rule.rule_id in wanted)
