"""Style rules and the rule set."""

from docstyle.rules.base import BaseRule
from docstyle.rules.registry import RULE_IDS, build_rule_set, parse_rule_ids, select_rules

__all__ = ["RULE_IDS", "BaseRule", "build_rule_set", "parse_rule_ids", "select_rules"]
