"""Concrete style rules, one module per rule."""

from docstyle.rules.checks.explanation_length import ExplanationMinLengthRule
from docstyle.rules.checks.fence_language import CodeFenceLanguageTagRule
from docstyle.rules.checks.line_width import LineWidthRule
from docstyle.rules.checks.section_title import SectionTitleNoNumberingRule
from docstyle.rules.checks.terminology import TerminologyNoParensRule
from docstyle.rules.checks.trailing_marker import TrailingMarkerRule

__all__ = [
    "CodeFenceLanguageTagRule",
    "ExplanationMinLengthRule",
    "LineWidthRule",
    "SectionTitleNoNumberingRule",
    "TerminologyNoParensRule",
    "TrailingMarkerRule",
]
