"""Pydantic models for checker configuration.

These models validate and type the JSON configuration file that drives
the parser and every rule of the style checker.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from docstyle.domain.models.enums import RuleId, Severity, TrailingMarkerPolicy


# ---------------------------------------------------------------------------
# Meta
# ---------------------------------------------------------------------------


class MetaData(BaseModel):
    """Metadata about the style guide being enforced."""

    name: str = "Java topic documents"
    version: str = "1"
    description: str = "Authoring rules for the Java language feature guides"


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


class ParsingSettings(BaseModel):
    """How documents are found and split into sections."""

    title_marker: str = "#"
    section_marker: str = "##"
    file_glob: str = "*.md"

    @field_validator("title_marker", "section_marker")
    @classmethod
    def _markers_are_hashes(cls, value: str) -> str:
        if not value or set(value) != {"#"}:
            raise ValueError("heading markers must be one or more '#' characters")
        return value


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------


class FormattingSettings(BaseModel):
    """Line layout of explanation text."""

    max_line_width: int = Field(80, gt=0)
    trailing_marker: str = Field("  ", min_length=1)
    trailing_marker_policy: TrailingMarkerPolicy = TrailingMarkerPolicy.ALL_BUT_LAST


class ExplanationSettings(BaseModel):
    """Minimum explanation length after a code block."""

    min_sentences: int = Field(2, ge=1)
    complex_example_lines: int = Field(
        8,
        ge=0,
        description="Code blocks with more source lines than this are 'complex'",
    )


class CodeSettings(BaseModel):
    """Fenced code block expectations."""

    expected_language: str = Field("java", min_length=1)


_DEFAULT_SEVERITIES: dict[RuleId, Severity] = {
    RuleId.LINE_WIDTH: Severity.ERROR,
    RuleId.TRAILING_MARKER: Severity.WARNING,
    RuleId.SECTION_TITLE_NO_NUMBERING: Severity.ERROR,
    RuleId.EXPLANATION_MIN_LENGTH: Severity.WARNING,
    RuleId.CODE_FENCE_LANGUAGE_TAG: Severity.ERROR,
    RuleId.TERMINOLOGY_NO_PARENS_ON_NAMES: Severity.WARNING,
    RuleId.PARSE_ERROR: Severity.ERROR,
    RuleId.INTERNAL: Severity.ERROR,
}


# ---------------------------------------------------------------------------
# Root
# ---------------------------------------------------------------------------


class CheckerConfig(BaseModel):
    """Complete style checker configuration."""

    metadata: MetaData = Field(default_factory=MetaData)
    parsing: ParsingSettings = Field(default_factory=ParsingSettings)
    formatting: FormattingSettings = Field(default_factory=FormattingSettings)
    explanations: ExplanationSettings = Field(default_factory=ExplanationSettings)
    code: CodeSettings = Field(default_factory=CodeSettings)
    severities: dict[RuleId, Severity] = Field(default_factory=lambda: dict(_DEFAULT_SEVERITIES))
    enabled_rules: Optional[list[RuleId]] = Field(
        None, description="Rules to run; null runs every rule"
    )

    @field_validator("severities")
    @classmethod
    def _fill_severities(cls, value: dict[RuleId, Severity]) -> dict[RuleId, Severity]:
        return {**_DEFAULT_SEVERITIES, **value}

    def severity_for(self, rule_id: RuleId) -> Severity:
        return self.severities.get(rule_id, _DEFAULT_SEVERITIES[rule_id])
