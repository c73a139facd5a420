"""Enumerations for style checking."""

from enum import Enum


class Severity(str, Enum):
    """How serious a finding is."""

    WARNING = "warning"
    ERROR = "error"


class RuleId(str, Enum):
    """Identifiers of every rule the checker can report."""

    LINE_WIDTH = "LINE_WIDTH"
    TRAILING_MARKER = "TRAILING_MARKER"
    SECTION_TITLE_NO_NUMBERING = "SECTION_TITLE_NO_NUMBERING"
    EXPLANATION_MIN_LENGTH = "EXPLANATION_MIN_LENGTH"
    CODE_FENCE_LANGUAGE_TAG = "CODE_FENCE_LANGUAGE_TAG"
    TERMINOLOGY_NO_PARENS_ON_NAMES = "TERMINOLOGY_NO_PARENS_ON_NAMES"
    # Raised by the pipeline rather than by a rule
    PARSE_ERROR = "PARSE_ERROR"
    INTERNAL = "INTERNAL"


class TrailingMarkerPolicy(str, Enum):
    """Which explanation lines must carry the trailing marker."""

    ALL_BUT_LAST = "all_but_last"  # last line of each paragraph is exempt
    ALL = "all"


class OutputFormat(str, Enum):
    """Report output formats supported by the CLI."""

    TEXT = "text"
    JSON = "json"
