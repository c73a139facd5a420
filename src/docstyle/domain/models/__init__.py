"""Domain models — public API.

Provides convenient imports for the most commonly used domain entities.
"""

from docstyle.domain.models.document import (
    CodeExample,
    Document,
    Line,
    Section,
)
from docstyle.domain.models.enums import (
    OutputFormat,
    RuleId,
    Severity,
    TrailingMarkerPolicy,
)
from docstyle.domain.models.finding import Finding, Location
from docstyle.domain.models.report import Report

__all__ = [
    # Document
    "CodeExample",
    "Document",
    "Line",
    "Section",
    # Enums
    "OutputFormat",
    "RuleId",
    "Severity",
    "TrailingMarkerPolicy",
    # Results
    "Finding",
    "Location",
    "Report",
]
