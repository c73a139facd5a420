"""Document validation and report aggregation."""

from docstyle.validation.report_builder import build_report
from docstyle.validation.validator import Validator

__all__ = ["Validator", "build_report"]
