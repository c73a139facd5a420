"""Domain errors — custom exceptions for the style checker.

These exceptions are raised by the parser, the rule set and the
configuration layer, and caught by the application or presentation
layers. They carry no infrastructure dependencies.
"""

from __future__ import annotations

from typing import Optional


class StyleCheckerError(Exception):
    """Base exception for all style checker errors."""


class ParseError(StyleCheckerError):
    """Raised when a document cannot be split into its structural units."""

    def __init__(self, message: str, doc_id: str = "", line: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.doc_id = doc_id
        self.line = line

    def __str__(self) -> str:
        if self.line is not None:
            return f"{self.message} (line {self.line})"
        return self.message


class RuleEvaluationError(StyleCheckerError):
    """Raised when a rule implementation fails on its input."""

    def __init__(self, rule_id: str, cause: BaseException) -> None:
        super().__init__(f"Rule {rule_id} failed: {cause.__class__.__name__}: {cause}")
        self.rule_id = rule_id
        self.cause = cause


class ConfigurationError(StyleCheckerError):
    """Raised when configuration is invalid or names unknown rules."""


class CorpusError(StyleCheckerError):
    """Raised when the corpus directory cannot be read."""
