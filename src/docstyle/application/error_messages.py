"""User-friendly error messages for Pydantic validation errors.

Belongs to the Application layer — translates Pydantic machine errors
into messages that name the offending setting or CLI flag.
"""

from __future__ import annotations

from typing import Any

# Maps (field, error_type) → message
_ERROR_MAP: dict[tuple[str, str], str] = {
    ("formatting.max_line_width", "greater_than"): (
        "Maximum line width must be a positive integer (--max-line-width)."
    ),
    ("formatting.max_line_width", "int_parsing"): "Maximum line width must be a number.",
    ("explanations.min_sentences", "greater_than_equal"): (
        "Minimum explanation sentences must be at least 1 (--min-explanation-sentences)."
    ),
    ("explanations.complex_example_lines", "greater_than_equal"): (
        "The complex example threshold cannot be negative."
    ),
    ("formatting.trailing_marker_policy", "enum"): (
        "Trailing marker policy must be 'all_but_last' or 'all'."
    ),
    ("code.expected_language", "string_too_short"): "The expected code language cannot be empty.",
}


def friendly_error(
    field: str,
    error_type: str,
    fallback: str | None = None,
) -> str:
    """Return a user-friendly error message.

    Args:
        field: Dotted path of the field that failed validation.
        error_type: The Pydantic error type string (e.g., ``greater_than``).
        fallback: Fallback message if no mapping exists.

    Returns:
        A user-friendly error string.
    """
    message = _ERROR_MAP.get((field, error_type))
    if message:
        return message
    if fallback:
        return f"{field}: {fallback}" if field else fallback
    return f"Invalid value for setting '{field}'."


def format_validation_errors(errors: list[dict[str, Any]]) -> list[str]:
    """Convert a list of Pydantic error dicts to user-friendly messages.

    Args:
        errors: Output of ``ValidationError.errors()``.

    Returns:
        List of user-friendly error strings.
    """
    result: list[str] = []
    for err in errors:
        field = ".".join(str(loc) for loc in err.get("loc", []))
        error_type = err.get("type", "")
        result.append(friendly_error(field, error_type, fallback=err.get("msg")))
    return result
