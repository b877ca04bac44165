"""
Input Validators - checks for text arriving at the HTTP boundary.

The pipeline itself is total and never raises on odd text. These helpers are
where "too long", "empty", or "unknown category" becomes an error, raised as
ValidationError and turned into HTTP 400 by the routes.
"""

import logging
from typing import Iterable

from ..config import DEFAULT_MAX_TEXT_LENGTH

logger = logging.getLogger(__name__)


class ValidationError(ValueError):
    """Raised when boundary input is rejected. The message is safe to show callers."""


def validate_not_empty(value: str | None, field_name: str = "input") -> str:
    """Stripped value; rejects None, empty, and whitespace-only strings."""
    stripped = (value or "").strip()
    if not stripped:
        raise ValidationError(f"{field_name} cannot be empty")
    return stripped


def validate_length(
    value: str,
    field_name: str = "input",
    min_length: int = 0,
    max_length: int = DEFAULT_MAX_TEXT_LENGTH,
) -> str:
    """Value unchanged when min_length <= len(value) <= max_length."""
    size = len(value)
    if size < min_length:
        raise ValidationError(f"{field_name} must be at least {min_length} characters")
    if size > max_length:
        logger.info(f"[Validators] {field_name} rejected: {size} chars over {max_length}")
        raise ValidationError(f"{field_name} must be at most {max_length} characters")
    return value


def validate_in_choices(value: str, choices: Iterable[str], field_name: str = "value") -> str:
    """Value unchanged when it is one of choices (e.g. an avoid category)."""
    allowed = list(choices)
    if value in allowed:
        return value
    raise ValidationError(f"{field_name} must be one of: {', '.join(allowed)}")


def validate_text_input(
    value: str,
    field_name: str = "text",
    max_length: int = DEFAULT_MAX_TEXT_LENGTH,
) -> str:
    """Non-empty and within max_length. Returns the original (unstripped) text."""
    validate_not_empty(value, field_name)
    validate_length(value, field_name, min_length=1, max_length=max_length)
    logger.debug(f"[Validators] {field_name} accepted ({len(value)} chars)")
    return value
