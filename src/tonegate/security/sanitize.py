"""
Text sanitising for content entering the pipeline from outside.

sanitize_text() strips null bytes and other C0 control characters (keeping
tab, newline, carriage return) and truncates to a maximum length. It never
rewrites words, so matching and scoring still see what the author wrote.
"""

import logging
import re

from ..config import DEFAULT_MAX_TEXT_LENGTH

logger = logging.getLogger(__name__)

CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")


def sanitize_text(content: str, max_length: int = DEFAULT_MAX_TEXT_LENGTH) -> str:
    """Remove control characters and truncate to max_length."""
    if not content:
        return ""

    cleaned = CONTROL_CHARS.sub("", content)
    if len(cleaned) > max_length:
        cleaned = cleaned[:max_length]
        logger.info(f"[Sanitize] Content truncated to {max_length} chars")
    return cleaned
