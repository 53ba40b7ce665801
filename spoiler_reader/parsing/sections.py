from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

WARNING_GLYPH = "⚠️?"


def _heading_pattern(heading: str, level: int) -> "re.Pattern[str]":
    hashes = "#" * level
    escaped = re.escape(heading)
    return re.compile(
        rf"^[ \t]*{hashes}(?!#)[ \t]*(?:{WARNING_GLYPH}[ \t]*)?{escaped}[^\n]*(?:\n|\Z)"
        rf"(.*?)(?=^[ \t]*{hashes}(?!#)|\Z)",
        re.IGNORECASE | re.MULTILINE | re.DOTALL,
    )


def extract_section(text: str, heading: str, level: int = 2) -> str:
    """
    Return the trimmed body under the first `level`-deep heading matching
    `heading`, up to the next heading of the same depth. Deeper headings stay
    inside the body. Returns "" when the heading is absent.
    """
    if not text:
        return ""
    if level < 1:
        raise ValueError(f"heading level must be positive, got {level}")
    match = _heading_pattern(heading, level).search(text)
    if not match:
        logger.debug("section %r (level %d) not found", heading, level)
        return ""
    return match.group(1).strip()
