"""
Line grammars for bullet lists inside spoiler sections.

Each grammar is a single compiled pattern plus a function returning a model
instance or None, so every grammar can be exercised on its own.
"""

from __future__ import annotations

import logging
import re
from typing import Iterator, Optional

from .models import CharacterFate, FateStatus, KeyMoment

logger = logging.getLogger(__name__)

BULLET_MARKERS = ("-", "•")
DEFAULT_MAX_LINE_CHARS = 2000

# Patterns are anchored on the bullet and use negated classes so a
# failed match costs one linear pass over the line.

# - **Name** | Actor | STATUS | Summary
PIPE_FATE_RE = re.compile(
    r"^\s*[-•]\s*\*\*([^*]+)\*\*\s*\|([^|]+)\|\s*(ALIVE|DEAD|UNKNOWN)\s*\|(.+)",
    re.IGNORECASE,
)
# - **Name** — Summary
DASH_FATE_RE = re.compile(r"^\s*[-•]\s*\*\*([^*]+)\*\*\s*[-—]\s*(.+)")
# - **[Title]** — Description
MOMENT_RE = re.compile(r"^\s*[-•]\s*\*\*\[?([^*\]]+)\]?\*\*\s*[-—]\s*(.+)")


def bullet_lines(section: str, max_line_chars: int = DEFAULT_MAX_LINE_CHARS) -> Iterator[str]:
    for line in section.split("\n"):
        if not line.strip().startswith(BULLET_MARKERS):
            continue
        if len(line) > max_line_chars:
            logger.debug("skipping bullet line of %d chars", len(line))
            continue
        yield line


def parse_pipe_fate(line: str) -> Optional[CharacterFate]:
    match = PIPE_FATE_RE.match(line)
    if not match:
        return None
    name, actor, status, summary = (group.strip() for group in match.groups())
    return CharacterFate(
        name=name,
        actor=actor,
        status=FateStatus(status.upper()),
        summary=summary,
    )


def parse_dash_fate(line: str) -> Optional[CharacterFate]:
    # Degrades to an unknown fate with no actor.
    # TODO: decide whether lines without actor/status should be rejected instead.
    match = DASH_FATE_RE.match(line)
    if not match:
        return None
    return CharacterFate(
        name=match.group(1).strip(),
        actor="",
        status=FateStatus.UNKNOWN,
        summary=match.group(2).strip(),
    )


def parse_fate_line(line: str) -> Optional[CharacterFate]:
    """Try the pipe-delimited form first, then the dash fallback."""
    fate = parse_pipe_fate(line)
    if fate is None:
        fate = parse_dash_fate(line)
    if fate is None:
        logger.debug("dropping unparseable fate line: %r", line)
    return fate


def parse_moment_line(line: str) -> Optional[KeyMoment]:
    match = MOMENT_RE.match(line)
    if not match:
        logger.debug("dropping unparseable moment line: %r", line)
        return None
    return KeyMoment(title=match.group(1).strip(), description=match.group(2).strip())
