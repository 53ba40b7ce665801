"""
Parsing subsystem exports.
"""

from .catalogs import INTERPRETATION_SUBSECTIONS, STORY_BEATS
from .engine import (
    ParsingEngine,
    SpoilerParsingEngine,
    extract_overview,
    parse,
    parse_character_fates,
    parse_key_moments,
    structure_interpretations,
    structure_story,
)
from .grammars import bullet_lines, parse_fate_line, parse_moment_line
from .models import (
    CatalogEntry,
    CharacterFate,
    FateStatus,
    InterpretationSection,
    KeyMoment,
    StorySection,
    StructuredView,
)
from .sections import extract_section

__all__ = [
    "CatalogEntry",
    "CharacterFate",
    "FateStatus",
    "INTERPRETATION_SUBSECTIONS",
    "InterpretationSection",
    "KeyMoment",
    "ParsingEngine",
    "STORY_BEATS",
    "SpoilerParsingEngine",
    "StorySection",
    "StructuredView",
    "bullet_lines",
    "extract_overview",
    "extract_section",
    "parse",
    "parse_character_fates",
    "parse_fate_line",
    "parse_key_moments",
    "parse_moment_line",
    "structure_interpretations",
    "structure_story",
]
