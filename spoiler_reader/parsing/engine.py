from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from .catalogs import (
    CHARACTER_FATES_HEADING,
    INTERPRETATION_HEADING,
    INTERPRETATION_SUBSECTIONS,
    KEY_MOMENTS_HEADING,
    MAX_CHARACTER_FATES,
    MAX_KEY_MOMENTS,
    OVERVIEW_HEADING,
    SECTION_LEVEL,
    STORY_BEATS,
    SUBSECTION_LEVEL,
)
from .grammars import DEFAULT_MAX_LINE_CHARS, bullet_lines, parse_fate_line, parse_moment_line
from .models import (
    CatalogEntry,
    CharacterFate,
    InterpretationSection,
    KeyMoment,
    StorySection,
    StructuredView,
)
from .sections import extract_section

logger = logging.getLogger(__name__)

DEFAULT_MAX_CHARS = 50_000


def extract_overview(text: str) -> str:
    return extract_section(text, OVERVIEW_HEADING, SECTION_LEVEL)


def structure_story(text: str, catalog: Sequence[CatalogEntry] = STORY_BEATS) -> List[StorySection]:
    sections = []
    for entry in catalog:
        content = extract_section(text, entry.label, SECTION_LEVEL)
        if content:
            sections.append(StorySection(id=entry.id, title=entry.label, icon=entry.icon, content=content))
    return sections


def parse_character_fates(text: str, max_line_chars: int = DEFAULT_MAX_LINE_CHARS) -> List[CharacterFate]:
    section = extract_section(text, CHARACTER_FATES_HEADING, SECTION_LEVEL)
    if not section:
        return []
    fates = []
    for line in bullet_lines(section, max_line_chars):
        fate = parse_fate_line(line)
        if fate is not None:
            fates.append(fate)
    return fates[:MAX_CHARACTER_FATES]


def parse_key_moments(text: str, max_line_chars: int = DEFAULT_MAX_LINE_CHARS) -> List[KeyMoment]:
    section = extract_section(text, KEY_MOMENTS_HEADING, SECTION_LEVEL)
    if not section:
        return []
    moments = []
    for line in bullet_lines(section, max_line_chars):
        moment = parse_moment_line(line)
        if moment is not None:
            moments.append(moment)
    return moments[:MAX_KEY_MOMENTS]


def structure_interpretations(
    text: str, catalog: Sequence[CatalogEntry] = INTERPRETATION_SUBSECTIONS
) -> List[InterpretationSection]:
    """
    Sub-headings are one level below "What It Really Means" and are only
    searched for inside that section's body.
    """
    main_section = extract_section(text, INTERPRETATION_HEADING, SECTION_LEVEL)
    if not main_section:
        return []
    subsections = []
    for entry in catalog:
        content = extract_section(main_section, entry.label, SUBSECTION_LEVEL)
        if content:
            subsections.append(InterpretationSection(title=entry.label, content=content))
    return subsections


class ParsingEngine:
    """
    Abstract spoiler parsing engine. Implementations should be stateless and reusable.
    """

    def parse(self, text: Optional[str]) -> StructuredView:
        raise NotImplementedError


class SpoilerParsingEngine(ParsingEngine):
    """
    Turns one spoiler blob into a StructuredView.

    Nothing here raises on bad content: a missing heading or malformed bullet
    only empties the entity it belongs to. Input longer than `max_chars` is
    truncated before any pattern runs, and over-long bullet lines are skipped.
    """

    def __init__(self, max_chars: int = DEFAULT_MAX_CHARS, max_line_chars: int = DEFAULT_MAX_LINE_CHARS):
        if max_chars <= 0:
            raise ValueError(f"max_chars must be positive, got {max_chars}")
        if max_line_chars <= 0:
            raise ValueError(f"max_line_chars must be positive, got {max_line_chars}")
        self.max_chars = max_chars
        self.max_line_chars = max_line_chars

    def parse(self, text: Optional[str]) -> StructuredView:
        if text is not None and not isinstance(text, str):
            raise TypeError(f"spoiler text must be str, got {type(text).__name__}")
        if not text:
            return StructuredView()
        if len(text) > self.max_chars:
            logger.warning("spoiler text truncated from %d to %d chars", len(text), self.max_chars)
            text = text[: self.max_chars]

        view = StructuredView(
            movie_overview=extract_overview(text),
            story_sections=tuple(structure_story(text)),
            character_fates=tuple(parse_character_fates(text, self.max_line_chars)),
            key_moments=tuple(parse_key_moments(text, self.max_line_chars)),
            interpretations=tuple(structure_interpretations(text)),
        )
        logger.debug(
            "parsed spoiler: %d sections, %d fates, %d moments, %d interpretations",
            len(view.story_sections),
            len(view.character_fates),
            len(view.key_moments),
            len(view.interpretations),
        )
        return view


_default_engine = SpoilerParsingEngine()


def parse(text: Optional[str]) -> StructuredView:
    return _default_engine.parse(text)
