"""
Fixed heading catalogs recognised in spoiler text.

Order matters: structurers emit entries in catalog order, not in the order
the headings appear in the source.
"""

from __future__ import annotations

from typing import Tuple

from .models import CatalogEntry

OVERVIEW_HEADING = "Movie Overview"
CHARACTER_FATES_HEADING = "Character Fates"
KEY_MOMENTS_HEADING = "Key Moments"
INTERPRETATION_HEADING = "What It Really Means"

STORY_BEATS: Tuple[CatalogEntry, ...] = (
    CatalogEntry(id="beginning", label="The Beginning", icon="🎬"),
    CatalogEntry(id="turning-point", label="Major Turning Point", icon="🔄"),
    CatalogEntry(id="climax", label="The Climax", icon="⚡"),
    CatalogEntry(id="ending", label="Ending Explained", icon="🎭"),
    CatalogEntry(id="post-credit", label="Post-Credit Scene", icon="🎞️"),
)

INTERPRETATION_SUBSECTIONS: Tuple[CatalogEntry, ...] = (
    CatalogEntry(id="symbolism", label="Symbolism"),
    CatalogEntry(id="hidden-clues", label="Hidden Clues"),
    CatalogEntry(id="fan-theories", label="Fan Theories"),
    CatalogEntry(id="unanswered-questions", label="Unanswered Questions"),
)

# Heading levels as markdown hash counts.
SECTION_LEVEL = 2
SUBSECTION_LEVEL = 3

MAX_CHARACTER_FATES = 6
MAX_KEY_MOMENTS = 6
