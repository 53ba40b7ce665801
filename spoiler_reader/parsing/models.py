from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Tuple


class FateStatus(str, Enum):
    ALIVE = "ALIVE"
    DEAD = "DEAD"
    UNKNOWN = "UNKNOWN"


@dataclass(frozen=True)
class CatalogEntry:
    id: str
    label: str
    icon: str = ""


@dataclass(frozen=True)
class StorySection:
    id: str
    title: str
    icon: str
    content: str


@dataclass(frozen=True)
class CharacterFate:
    name: str
    actor: str
    status: FateStatus
    summary: str


@dataclass(frozen=True)
class KeyMoment:
    title: str
    description: str


@dataclass(frozen=True)
class InterpretationSection:
    title: str
    content: str


@dataclass(frozen=True)
class StructuredView:
    """
    Everything derived from one spoiler text. Built fresh by every parse call.
    """

    movie_overview: str = ""
    story_sections: Tuple[StorySection, ...] = ()
    character_fates: Tuple[CharacterFate, ...] = ()
    key_moments: Tuple[KeyMoment, ...] = ()
    interpretations: Tuple[InterpretationSection, ...] = ()

    @property
    def has_structured_content(self) -> bool:
        return len(self.story_sections) > 0

    def to_dict(self) -> Dict[str, Any]:
        fates = []
        for fate in self.character_fates:
            data = asdict(fate)
            data["status"] = fate.status.value
            fates.append(data)
        return {
            "movie_overview": self.movie_overview,
            "story_sections": [asdict(section) for section in self.story_sections],
            "character_fates": fates,
            "key_moments": [asdict(moment) for moment in self.key_moments],
            "interpretations": [asdict(item) for item in self.interpretations],
            "has_structured_content": self.has_structured_content,
        }
