from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from spoiler_reader.parsing import SpoilerParsingEngine
from api.dependencies import get_engine

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/spoilers", tags=["spoilers"])


class SpoilerPayload(BaseModel):
    spoiler: Optional[str] = None


class MovieRecord(BaseModel):
    title: str
    year: str = ""
    poster: str = ""
    backdrop: str = ""
    rating: float = 0.0
    genres: List[str] = Field(default_factory=list)
    overview: str = ""
    spoiler: Optional[str] = None
    runtime: Optional[int] = None


@router.post("/parse")
def parse_spoiler(payload: SpoilerPayload, engine: SpoilerParsingEngine = Depends(get_engine)):
    view = engine.parse(payload.spoiler)
    logger.info(
        "parsed spoiler (%d chars): structured=%s",
        len(payload.spoiler or ""),
        view.has_structured_content,
    )
    return view.to_dict()


@router.post("/movie")
def structure_movie(movie: MovieRecord, engine: SpoilerParsingEngine = Depends(get_engine)):
    view = engine.parse(movie.spoiler)
    logger.info("structured spoiler for %r (%s): structured=%s", movie.title, movie.year, view.has_structured_content)
    return {
        "title": movie.title,
        "year": movie.year,
        "has_spoiler": bool(movie.spoiler),
        "structured": view.to_dict(),
    }
