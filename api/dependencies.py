from __future__ import annotations

import os
from functools import lru_cache
from typing import List

from spoiler_reader.parsing import SpoilerParsingEngine
from spoiler_reader.parsing.engine import DEFAULT_MAX_CHARS
from spoiler_reader.parsing.grammars import DEFAULT_MAX_LINE_CHARS


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


@lru_cache(maxsize=1)
def get_engine() -> SpoilerParsingEngine:
    return SpoilerParsingEngine(
        max_chars=_int_env("SPOILER_MAX_CHARS", DEFAULT_MAX_CHARS),
        max_line_chars=_int_env("SPOILER_MAX_LINE_CHARS", DEFAULT_MAX_LINE_CHARS),
    )


def get_cors_origins() -> List[str]:
    raw = os.getenv("CORS_ALLOW_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()] or ["*"]
