import pytest

SAMPLE_SPOILER = """## Movie Overview
A retired spy is pulled back in for one last job.

## ⚠️ SPOILER WARNING

## The Climax
The vault floods while the team is still inside.

## The Beginning 🎬
Hero leaves home.
### A note
Still part of the beginning.

## Ending Explained
The mentor was the mole all along.

## Character Fates
- **Bond** | Craig | ALIVE | Escapes.
- **M** | Dench | dead | Killed in finale.
- unparseable text
- **Old House** — Symbolic of decay

## Key Moments
- **[The Vault]** — Everything goes wrong.
- **Rooftop Chase** - A long chase over the city.
Not a bullet line.

## What It Really Means
### Fan Theories
The mentor planned the flood.

### Symbolism
Water stands for memory.

### Unanswered Questions

## Trailing Notes
### Hidden Clues
Outside the interpretation section.
"""


@pytest.fixture
def sample_spoiler():
    return SAMPLE_SPOILER
