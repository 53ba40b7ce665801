"""
Example: structure a spoiler text file and print the result as JSON.

Usage:
    python3 parsing_demo.py --input /path/to/spoiler.md [--max-chars 50000] [--verbose]
"""

import argparse
import json
import logging
from pathlib import Path

from spoiler_reader.parsing import SpoilerParsingEngine
from spoiler_reader.parsing.engine import DEFAULT_MAX_CHARS


def setup_logging(verbose: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        force=True,
    )


def main(argv=None):
    parser = argparse.ArgumentParser()
    parser.add_argument("--input", required=True, type=Path, help="Path to spoiler text (markdown)")
    parser.add_argument("--max-chars", default=DEFAULT_MAX_CHARS, type=int, help="Truncate input beyond this length")
    parser.add_argument("--verbose", action="store_true", help="Log dropped lines and missing sections")
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    if not args.input.exists():
        raise FileNotFoundError(f"Spoiler file not found: {args.input}")

    engine = SpoilerParsingEngine(max_chars=args.max_chars)
    view = engine.parse(args.input.read_text(encoding="utf-8"))
    print(json.dumps(view.to_dict(), indent=2, ensure_ascii=False))
    if not view.has_structured_content:
        logging.getLogger(__name__).info("no story sections found; render the raw text instead")
    return view


if __name__ == "__main__":
    main()
