#!/usr/bin/env python3
"""Index a Fountain screenplay file and print its scenes as JSON.

Usage:
    python scripts/index_screenplay.py script.fountain
    python scripts/index_screenplay.py script.fountain --tokens
    python scripts/index_screenplay.py script.fountain --count
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.exceptions import SourceReadException
from parsers.fountain import parse
from parsers.normalizer import normalize
from services.character_scenes import character_scene_counts
from services.scene_indexer import count_scenes, index_scenes

logger = logging.getLogger(__name__)


def read_source(path: Path) -> str:
    """Read a screenplay file as UTF-8 text."""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceReadException(
            f"Cannot read screenplay: {path}", details={"path": str(path), "error": str(exc)}
        ) from exc


def build_report(text: str, include_tokens: bool = False) -> dict:
    """Scenes, characters and (optionally) tokens of *text* as plain data."""
    document = parse(normalize(text))
    scenes = index_scenes(text)
    report = {
        "title": document.title,
        "author": document.author,
        "total_scenes": len(scenes),
        "characters": document.characters,
        "character_scene_counts": character_scene_counts(scenes),
        "scenes": [scene.model_dump(mode="json", exclude={"content"}) for scene in scenes],
    }
    if include_tokens:
        report["tokens"] = [token.model_dump(mode="json") for token in document.tokens]
    return report


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Index scenes of a Fountain screenplay")
    parser.add_argument("source", type=Path, help="Fountain screenplay file")
    parser.add_argument("--tokens", action="store_true", help="Include the token stream")
    parser.add_argument("--count", action="store_true", help="Print only the scene count")
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation (0 for compact)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        text = read_source(args.source)
    except SourceReadException as exc:
        logger.error("%s (%s)", exc.message, exc.details.get("error"))
        return 1

    if args.count:
        print(count_scenes(text))
        return 0

    report = build_report(text, include_tokens=args.tokens)
    print(json.dumps(report, indent=args.indent or None, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
