"""Deterministic scene indexing over the normalized token stream.

This is the single source of truth for scene boundaries. Every index is a
token index of ``parse(normalize(text))``, which is the line index an editor
holding the same normalized text uses, so ``start_line_index`` can drive
scroll-to-scene navigation directly.
"""

import logging

from core.models import ElementType, IndexedScene, StoreScene, Token
from parsers import rules
from parsers.fountain import parse
from parsers.normalizer import normalize
from parsers.scene_heading import parse_scene_heading

logger = logging.getLogger(__name__)


def index_scenes(text: str) -> list[IndexedScene]:
    """Index every scene of *text*.

    Scene *k* spans from its heading token to the token before the next
    heading; the last scene runs to the final token. A document without
    headings has no scenes.
    """
    tokens = parse(normalize(text)).tokens
    heading_indices = _heading_indices(tokens)

    scenes: list[IndexedScene] = []
    for ordinal, start in enumerate(heading_indices):
        end = (
            heading_indices[ordinal + 1] - 1
            if ordinal + 1 < len(heading_indices)
            else len(tokens) - 1
        )
        number = ordinal + 1
        heading = tokens[start].text
        hc = parse_scene_heading(heading)

        scenes.append(
            IndexedScene(
                id=scene_id(number, start),
                number=number,
                heading=heading,
                location=hc.location,
                time_of_day=hc.time_of_day,
                location_type=hc.location_type,
                start_line_index=start,
                end_line_index=end,
                characters=_scene_characters(tokens, start, end),
                content=_scene_content(tokens, start, end),
            )
        )

    logger.debug("Indexed %d scenes over %d lines", len(scenes), len(tokens))
    return scenes


def count_scenes(text: str) -> int:
    """Number of scenes in *text* without building spans or character lists."""
    if not text.strip():
        return 0
    tokens = parse(normalize(text)).tokens
    return sum(1 for token in tokens if token.type == ElementType.SCENE_HEADING)


def scene_id(number: int, start_line_index: int) -> str:
    """Positional scene id; changes whenever the scene moves."""
    return f"scene-{number}-{start_line_index}"


def get_scene_at_line(scenes: list[IndexedScene], line_index: int) -> IndexedScene | None:
    """Scene whose span contains *line_index*, or ``None`` (e.g. before the first heading)."""
    for scene in scenes:
        if scene.start_line_index <= line_index <= scene.end_line_index:
            return scene
    return None


def to_store_scene(scene: IndexedScene) -> StoreScene:
    """Project an indexed scene onto the record shape persistence works with."""
    return StoreScene(
        id=scene.id,
        number=scene.number,
        heading=scene.heading,
        location=scene.location,
        time_of_day=scene.time_of_day,
        summary=scene.summary,
        characters=list(scene.characters),
        start_line=scene.start_line_index,
        end_line=scene.end_line_index,
        content=scene.content,
    )


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _heading_indices(tokens: list[Token]) -> list[int]:
    return [i for i, token in enumerate(tokens) if token.type == ElementType.SCENE_HEADING]


def _scene_characters(tokens: list[Token], start: int, end: int) -> list[str]:
    """Cleaned cue names inside ``[start, end]`` in order of first appearance."""
    names: dict[str, None] = {}
    for token in tokens[start : end + 1]:
        if token.type != ElementType.CHARACTER:
            continue
        name = rules.extract_character_name(token.text)
        if name:
            names.setdefault(name, None)
    return list(names)


def _scene_content(tokens: list[Token], start: int, end: int) -> str:
    return "\n".join(token.text for token in tokens[start : end + 1])
