"""Character-to-scene lookups over indexed scenes."""

from collections import Counter

from core.models import IndexedScene
from parsers.rules import canonical_name


def scenes_for_character(scenes: list[IndexedScene], character_name: str) -> list[IndexedScene]:
    """Scenes in which *character_name* has a cue (case-insensitive)."""
    target = canonical_name(character_name)
    if not target:
        return []
    return [
        scene
        for scene in scenes
        if any(canonical_name(name) == target for name in scene.characters)
    ]


def character_scene_counts(scenes: list[IndexedScene]) -> dict[str, int]:
    """Map of upper-case character name to the number of scenes it appears in."""
    counts: Counter[str] = Counter()
    for scene in scenes:
        keys = dict.fromkeys(canonical_name(name) for name in scene.characters)
        counts.update(key for key in keys if key)
    return dict(counts)
