"""Per-keystroke element classification for an interactive editor.

Uses the tokenizer's rules with only the previous element as context: the
line below the cursor usually does not exist yet, so character cues are
accepted on casing, length and the stoplist alone. Callers may re-check a
cue with :func:`parsers.fountain.is_character_cue` once the next line is
written.
"""

import logging

from core.models import ElementType
from parsers import rules
from parsers.normalizer import split_lines

logger = logging.getLogger(__name__)

DEFAULT_CYCLE: tuple[ElementType, ...] = (
    ElementType.ACTION,
    ElementType.SCENE_HEADING,
    ElementType.CHARACTER,
    ElementType.DIALOGUE,
    ElementType.PARENTHETICAL,
    ElementType.TRANSITION,
)

_NEXT_ELEMENT: dict[ElementType, ElementType] = {
    ElementType.SCENE_HEADING: ElementType.ACTION,
    ElementType.CHARACTER: ElementType.DIALOGUE,
    ElementType.PARENTHETICAL: ElementType.DIALOGUE,
    ElementType.DIALOGUE: ElementType.ACTION,
    ElementType.TRANSITION: ElementType.SCENE_HEADING,
}

# A cue cannot sit inside a dialogue block.
_DIALOGUE_BLOCK = frozenset(
    {ElementType.CHARACTER, ElementType.DIALOGUE, ElementType.PARENTHETICAL}
)
_DIALOGUE_CONTEXT = frozenset({ElementType.CHARACTER, ElementType.PARENTHETICAL})
_PARENTHETICAL_CONTEXT = frozenset({ElementType.CHARACTER, ElementType.DIALOGUE})


def classify_line(text: str, previous_type: ElementType | None = None) -> ElementType:
    """Element type of a single line given the previous line's type."""
    line = text.strip()
    if not line:
        return ElementType.ACTION

    markup = rules.classify_markup(line)
    if markup is not None:
        return markup[0]

    if rules.is_parenthetical(line) and previous_type in _PARENTHETICAL_CONTEXT:
        return ElementType.PARENTHETICAL

    if rules.looks_like_cue(line) and (
        rules.is_forced_character(line) or previous_type not in _DIALOGUE_BLOCK
    ):
        return ElementType.CHARACTER

    if previous_type in _DIALOGUE_CONTEXT:
        return ElementType.DIALOGUE

    return ElementType.ACTION


def next_element_type(current_type: ElementType | None) -> ElementType:
    """Element a new line gets when the writer advances past *current_type*."""
    if current_type is None:
        return ElementType.ACTION
    return _NEXT_ELEMENT.get(current_type, ElementType.ACTION)


def cycle_element_type(
    current_type: ElementType | None,
    order: tuple[ElementType, ...] | list[ElementType] = DEFAULT_CYCLE,
) -> ElementType:
    """Next type in the manual override cycle, wrapping at the end.

    A type missing from *order* restarts the cycle at its first entry. An
    empty *order* falls back to ``DEFAULT_CYCLE``.
    """
    types = tuple(order) or DEFAULT_CYCLE
    try:
        index = types.index(current_type)
    except ValueError:
        return types[0]
    return types[(index + 1) % len(types)]


def format_element(text: str, element_type: ElementType) -> str:
    """Apply the display conventions of *element_type* to a line."""
    line = text.strip()

    if element_type in (
        ElementType.SCENE_HEADING,
        ElementType.CHARACTER,
        ElementType.TRANSITION,
    ):
        return line.upper()
    if element_type == ElementType.CENTERED:
        if line.startswith(">"):
            line = line[1:]
        if line.endswith("<"):
            line = line[:-1]
        return line.strip().upper()
    if element_type == ElementType.PARENTHETICAL:
        if not line.startswith("("):
            line = f"({line}"
        if not line.endswith(")"):
            line = f"{line})"
        return line
    return line


def classify_lines(text: str) -> list[tuple[ElementType, str]]:
    """Live-classify every line of *text*, threading the previous type.

    Returns ``(type, formatted text)`` per line. Unlike the tokenizer this
    keeps every blank line and never looks ahead.
    """
    results: list[tuple[ElementType, str]] = []
    previous_type: ElementType | None = None

    for line in split_lines(text):
        element_type = classify_line(line, previous_type)
        results.append((element_type, format_element(line, element_type)))
        previous_type = element_type if line.strip() else None

    logger.debug("Live-classified %d lines", len(results))
    return results
