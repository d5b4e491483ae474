"""Line classification rules shared by the tokenizer and the live classifier.

Each rule is a predicate over a single trimmed line. Context (previous element
type, next line) is passed in explicitly by the callers; nothing here keeps
state.
"""

import re

from core.models import ElementType

# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------

SCENE_HEADING_RE = re.compile(r"^(INT|EXT|INT\./EXT|INT/EXT|I/E|EST)[.\s]", re.IGNORECASE)
# A single leading dot forces a heading; ``...`` is an ellipsis, not a heading.
FORCED_SCENE_HEADING_RE = re.compile(r"^\.(?!\.)")
FORCED_TRANSITION_RE = re.compile(r"^>\s*.+$")
CENTERED_RE = re.compile(r"^>.*<$")
PARENTHETICAL_RE = re.compile(r"^\([^()]*\)$")
PAGE_BREAK_RE = re.compile(r"^={3,}$")

_FORCED_CHARACTER_PREFIX = "^"
_EXTENSION_RE = re.compile(r"\s*\([^)]*\)\s*$")
_CUE_NUMBER_RE = re.compile(r"\s+\d+$")

MIN_NAME_LENGTH = 2
MAX_NAME_LENGTH = 40

# All-caps lines that are never character cues.
NOT_CHARACTERS: frozenset[str] = frozenset(
    {
        "THE END",
        "CONTINUED",
        "MORE",
        "FADE IN",
        "FADE OUT",
        "FADE TO BLACK",
        "CUT TO",
        "DISSOLVE TO",
        "SMASH CUT TO",
        "MATCH CUT TO",
        "JUMP CUT TO",
        "TIME CUT",
        "INTERCUT",
        "BACK TO",
        "FLASHBACK",
        "END FLASHBACK",
        "DREAM SEQUENCE",
        "END DREAM SEQUENCE",
        "MONTAGE",
        "END MONTAGE",
        "SERIES OF SHOTS",
        "END SERIES OF SHOTS",
        "CONTINUOUS",
        "LATER",
        "MOMENTS LATER",
        "SAME TIME",
        "SPLIT SCREEN",
        "END SPLIT SCREEN",
        "STOCK SHOT",
        "ANGLE ON",
        "CLOSE ON",
        "INSERT",
        "SUPER",
        "TITLE",
        "SUBTITLE",
        "V.O.",
        "O.S.",
        "O.C.",
        "CONT'D",
        "CONTD",
        "PRE-LAP",
    }
)


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------


def is_scene_heading(line: str) -> bool:
    """True for a conventional INT./EXT./EST./I/E heading."""
    return SCENE_HEADING_RE.match(line) is not None


def is_forced_scene_heading(line: str) -> bool:
    return FORCED_SCENE_HEADING_RE.match(line) is not None


def is_any_scene_heading(line: str) -> bool:
    return is_forced_scene_heading(line) or is_scene_heading(line)


def is_transition(line: str) -> bool:
    """True for an all-caps line ending in ``TO:`` (``CUT TO:``)."""
    return line.endswith("TO:") and is_all_caps(line)


def is_forced_transition(line: str) -> bool:
    return FORCED_TRANSITION_RE.match(line) is not None and not line.endswith("<")


def is_centered(line: str) -> bool:
    return CENTERED_RE.match(line) is not None


def is_parenthetical(line: str) -> bool:
    return PARENTHETICAL_RE.match(line) is not None


def is_page_break(line: str) -> bool:
    return PAGE_BREAK_RE.match(line) is not None


def is_forced_character(line: str) -> bool:
    return line.startswith(_FORCED_CHARACTER_PREFIX)


def is_all_caps(text: str) -> bool:
    """True when *text* has cased letters and every one of them is upper case.

    Punctuation, digits and whitespace are ignored. Letters from scripts
    without case (CJK, Arabic) never make a line upper case.
    """
    return text.isupper()


def strip_forced_character(line: str) -> str:
    if is_forced_character(line):
        return line[len(_FORCED_CHARACTER_PREFIX) :].strip()
    return line


def strip_extension(name: str) -> str:
    """Drop a trailing parenthetical extension such as ``(V.O.)``."""
    return _EXTENSION_RE.sub("", name).strip()


def looks_like_cue(line: str) -> bool:
    """Context-free part of the character cue test.

    Checks casing, name length and the stoplist, and rejects lines that are
    themselves headings or transitions.
    """
    if not line:
        return False

    clean = strip_forced_character(line)
    name = strip_extension(clean)

    if not is_all_caps(name):
        return False
    if not MIN_NAME_LENGTH <= len(name) <= MAX_NAME_LENGTH:
        return False
    if name in NOT_CHARACTERS:
        return False
    if is_scene_heading(clean) or is_transition(clean):
        return False
    return True


# ---------------------------------------------------------------------------
# Character names
# ---------------------------------------------------------------------------


def canonical_name(name: str) -> str:
    """Identity form of a character name: trimmed and upper-cased."""
    return name.strip().upper()


def extract_character_name(cue: str) -> str | None:
    """Return the clean character name of a cue line, or ``None``.

    ``^MOM (ON PHONE)`` -> ``MOM``, ``GUARD 2`` -> ``GUARD``.
    """
    name = strip_forced_character(cue.strip())
    name = strip_extension(name)
    name = canonical_name(_CUE_NUMBER_RE.sub("", name))
    if not name or name in NOT_CHARACTERS:
        return None
    return name


# ---------------------------------------------------------------------------
# Context-free rules
# ---------------------------------------------------------------------------


def classify_markup(line: str) -> tuple[ElementType, str] | None:
    """Apply the context-free rules to a trimmed, non-blank line.

    Returns ``(element type, display text)`` for forced and conventional
    scene headings, forced and conventional transitions and centered text,
    in that priority order. ``None`` means the line needs context.
    """
    if is_forced_scene_heading(line):
        return ElementType.SCENE_HEADING, line[1:].strip().upper()
    if is_scene_heading(line):
        return ElementType.SCENE_HEADING, line.upper()
    if is_forced_transition(line):
        return ElementType.TRANSITION, line[1:].strip().upper()
    if is_transition(line):
        return ElementType.TRANSITION, line.upper()
    if is_centered(line):
        return ElementType.CENTERED, line[1:-1].strip()
    return None
