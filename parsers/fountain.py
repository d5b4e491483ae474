"""Fountain plain-text screenplay tokenizer.

Splits a document into an optional title block and a body, then classifies
every body line into exactly one :class:`~core.models.ElementType`:

    Title: Brick & Steel        -> title metadata
    INT. KITCHEN - DAY          -> scene-heading
                                -> action (blank separator)
    BOB                         -> character
    Hello.                      -> dialogue

A run of blank lines yields a single empty action token, so the token list of
normalized text lines up one-to-one with its lines.
"""

import logging
import re

from core.models import ElementType, ParsedDocument, SceneMarker, TitleMetadata, Token
from parsers import rules
from parsers.normalizer import split_lines

logger = logging.getLogger(__name__)

_TITLE_KEY_RE = re.compile(
    r"^(Title|Credit|Author|Source|Draft|Date|Contact|Copyright|Notes|Revision):\s*(.*)$",
    re.IGNORECASE,
)

# Previous element types after which a cue may start a dialogue block.
_CUE_CONTEXT: frozenset[ElementType | None] = frozenset(
    {None, ElementType.SCENE_HEADING, ElementType.TRANSITION}
)
_DIALOGUE_CONTEXT = frozenset({ElementType.CHARACTER, ElementType.PARENTHETICAL})
_PARENTHETICAL_CONTEXT = frozenset({ElementType.CHARACTER, ElementType.DIALOGUE})


def parse(text: str) -> ParsedDocument:
    """Tokenize *text* into a ``ParsedDocument``.

    Pure and deterministic. Callers that need token indices to match their
    own line view must pass text through ``parsers.normalizer.normalize``
    first.
    """
    lines = split_lines(text)
    metadata, body_start = _parse_title_page(lines)
    tokens, characters, scenes = _tokenize(lines[body_start:])

    logger.debug(
        "Parsed %d tokens, %d scenes, %d characters (body starts at line %d)",
        len(tokens),
        len(scenes),
        len(characters),
        body_start,
    )

    return ParsedDocument(
        metadata=metadata,
        tokens=tokens,
        characters=characters,
        scenes=scenes,
        body_start_line=body_start,
    )


def detect_element(
    line: str,
    raw: str,
    previous_type: ElementType | None,
    next_line: str,
) -> Token:
    """Classify one trimmed, non-blank line.

    *previous_type* is the type of the line directly above (``None`` at the
    start of the body or after a blank line); *next_line* is the trimmed
    following line, ``""`` when there is none.
    """
    markup = rules.classify_markup(line)
    if markup is not None:
        element_type, display = markup
        return Token(type=element_type, text=display, raw=raw)

    if rules.is_parenthetical(line) and previous_type in _PARENTHETICAL_CONTEXT:
        return Token(type=ElementType.PARENTHETICAL, text=line, raw=raw)

    if is_character_cue(line, previous_type, next_line):
        return Token(
            type=ElementType.CHARACTER, text=rules.strip_forced_character(line), raw=raw
        )

    if previous_type in _DIALOGUE_CONTEXT:
        return Token(type=ElementType.DIALOGUE, text=line, raw=raw)

    return Token(type=ElementType.ACTION, text=line, raw=raw)


def is_character_cue(line: str, previous_type: ElementType | None, next_line: str) -> bool:
    """Character cue test with full context.

    A ``^`` forced cue only has to look like a cue. Otherwise the cue must
    open a block (start of body, after a blank line, heading or transition)
    and be followed by a non-blank line that is not a scene heading.
    """
    if not rules.looks_like_cue(line):
        return False
    if rules.is_forced_character(line):
        return True
    if previous_type not in _CUE_CONTEXT:
        return False
    return bool(next_line) and not rules.is_any_scene_heading(next_line)


def tokens_to_text(tokens: list[Token]) -> str:
    """Join token display text back into a document, one line per token."""
    return "\n".join(token.text for token in tokens)


def extract_characters(text: str) -> list[str]:
    """Sorted distinct character names of *text*."""
    return sorted(parse(text).characters)


def extract_scenes(text: str) -> list[tuple[int, str]]:
    """``(number, heading)`` for every scene heading in *text*."""
    return [(scene.number, scene.heading) for scene in parse(text).scenes]


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _parse_title_page(lines: list[str]) -> tuple[TitleMetadata | None, int]:
    """Read the leading ``Key: value`` block.

    Returns the metadata (``None`` without any recognized key) and the index
    of the first body line. The block ends at a blank-line run (consumed), a
    ``===`` page break (consumed) or the first other line (kept in the body).
    An indented line directly after a key continues that key's value.
    """
    fields: dict[str, str] = {}
    last_key: str | None = None
    body_start = 0

    for i, raw in enumerate(lines):
        line = raw.strip()
        match = _TITLE_KEY_RE.match(line)
        if match:
            last_key = match.group(1).lower()
            fields[last_key] = match.group(2).strip()
            body_start = i + 1
            continue

        if not fields:
            if line:
                break
            continue

        if line and last_key is not None and raw[:1] in (" ", "\t"):
            value = fields[last_key]
            fields[last_key] = f"{value}\n{line}" if value else line
            body_start = i + 1
            continue

        if rules.is_page_break(line):
            body_start = i + 1
        elif not line:
            body_start = i
            while body_start < len(lines) and not lines[body_start].strip():
                body_start += 1
        else:
            body_start = i
        break

    if not fields:
        return None, 0

    metadata = TitleMetadata(
        title=fields.get("title"),
        author=fields.get("author"),
        draft=fields.get("draft"),
        date=fields.get("date"),
        fields=fields,
    )
    return metadata, body_start


def _tokenize(lines: list[str]) -> tuple[list[Token], list[str], list[SceneMarker]]:
    tokens: list[Token] = []
    characters: dict[str, None] = {}
    scenes: list[SceneMarker] = []
    previous_type: ElementType | None = None
    in_blank_run = False

    for i, raw in enumerate(lines):
        line = raw.strip()

        if not line:
            # One token per run of blank lines; a cue never spans a blank.
            if not in_blank_run:
                tokens.append(Token(type=ElementType.ACTION, text="", raw=raw))
            in_blank_run = True
            previous_type = None
            continue
        in_blank_run = False

        next_line = lines[i + 1].strip() if i + 1 < len(lines) else ""
        token = detect_element(line, raw, previous_type, next_line)

        if token.type == ElementType.CHARACTER:
            name = rules.extract_character_name(token.text)
            if name:
                characters.setdefault(name, None)
        elif token.type == ElementType.SCENE_HEADING:
            scenes.append(
                SceneMarker(number=len(scenes) + 1, heading=token.text, start_token=len(tokens))
            )

        tokens.append(token)
        previous_type = token.type

    return tokens, list(characters), scenes
