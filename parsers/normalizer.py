"""Line-ending and blank-line normalization for screenplay text.

The token stream produced by :mod:`parsers.fountain` has exactly one token per
line of normalized text, so every consumer that keeps a line-indexed view
must run its text through :func:`normalize` first.
"""

import re

_LINE_ENDING_RE = re.compile(r"\r\n?")
_TRAILING_WS_RE = re.compile(r"[^\S\n]+$", re.MULTILINE)
# Two or more blank lines (three or more newlines) become one blank line.
_BLANK_RUN_RE = re.compile(r"\n{3,}")


def normalize(text: str) -> str:
    """Return the canonical form of *text*.

    - CRLF and lone CR become LF
    - trailing whitespace is stripped from every line
    - runs of blank lines collapse to a single blank line
    - leading/trailing whitespace of the whole document is trimmed
    - the result ends with exactly one ``\\n``

    Idempotent, never fails. Empty or whitespace-only input yields ``"\\n"``.
    """
    normalized = _LINE_ENDING_RE.sub("\n", text)
    # Trailing whitespace goes first so whitespace-only lines count as blank.
    normalized = _TRAILING_WS_RE.sub("", normalized)
    normalized = _BLANK_RUN_RE.sub("\n\n", normalized)
    return normalized.strip() + "\n"


def split_lines(text: str) -> list[str]:
    """Split *text* into visual lines.

    A final line terminator ends the last line instead of opening a new one,
    so ``"A\\nB\\n"`` has two lines and ``"\\n"`` has one empty line.
    """
    lines = _LINE_ENDING_RE.sub("\n", text).split("\n")
    if len(lines) > 1 and lines[-1] == "":
        lines.pop()
    return lines


def line_count(text: str) -> int:
    """Number of visual lines in *text*."""
    return len(split_lines(text))
