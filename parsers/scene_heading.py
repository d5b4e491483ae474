"""Scene heading (slug line) parser.

Parses strings like:
    INT. KITCHEN - DAY           -> (INT, "KITCHEN", "DAY")
    EXT. FOREST - NIGHT          -> (EXT, "FOREST", "NIGHT")
    INT./EXT. CAR - CONTINUOUS   -> (INT/EXT, "CAR", "CONTINUOUS")
    FLASHBACK                    -> (UNKNOWN, "FLASHBACK", "")
"""

import re
from dataclasses import dataclass

from core.models import LocationType

# Longer prefixes first so INT./EXT. is not read as INT.
_PREFIX_RE = re.compile(r"^(INT\./EXT|INT/EXT|I/E|INT|EXT|EST)[.\s]+", re.IGNORECASE)

_PREFIX_TYPES: dict[str, LocationType] = {
    "INT./EXT": LocationType.INT_EXT,
    "INT/EXT": LocationType.INT_EXT,
    "I/E": LocationType.INT_EXT,
    "INT": LocationType.INT,
    "EXT": LocationType.EXT,
    "EST": LocationType.EST,
}

# Separator between location and time-of-day (dash variants)
_SEP_RE = re.compile(r"\s*[-–—]\s*")


@dataclass(frozen=True, slots=True)
class HeadingComponents:
    """Parsed components of a scene heading."""

    location_type: LocationType
    location: str
    time_of_day: str


def parse_scene_heading(heading: str) -> HeadingComponents:
    """Parse a scene heading string into its constituent parts.

    The INT/EXT/EST/I/E prefix is removed and the remainder is split on its
    first dash-like separator. Both parts are trimmed and either may be empty.
    """
    text = heading.strip()

    loc_type = LocationType.UNKNOWN
    match = _PREFIX_RE.match(text)
    if match:
        loc_type = _PREFIX_TYPES[match.group(1).upper()]
        text = text[match.end() :]

    parts = _SEP_RE.split(text, maxsplit=1)
    location = parts[0].strip()
    time_of_day = parts[1].strip() if len(parts) > 1 else ""

    return HeadingComponents(location_type=loc_type, location=location, time_of_day=time_of_day)
