"""Pydantic models for the screenplay core and its API request/response schemas."""

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ElementType(str, Enum):
    """Screenplay element assigned to exactly one line."""

    SCENE_HEADING = "scene-heading"
    ACTION = "action"
    CHARACTER = "character"
    DIALOGUE = "dialogue"
    PARENTHETICAL = "parenthetical"
    TRANSITION = "transition"
    CENTERED = "centered"


class LocationType(str, Enum):
    """Interior/exterior designation from scene headings."""

    INT = "INT"
    EXT = "EXT"
    INT_EXT = "INT/EXT"
    EST = "EST"
    UNKNOWN = "UNKNOWN"


# ---------------------------------------------------------------------------
# Token stream -- recomputed on every parse, never persisted
# ---------------------------------------------------------------------------


class Token(BaseModel):
    """One classified line of the normalized document."""

    model_config = ConfigDict(frozen=True)

    type: ElementType = Field(..., description="Element type of the line")
    text: str = Field(..., description="Normalized display text (markers stripped, cased)")
    raw: str = Field(..., description="Original line text")


class TitleMetadata(BaseModel):
    """Key/value block at the top of a Fountain document."""

    title: str | None = Field(None, description="Title field")
    author: str | None = Field(None, description="Author field")
    draft: str | None = Field(None, description="Draft field")
    date: str | None = Field(None, description="Date field")
    fields: dict[str, str] = Field(
        default_factory=dict, description="Every recognized key (lower-cased) and its value"
    )


class SceneMarker(BaseModel):
    """Position of a scene heading inside the token stream."""

    model_config = ConfigDict(frozen=True)

    number: int = Field(..., ge=1, description="1-based scene number")
    heading: str = Field(..., description="Scene heading text")
    start_token: int = Field(..., ge=0, description="Index of the heading token")


class ParsedDocument(BaseModel):
    """Result of tokenizing a screenplay."""

    metadata: TitleMetadata | None = Field(None, description="Title metadata, if present")
    tokens: list[Token] = Field(default_factory=list, description="One token per body line")
    characters: list[str] = Field(
        default_factory=list,
        description="Distinct upper-case character names in order of first appearance",
    )
    scenes: list[SceneMarker] = Field(default_factory=list, description="Scene heading markers")
    body_start_line: int = Field(
        default=0, ge=0, description="Normalized line index where the token stream starts"
    )

    @property
    def title(self) -> str | None:
        return self.metadata.title if self.metadata else None

    @property
    def author(self) -> str | None:
        return self.metadata.author if self.metadata else None


class IndexedScene(BaseModel):
    """A scene located by line span inside the token stream."""

    id: str = Field(..., description="Positional id: scene-<number>-<start line>")
    number: int = Field(..., ge=1, description="1-based sequential scene number")
    heading: str = Field(..., description="Scene heading text")
    location: str = Field(default="", description="Location part of the heading")
    time_of_day: str = Field(default="", description="Time-of-day part of the heading")
    location_type: LocationType = Field(
        default=LocationType.UNKNOWN, description="INT/EXT designation"
    )
    start_line_index: int = Field(..., ge=0, description="First line of the scene")
    end_line_index: int = Field(..., ge=0, description="Last line of the scene (inclusive)")
    characters: list[str] = Field(
        default_factory=list, description="Character names in order of first cue"
    )
    content: str = Field(default="", description="Token text of the span joined by newlines")
    summary: str = Field(default="", description="Caller-populated summary")

    @property
    def line_count(self) -> int:
        return self.end_line_index - self.start_line_index + 1


class StoreScene(BaseModel):
    """Persistence-facing projection of an ``IndexedScene``."""

    id: str
    number: int
    heading: str
    location: str
    time_of_day: str
    summary: str
    characters: list[str] = Field(default_factory=list, description="Character names")
    start_line: int
    end_line: int
    content: str


# Request Models


class DocumentRequest(BaseModel):
    """Request carrying a whole screenplay document."""

    text: str = Field(..., description="Screenplay text (any line ending convention)")


class ClassifyLineRequest(BaseModel):
    """Request for live single-line classification."""

    text: str = Field(..., description="Current line text")
    previous_type: ElementType | None = Field(
        None, description="Element type of the previous line, if any"
    )


class NextElementRequest(BaseModel):
    """Request for the element that follows ``current_type``."""

    current_type: ElementType = Field(..., description="Element type of the current line")


class CycleElementRequest(BaseModel):
    """Request for the next element type in the manual override cycle."""

    current_type: ElementType = Field(..., description="Element type of the current line")
    order: list[ElementType] | None = Field(
        None, description="Custom cycle order; the default order is used when omitted"
    )


# Response Models


class NormalizeResponse(BaseModel):
    """Normalized document plus its visual line count."""

    text: str = Field(..., description="Normalized text")
    line_count: int = Field(..., description="Number of visual lines")


class SceneListResponse(BaseModel):
    """Indexed scenes of a document."""

    total_scenes: int = Field(..., description="Number of scenes")
    scenes: list[IndexedScene] = Field(default_factory=list, description="Indexed scenes")


class SceneCountResponse(BaseModel):
    """Scene count of a document."""

    total_scenes: int = Field(..., description="Number of scenes")


class ElementTypeResponse(BaseModel):
    """A single element type."""

    type: ElementType = Field(..., description="Element type")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(default="healthy", description="Service health status")
    timestamp: datetime = Field(default_factory=_utcnow, description="Response timestamp")
    version: str = Field(default="0.1.0", description="API version")


# Error Response Models


class ErrorDetail(BaseModel):
    """Detailed error information."""

    field: str | None = Field(None, description="Field that caused the error")
    message: str = Field(..., description="Error message")
    error_code: str | None = Field(None, description="Error code for programmatic handling")


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Human-readable error message")
    details: list[ErrorDetail] = Field(default_factory=list, description="Detailed error info")
    request_id: str | None = Field(None, description="Request tracking ID")
    timestamp: datetime = Field(default_factory=_utcnow, description="Error timestamp")
