"""Screenplay parsing endpoints.

Thin wrappers around the pure parsing core: every request carries the whole
document (or line) and every response is recomputed from it.
"""

import logging

from fastapi import APIRouter, status

from api.config import get_settings
from core.exceptions import DocumentTooLargeException
from core.models import (
    ClassifyLineRequest,
    CycleElementRequest,
    DocumentRequest,
    ElementTypeResponse,
    NextElementRequest,
    NormalizeResponse,
    ParsedDocument,
    SceneCountResponse,
    SceneListResponse,
)
from parsers.fountain import parse
from parsers.live_classifier import DEFAULT_CYCLE, classify_line, cycle_element_type, next_element_type
from parsers.normalizer import line_count, normalize
from services.scene_indexer import count_scenes, index_scenes

logger = logging.getLogger(__name__)

router = APIRouter()


def _check_size(text: str) -> None:
    limit = get_settings().max_document_chars
    if len(text) > limit:
        raise DocumentTooLargeException(
            f"Document exceeds {limit} character limit",
            details={"length": len(text), "limit": limit},
        )


@router.post(
    "/normalize",
    response_model=NormalizeResponse,
    status_code=status.HTTP_200_OK,
    summary="Normalize screenplay text",
)
async def normalize_document(request: DocumentRequest) -> NormalizeResponse:
    """Canonical line endings and blank-line runs, plus the visual line count."""
    _check_size(request.text)
    normalized = normalize(request.text)
    return NormalizeResponse(text=normalized, line_count=line_count(normalized))


@router.post(
    "/parse",
    response_model=ParsedDocument,
    status_code=status.HTTP_200_OK,
    summary="Tokenize screenplay text",
    description="Normalizes the text and returns one token per normalized line.",
)
async def parse_document(request: DocumentRequest) -> ParsedDocument:
    _check_size(request.text)
    document = parse(normalize(request.text))
    logger.info(
        "Parsed document: %d tokens, %d scenes, %d characters",
        len(document.tokens),
        len(document.scenes),
        len(document.characters),
    )
    return document


@router.post(
    "/scenes",
    response_model=SceneListResponse,
    status_code=status.HTTP_200_OK,
    summary="Index scenes",
)
async def list_scenes(request: DocumentRequest) -> SceneListResponse:
    _check_size(request.text)
    scenes = index_scenes(request.text)
    logger.info("Indexed %d scenes", len(scenes))
    return SceneListResponse(total_scenes=len(scenes), scenes=scenes)


@router.post(
    "/scenes/count",
    response_model=SceneCountResponse,
    status_code=status.HTTP_200_OK,
    summary="Count scenes",
)
async def scene_count(request: DocumentRequest) -> SceneCountResponse:
    _check_size(request.text)
    return SceneCountResponse(total_scenes=count_scenes(request.text))


@router.post(
    "/classify-line",
    response_model=ElementTypeResponse,
    status_code=status.HTTP_200_OK,
    summary="Classify a single line while typing",
)
async def classify(request: ClassifyLineRequest) -> ElementTypeResponse:
    return ElementTypeResponse(type=classify_line(request.text, request.previous_type))


@router.post(
    "/next-element",
    response_model=ElementTypeResponse,
    status_code=status.HTTP_200_OK,
    summary="Element type after advancing past the current line",
)
async def next_element(request: NextElementRequest) -> ElementTypeResponse:
    return ElementTypeResponse(type=next_element_type(request.current_type))


@router.post(
    "/cycle-element",
    response_model=ElementTypeResponse,
    status_code=status.HTTP_200_OK,
    summary="Next element type in the manual override cycle",
)
async def cycle_element(request: CycleElementRequest) -> ElementTypeResponse:
    order = request.order if request.order is not None else DEFAULT_CYCLE
    return ElementTypeResponse(type=cycle_element_type(request.current_type, order))
