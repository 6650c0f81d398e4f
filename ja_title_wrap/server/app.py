"""FastAPI application exposing title analysis over HTTP.

WHY: Rendering services that are not written in Python (web front-ends,
document generators) need the break candidates without embedding the
analyzer. FastAPI gives request validation and OpenAPI docs for free.

HOW: A single FastAPI app with three endpoints: POST /analyze runs the
pipeline on one title, GET /tables returns the fixed lookup tables, and
GET /health is a liveness check. The janome segmenter is the shared
process-wide instance, so the dictionary is loaded once.

RULES:
- Analyzer failures return 503 with an ErrorResponse body
- Other library errors return 500; nothing partial is ever returned
- Empty or whitespace-only titles are valid and return empty tokens
- run_api() reads host/port from ja_title_wrap.config
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException

from ja_title_wrap import __version__
from ja_title_wrap.analyzer import get_default_segmenter
from ja_title_wrap.codec import analysis_to_dict
from ja_title_wrap.errors import AnalyzerError, TitleWrapError
from ja_title_wrap.pipeline import analyze_title
from ja_title_wrap.server.models import (
    AnalysisResponse,
    AnalyzeRequest,
    ErrorResponse,
    HealthResponse,
    TablesResponse,
)
from ja_title_wrap.tables import NO_BREAK_AFTER, NO_BREAK_BEFORE, PARTICLES

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Japanese Title Wrap API",
    description=(
        "Segments a Japanese title with a morphological analyzer and returns "
        "the positions where it may be broken into lines, following kinsoku "
        "shori and particle-attachment rules."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ---------------------------------------------------------------------------
# Endpoints: Analysis
# ---------------------------------------------------------------------------


@app.post(
    "/analyze",
    response_model=AnalysisResponse,
    tags=["analysis"],
    summary="Analyze a title",
    description=(
        "Segments the title and returns normalized tokens, break-candidate "
        "indices, and the kinsoku tables used to select them."
    ),
    responses={
        500: {"model": ErrorResponse, "description": "Analysis record could not be built"},
        503: {"model": ErrorResponse, "description": "Morphological analyzer unavailable"},
    },
)
def analyze(request: AnalyzeRequest) -> AnalysisResponse:
    try:
        analysis = analyze_title(request.title, get_default_segmenter())
        record = analysis_to_dict(analysis)
    except AnalyzerError as exc:
        logger.exception("Analyzer failed for title of %d chars", len(request.title))
        raise HTTPException(status_code=503, detail=str(exc))
    except TitleWrapError as exc:
        logger.exception("Analysis failed for title of %d chars", len(request.title))
        raise HTTPException(status_code=500, detail=str(exc))
    return AnalysisResponse(**record)


@app.get(
    "/tables",
    response_model=TablesResponse,
    tags=["analysis"],
    summary="List the kinsoku and particle tables",
)
def tables() -> TablesResponse:
    return TablesResponse(
        no_break_before=list(NO_BREAK_BEFORE),
        no_break_after=list(NO_BREAK_AFTER),
        particles=list(PARTICLES),
    )


# ---------------------------------------------------------------------------
# Endpoints: Health
# ---------------------------------------------------------------------------


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["health"],
    summary="Health check",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


def run_api():
    """Entry point for the ja-title-wrap-api console script."""
    import uvicorn

    from ja_title_wrap.config import API_HOST, LOG_LEVEL, load_port

    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(app, host=API_HOST, port=load_port())
