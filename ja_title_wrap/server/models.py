"""Pydantic request/response models for the HTTP API.

WHY: The FastAPI endpoints need typed schemas for request validation,
response serialization, and automatic OpenAPI documentation.

HOW: One request model (AnalyzeRequest) and one response model per
endpoint. Field names of AnalysisResponse match the JSON analysis record
produced by ja_title_wrap.codec, so HTTP and in-process callers see the
same shape.

RULES:
- All models use Field(description=...) for OpenAPI documentation
- Titles longer than MAX_TITLE_CHARS are rejected with 422; the break
  rules target title-length strings only
- ErrorResponse is used for every non-2xx body
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

MAX_TITLE_CHARS = 1000


class AnalyzeRequest(BaseModel):
    """Body of POST /analyze."""

    title: str = Field(
        max_length=MAX_TITLE_CHARS,
        description="Title text to analyze. Whitespace runs are collapsed.",
    )

    model_config = {"json_schema_extra": {
        "examples": [{"title": "長いタイトルを自然に改行する"}]
    }}


class AnalysisResponse(BaseModel):
    """Break-candidate analysis of one title.

    RULES:
    - break_after indices point into tokens
    - no_break_before / no_break_after are the kinsoku tables the
      candidates were selected with
    """

    tokens: List[str] = Field(description="Normalized display tokens in order.")
    break_after: List[int] = Field(
        description="Sorted indices i where a break between tokens[i] and tokens[i+1] is a candidate.",
    )
    no_break_before: List[str] = Field(description="Surfaces that must never start a line.")
    no_break_after: List[str] = Field(description="Surfaces that must never end a line.")

    model_config = {"json_schema_extra": {
        "examples": [
            {
                "tokens": ["自動", "改行", "を", "実装", "する"],
                "break_after": [2, 3],
                "no_break_before": ["、", "。"],
                "no_break_after": ["（", "「"],
            }
        ]
    }}


class TablesResponse(BaseModel):
    """The fixed lookup tables used by the break rules."""

    no_break_before: List[str] = Field(description="Surfaces that must never start a line.")
    no_break_after: List[str] = Field(description="Surfaces that must never end a line.")
    particles: List[str] = Field(
        description="Surfaces always treated as particles, regardless of analyzer tags.",
    )


class ErrorResponse(BaseModel):
    """Standard error response body."""

    detail: str = Field(description="Human-readable error description.")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service health status.", json_schema_extra={"example": "ok"})
    version: str = Field(description="API version string.", json_schema_extra={"example": "0.1.0"})
