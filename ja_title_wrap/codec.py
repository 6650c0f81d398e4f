"""Byte and JSON codec for analysis records.

WHY: Renderers embedding this library from another runtime pass the title
as a UTF-8 byte buffer and expect a JSON record back. Both directions can
fail independently of the break rules: the bytes may not decode, and the
record may not serialize. Those failures must surface as typed errors.

HOW: analyze_title_bytes() decodes, runs the pipeline, and encodes.
analysis_to_dict() validates the record against the bundled JSON schema
(schemas/analysis.schema.json) with jsonschema before it is handed out.

RULES:
- Input must be UTF-8; anything else raises InputDecodingError.
- Output is UTF-8 JSON with ensure_ascii=False (Japanese stays readable).
- Schema validation is mandatory; a record that fails it raises
  SerializationError, never a partial record.
- Transport framing and host-plugin plumbing are not handled here.
"""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any, Optional

import jsonschema

from ja_title_wrap.analyzer import BaseSegmenter
from ja_title_wrap.errors import InputDecodingError, SerializationError
from ja_title_wrap.models import Analysis
from ja_title_wrap.pipeline import analyze_title

_SCHEMA_PATH = Path(__file__).resolve().parent / "schemas" / "analysis.schema.json"


def _load_schema() -> dict[str, Any]:
    with open(_SCHEMA_PATH, encoding="utf-8") as f:
        return json.load(f)


_CACHED_SCHEMA: Optional[dict[str, Any]] = None


def get_schema() -> dict[str, Any]:
    """Return the analysis record schema, loading it on first use."""
    global _CACHED_SCHEMA
    if _CACHED_SCHEMA is None:
        _CACHED_SCHEMA = _load_schema()
    return _CACHED_SCHEMA


def decode_title(data: bytes) -> str:
    """Decode a UTF-8 title buffer.

    Raises:
        InputDecodingError: If data is not valid UTF-8.
    """
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InputDecodingError("Input is not valid UTF-8: {}".format(exc)) from exc


def analysis_to_dict(analysis: Analysis) -> dict[str, Any]:
    """Convert an Analysis to a plain dict and validate it.

    Raises:
        SerializationError: If the record does not match the schema.
    """
    record = asdict(analysis)
    try:
        jsonschema.validate(instance=record, schema=get_schema())
    except jsonschema.ValidationError as exc:
        raise SerializationError("Invalid analysis record: {}".format(exc.message)) from exc
    return record


def analysis_to_json(analysis: Analysis, indent: Optional[int] = None) -> str:
    """Render an Analysis as a JSON string.

    Raises:
        SerializationError: If validation or JSON encoding fails.
    """
    record = analysis_to_dict(analysis)
    try:
        return json.dumps(record, ensure_ascii=False, indent=indent)
    except (TypeError, ValueError) as exc:
        raise SerializationError("Could not encode analysis: {}".format(exc)) from exc


def analyze_title_bytes(data: bytes, segmenter: Optional[BaseSegmenter] = None) -> bytes:
    """Analyze a UTF-8 encoded title and return the JSON record as bytes.

    Args:
        data: The title, UTF-8 encoded.
        segmenter: Analyzer to use. Defaults to the shared janome segmenter.

    Returns:
        UTF-8 encoded JSON with keys tokens, break_after, no_break_before,
        no_break_after.

    Raises:
        InputDecodingError: If data is not valid UTF-8.
        AnalyzerError: If segmentation fails.
        SerializationError: If the record cannot be rendered.
    """
    text = decode_title(data)
    analysis = analyze_title(text, segmenter)
    return analysis_to_json(analysis).encode("utf-8")
