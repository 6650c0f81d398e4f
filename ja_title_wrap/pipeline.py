"""Title analysis pipeline: segment, normalize, select breaks.

WHY: Callers want one function that takes a title string and returns
everything a renderer needs (display tokens, break candidates and the
kinsoku tables) without knowing about the individual stages.

HOW: segment (analyzer) → normalize_units() → collect_break_candidates().
The punctuation tables are copied into the result so the renderer can
enforce the same no-break constraints in its own width-aware pass.

RULES:
- All-or-nothing: an AnalyzerError propagates, no partial Analysis.
- The segmenter is injectable; None means the process-wide janome one.
- Break indices refer to positions in Analysis.tokens.
"""

from __future__ import annotations

from typing import Optional

from ja_title_wrap.analyzer import BaseSegmenter, get_default_segmenter
from ja_title_wrap.models import Analysis, Unit
from ja_title_wrap.normalize import normalize_units
from ja_title_wrap.selector import collect_break_candidates
from ja_title_wrap.tables import NO_BREAK_AFTER, NO_BREAK_BEFORE


def tokenize_units(text: str, segmenter: Optional[BaseSegmenter] = None) -> list[Unit]:
    """Segment text and return the normalized unit sequence.

    Raises:
        AnalyzerError: If the segmenter fails.
    """
    if segmenter is None:
        segmenter = get_default_segmenter()
    return normalize_units(segmenter.segment(text))


def tokenize(text: str, segmenter: Optional[BaseSegmenter] = None) -> list[str]:
    """Return the normalized display tokens of text."""
    return [unit.surface for unit in tokenize_units(text, segmenter)]


def analyze_title(text: str, segmenter: Optional[BaseSegmenter] = None) -> Analysis:
    """Analyze a title and return its tokens and break candidates.

    Args:
        text: The title to analyze.
        segmenter: Analyzer to use. Defaults to the shared janome segmenter.

    Returns:
        Analysis with tokens, break_after, and both kinsoku tables.

    Raises:
        AnalyzerError: If segmentation fails.
    """
    units = tokenize_units(text, segmenter)
    return Analysis(
        tokens=[unit.surface for unit in units],
        break_after=collect_break_candidates(units),
        no_break_before=list(NO_BREAK_BEFORE),
        no_break_after=list(NO_BREAK_AFTER),
    )
