"""Break-candidate analysis for Japanese titles.

WHY: A Japanese title wrapped by character count alone breaks in the
middle of words, leaves particles dangling at the start of a line, and
puts closing punctuation where kinsoku shori forbids it. Renderers need a
list of places where a break is legal and preferable, and then apply their
own width-aware choice among them.

HOW: analyze_title(text) segments the title with a morphological analyzer
(janome by default), normalizes the units, classifies every boundary, and
selects the break candidates. analyze_title_bytes() wraps the same pipeline
with UTF-8 decoding and JSON output.

RULES:
- analyze_title() and analyze_title_bytes() are the public entry points.
- The analyzer is injectable via the segmenter argument.
- No state is kept between calls apart from the shared, read-only
  analyzer dictionary and the constant tables.
"""

from ja_title_wrap.analyzer import BaseSegmenter, JanomeSegmenter, map_part_of_speech
from ja_title_wrap.codec import analysis_to_json, analyze_title_bytes
from ja_title_wrap.errors import (
    AnalyzerError,
    InputDecodingError,
    SerializationError,
    TitleWrapError,
)
from ja_title_wrap.models import Analysis, Category, Unit
from ja_title_wrap.pipeline import analyze_title, tokenize, tokenize_units
from ja_title_wrap.tables import NO_BREAK_AFTER, NO_BREAK_BEFORE, PARTICLES

__version__ = "0.1.0"

__all__ = [
    "analyze_title",
    "analyze_title_bytes",
    "analysis_to_json",
    "tokenize",
    "tokenize_units",
    "Analysis",
    "Category",
    "Unit",
    "BaseSegmenter",
    "JanomeSegmenter",
    "map_part_of_speech",
    "TitleWrapError",
    "InputDecodingError",
    "AnalyzerError",
    "SerializationError",
    "NO_BREAK_BEFORE",
    "NO_BREAK_AFTER",
    "PARTICLES",
]
