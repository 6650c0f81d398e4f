"""Data models for the title line-break analyzer.

WHY: Every stage of the pipeline (normalizer, boundary classifier, break
selector) works on the same small unit type. Keeping it in one module
makes the contract between the analyzer adapter and the core explicit.

HOW: Unit is a frozen dataclass holding a surface string and a Category.
Category is the closed set of grammatical roles the core cares about.
Analysis is the result record handed to callers and serializers.

RULES:
- Unit is immutable. The normalizer filters and replaces units, never
  edits a surface in place.
- Category has exactly three members: PARTICLE, SYMBOL, OTHER.
- The analyzer's richer tag set is mapped to Category in one place
  (ja_title_wrap.analyzer.map_part_of_speech).
- Analysis field names match the JSON keys of the serialized record.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Category(str, Enum):
    """Grammatical role of a unit, reduced to what the break rules need."""

    PARTICLE = "particle"
    SYMBOL = "symbol"
    OTHER = "other"


@dataclass(frozen=True)
class Unit:
    """One segmented piece of a title.

    Attributes:
        surface: The text of the unit as it appears in the title.
        category: The unit's grammatical role.
    """

    surface: str
    category: Category = Category.OTHER


SPACE_SURFACE = " "

SPACE_UNIT = Unit(SPACE_SURFACE, Category.SYMBOL)
"""The canonical unit every whitespace run collapses into."""


def is_space_unit(unit: Unit) -> bool:
    return unit.surface == SPACE_SURFACE


@dataclass
class Analysis:
    """Break-candidate analysis for a single title.

    Attributes:
        tokens: Normalized surface strings, in display order.
        break_after: Sorted indices i where a break between tokens[i] and
                     tokens[i + 1] is a candidate.
        no_break_before: Surfaces that must never start a line.
        no_break_after: Surfaces that must never end a line.
    """

    tokens: list[str] = field(default_factory=list)
    break_after: list[int] = field(default_factory=list)
    no_break_before: list[str] = field(default_factory=list)
    no_break_after: list[str] = field(default_factory=list)
