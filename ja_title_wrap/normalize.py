"""Unit normalization: clean raw analyzer output into a canonical sequence.

WHY: The morphological analyzer can emit empty surfaces, multi-character
whitespace runs, and several whitespace units in a row. The boundary rules
assume a single canonical space unit between words and no space at either
edge of the title.

HOW: One pass over the raw units. Whitespace units become one space unit
(never two in a row), empty units are dropped, everything else passes
through unchanged. Leading and trailing space units are then trimmed.

RULES:
- Output never contains an empty surface.
- Every whitespace run collapses to exactly one Unit(" ", SYMBOL).
- No space unit at the first or last position.
- normalize_units(normalize_units(x)) == normalize_units(x).
"""

from __future__ import annotations

from collections.abc import Iterable

from ja_title_wrap.models import SPACE_UNIT, Unit, is_space_unit


def is_whitespace_surface(surface: str) -> bool:
    """True if surface is non-empty and made only of whitespace."""
    return surface.isspace()


def push_space_unit(units: list[Unit]) -> None:
    """Append the canonical space unit unless the last unit is already one."""
    if units and is_space_unit(units[-1]):
        return
    units.append(SPACE_UNIT)


def trim_edge_spaces(units: list[Unit]) -> list[Unit]:
    start = 0
    end = len(units)
    while start < end and is_space_unit(units[start]):
        start += 1
    while end > start and is_space_unit(units[end - 1]):
        end -= 1
    return units[start:end]


def normalize_units(units: Iterable[Unit]) -> list[Unit]:
    """Normalize a raw unit sequence from the analyzer.

    Args:
        units: Units in analyzer order. May contain empty surfaces and
               whitespace runs.

    Returns:
        A new list satisfying the normalized-sequence rules above.
    """
    normalized: list[Unit] = []
    for unit in units:
        if is_whitespace_surface(unit.surface):
            push_space_unit(normalized)
        elif unit.surface:
            normalized.append(unit)
    return trim_edge_spaces(normalized)
