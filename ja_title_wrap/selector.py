"""Break-candidate selection over a normalized unit sequence.

WHY: A renderer fitting a title into a fixed width needs a short list of
good places to break, not every legal boundary. When a title has no good
place at all, it still needs one legal break near the middle so that a
two-line layout stays balanced.

HOW: collect_break_candidates() walks each adjacent pair, skips illegal
boundaries, and keeps strong ones plus every odd-indexed legal one. If
nothing was kept, find_fallback_break() searches outward from the centre
for the nearest legal boundary.

RULES:
- Sequences of 0 or 1 units have no boundaries and yield [].
- The odd-index rule is a density control kept for output compatibility:
  in a run of equally weak boundaries it still exposes about one candidate
  every two boundaries. Do not replace it with a "smarter" rule.
- The fallback runs only when the primary pass keeps nothing, and returns
  at most one index.
- Fallback ties are resolved by ascending index (stable sort by distance).
- "No legal break anywhere" is a valid empty result, not an error.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

from ja_title_wrap.boundaries import can_break_between, is_boundary_strong
from ja_title_wrap.models import Unit


def collect_break_candidates(units: Sequence[Unit]) -> list[int]:
    """Select break-candidate indices for a normalized unit sequence.

    Args:
        units: Normalized units (see ja_title_wrap.normalize).

    Returns:
        Sorted, duplicate-free indices i meaning "a break between units[i]
        and units[i + 1] is a candidate".
    """
    if len(units) <= 1:
        return []

    break_after: list[int] = []
    for i in range(len(units) - 1):
        left = units[i]
        right = units[i + 1]
        if not can_break_between(left, right):
            continue
        if is_boundary_strong(left, right) or i % 2 == 1:
            break_after.append(i)

    if not break_after:
        fallback = find_fallback_break(units)
        if fallback is not None:
            break_after.append(fallback)

    return sorted(set(break_after))


def find_fallback_break(units: Sequence[Unit]) -> Optional[int]:
    """Return the legal boundary nearest the centre of the sequence.

    The centre is (len(units) - 1) // 2 over the len(units) - 1 boundary
    indices. Boundaries are tried in order of distance from the centre,
    lower index first on ties. Returns None if no boundary is legal.
    """
    if len(units) <= 1:
        return None

    boundary_count = len(units) - 1
    center = boundary_count // 2
    candidates = sorted(range(boundary_count), key=lambda i: abs(i - center))
    for i in candidates:
        if can_break_between(units[i], units[i + 1]):
            return i
    return None
