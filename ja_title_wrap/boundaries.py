"""Boundary classification between adjacent units.

WHY: Japanese titles cannot be broken anywhere. Kinsoku shori forbids
closing punctuation at the start of a line and opening brackets at the end
of one, and a particle must stay on the same line as the word it follows.
Among the legal boundaries, some are better places to break than others.

HOW: Three pure predicates over a (left, right) pair of units:
  1. is_particle(): category check backed by a literal particle list.
  2. can_break_between(): legality under the whitespace, particle, and
     kinsoku rules.
  3. is_boundary_strong(): ranking of a legal boundary.

RULES:
- can_break_between() tests particle-ness of the RIGHT unit only;
  is_boundary_strong() tests particle-ness of the LEFT unit only. Particles
  attach to what precedes them, so both directions are intentional.
- Never break next to the space unit; the space is itself the visual gap.
- is_boundary_strong() never overrides can_break_between().
- Length of the right unit is counted in code points, not grapheme clusters.
"""

from __future__ import annotations

from ja_title_wrap.models import Category, Unit, is_space_unit
from ja_title_wrap.tables import NO_BREAK_AFTER_SET, NO_BREAK_BEFORE_SET, PARTICLE_SET

# A right-hand word at least this long is a strong cue to break before it.
LONG_WORD_CHARS = 3


def is_particle(unit: Unit) -> bool:
    """True if the unit is tagged as a particle or is a known particle literal."""
    return unit.category is Category.PARTICLE or unit.surface in PARTICLE_SET


def can_break_between(left: Unit, right: Unit) -> bool:
    """True if a line break between left and right is legal."""
    if is_space_unit(left) or is_space_unit(right):
        return False
    if is_particle(right):
        return False
    if left.surface in NO_BREAK_AFTER_SET or right.surface in NO_BREAK_BEFORE_SET:
        return False
    return True


def is_boundary_strong(left: Unit, right: Unit) -> bool:
    """True if the boundary is a preferred break point.

    A boundary is strong right after a particle or a symbol, right after
    closing punctuation (which may end a line even though it may never
    start one), or right before a long word.
    """
    return (
        is_particle(left)
        or left.category is Category.SYMBOL
        or left.surface in NO_BREAK_BEFORE_SET
        or len(right.surface) >= LONG_WORD_CHARS
    )
