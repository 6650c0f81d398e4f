"""Kinsoku and particle lookup tables.

WHY: The boundary rules need three fixed lists: punctuation that must not
start a line, brackets that must not end one, and particles that must stay
attached to the word before them. Downstream renderers receive the two
punctuation tables too, so they can apply the same constraints when they
make the final width-aware wrapping decision.

HOW: Each table is an ordered tuple (the order is the one published in the
analysis record) plus a frozenset view used for membership tests.

RULES:
- Tables are constants; never mutate them at runtime.
- PARTICLES backstops the analyzer's part-of-speech tagging; multi-character
  forms like "から" or "って" are not always tagged as particles.
- Only title-length strings are targeted; this is not a full kinsoku set.
"""

from typing import FrozenSet, Tuple

# Closing brackets and mid/end punctuation.
NO_BREAK_BEFORE: Tuple[str, ...] = (
    "、", "。", "）", "」", "』", "】", "》", "〉", "，", "．",
    "!", "?", "！", "？", "：", "；",
)

# Opening brackets.
NO_BREAK_AFTER: Tuple[str, ...] = ("（", "「", "『", "【", "《", "〈")

PARTICLES: Tuple[str, ...] = (
    "は", "が", "を", "に", "へ", "で", "と", "や", "の", "も",
    "から", "まで", "より", "か", "ね", "よ", "って", "など",
)

NO_BREAK_BEFORE_SET: FrozenSet[str] = frozenset(NO_BREAK_BEFORE)
NO_BREAK_AFTER_SET: FrozenSet[str] = frozenset(NO_BREAK_AFTER)
PARTICLE_SET: FrozenSet[str] = frozenset(PARTICLES)
