"""Shared test fixtures for the ja_title_wrap test suite.

WHY: Most tests exercise the break rules on fixed unit sequences and must
not depend on the janome dictionary. A fake segmenter that returns
predetermined units lets pipeline, codec, CLI and API tests run against
exact inputs.

HOW: The make_segmenter fixture builds a BaseSegmenter returning the given
(surface, category) pairs. failing_segmenter always raises AnalyzerError.
The make_units fixture turns (surface, category) pairs into Units.

RULES:
- Categories are given as Category members or the strings
  "particle" / "symbol" / "other".
- Tests that need the real dictionary live in test_analyzer.py.
"""

from typing import List, Sequence, Tuple, Union

import pytest

from ja_title_wrap.analyzer import BaseSegmenter
from ja_title_wrap.errors import AnalyzerError
from ja_title_wrap.models import Category, Unit

UnitSpec = Tuple[str, Union[str, Category]]


def build_units(specs: Sequence[UnitSpec]) -> List[Unit]:
    return [Unit(surface, Category(category)) for surface, category in specs]


class FakeSegmenter(BaseSegmenter):
    """Returns the same units for any text and records what it was asked."""

    def __init__(self, units: List[Unit]) -> None:
        self.units = units
        self.calls = []  # type: List[str]

    def segment(self, text: str) -> List[Unit]:
        self.calls.append(text)
        return list(self.units)


class FailingSegmenter(BaseSegmenter):
    def segment(self, text: str) -> List[Unit]:
        raise AnalyzerError("dictionary unavailable")


@pytest.fixture
def make_units():
    """Factory: make_units([("自動", "other"), ("を", "particle")])."""
    return build_units


@pytest.fixture
def make_segmenter():
    """Factory for a FakeSegmenter over the given unit specs."""
    def _make(specs: Sequence[UnitSpec]) -> FakeSegmenter:
        return FakeSegmenter(build_units(specs))
    return _make


@pytest.fixture
def failing_segmenter():
    return FailingSegmenter()


@pytest.fixture
def auto_wrap_specs():
    """自動|改行|を|実装|する: never break right before を."""
    return [
        ("自動", "other"),
        ("改行", "other"),
        ("を", "particle"),
        ("実装", "other"),
        ("する", "other"),
    ]
