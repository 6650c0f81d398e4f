"""Tests for the analyze_title() pipeline with an injected segmenter."""

import pytest

from ja_title_wrap import analyze_title, tokenize, tokenize_units
from ja_title_wrap.errors import AnalyzerError
from ja_title_wrap.models import Analysis, Category
from ja_title_wrap.tables import NO_BREAK_AFTER, NO_BREAK_BEFORE


class TestAnalyzeTitle:

    def test_returns_tokens_and_breaks(self, make_segmenter, auto_wrap_specs):
        analysis = analyze_title("自動改行を実装する", make_segmenter(auto_wrap_specs))
        assert isinstance(analysis, Analysis)
        assert analysis.tokens == ["自動", "改行", "を", "実装", "する"]
        assert analysis.break_after == [2, 3]

    def test_includes_kinsoku_tables(self, make_segmenter):
        analysis = analyze_title("短", make_segmenter([("短", "other")]))
        assert analysis.no_break_before == list(NO_BREAK_BEFORE)
        assert analysis.no_break_after == list(NO_BREAK_AFTER)
        assert "、" in analysis.no_break_before
        assert "（" in analysis.no_break_after

    def test_passes_text_to_segmenter(self, make_segmenter):
        segmenter = make_segmenter([("短", "other")])
        analyze_title("短いタイトル", segmenter)
        assert segmenter.calls == ["短いタイトル"]

    def test_whitespace_is_normalized_before_selection(self, make_segmenter):
        segmenter = make_segmenter([
            ("Typst", "other"),
            (" ", "symbol"),
            (" ", "symbol"),
            ("plugin", "other"),
            ("\n", "symbol"),
        ])
        analysis = analyze_title("Typst  plugin\n", segmenter)
        assert analysis.tokens == ["Typst", " ", "plugin"]
        assert analysis.break_after == []

    def test_empty_title(self, make_segmenter):
        analysis = analyze_title("", make_segmenter([]))
        assert analysis.tokens == []
        assert analysis.break_after == []

    def test_analyzer_failure_propagates(self, failing_segmenter):
        with pytest.raises(AnalyzerError, match="dictionary unavailable"):
            analyze_title("自動改行", failing_segmenter)

    def test_fallback_result(self, make_segmenter):
        segmenter = make_segmenter([
            ("A", "other"), ("B", "other"), ("を", "particle"), ("。", "symbol"),
        ])
        assert analyze_title("ABを。", segmenter).break_after == [0]


class TestTokenize:

    def test_tokenize_returns_surfaces(self, make_segmenter, auto_wrap_specs):
        assert tokenize("x", make_segmenter(auto_wrap_specs)) == ["自動", "改行", "を", "実装", "する"]

    def test_tokenize_units_keeps_categories(self, make_segmenter, auto_wrap_specs):
        units = tokenize_units("x", make_segmenter(auto_wrap_specs))
        assert units[2].category is Category.PARTICLE

    def test_uses_default_segmenter_when_none(self, monkeypatch, make_segmenter):
        fake = make_segmenter([("短", "other")])
        monkeypatch.setattr("ja_title_wrap.pipeline.get_default_segmenter", lambda: fake)
        assert tokenize("短") == ["短"]
        assert fake.calls == ["短"]
