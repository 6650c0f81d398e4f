"""Tests for environment-driven configuration."""

import pytest

from ja_title_wrap.config import DEFAULT_API_PORT, load_port


class TestLoadPort:

    def test_default(self, monkeypatch):
        monkeypatch.delenv("JA_TITLE_WRAP_PORT", raising=False)
        assert load_port() == DEFAULT_API_PORT

    def test_blank_means_default(self, monkeypatch):
        monkeypatch.setenv("JA_TITLE_WRAP_PORT", "  ")
        assert load_port() == DEFAULT_API_PORT

    def test_custom(self, monkeypatch):
        monkeypatch.setenv("JA_TITLE_WRAP_PORT", "9001")
        assert load_port() == 9001

    def test_not_an_integer(self, monkeypatch):
        monkeypatch.setenv("JA_TITLE_WRAP_PORT", "http")
        with pytest.raises(ValueError, match="must be an integer"):
            load_port()

    def test_out_of_range(self, monkeypatch):
        monkeypatch.setenv("JA_TITLE_WRAP_PORT", "70000")
        with pytest.raises(ValueError, match="between 1 and 65535"):
            load_port()
