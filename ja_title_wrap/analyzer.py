"""Morphological analyzer adapter: text in, tagged units out.

WHY: The break rules need the title split into words with a coarse part
of speech. Segmentation itself is delegated to a real analyzer (janome,
with its bundled IPADIC dictionary). Wrapping it behind a small interface
keeps the core independent of the tokenizer and lets tests inject a fake
that returns fixed units.

HOW: BaseSegmenter is an ABC with a single segment() method.
JanomeSegmenter implements it, mapping each janome token to a Unit via
map_part_of_speech(). The janome Tokenizer is expensive to build (it loads
the dictionary), so get_default_segmenter() builds one lazily and shares
it for the rest of the process.

RULES:
- map_part_of_speech() is the ONLY place that inspects IPADIC tags.
- 助詞 → PARTICLE, 記号 → SYMBOL, anything else → OTHER.
- Any failure loading the dictionary or tokenizing is raised as
  AnalyzerError with the original exception chained. Never return an
  empty list in place of an error.
- A failed dictionary load is not cached; the next call tries again.
- Whitespace is kept in the output (janome tags it 記号,空白); the
  normalizer collapses it.
"""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from typing import Optional

from janome.tokenizer import Tokenizer

from ja_title_wrap.config import USER_DICT_ENCODING, USER_DICT_PATH
from ja_title_wrap.errors import AnalyzerError
from ja_title_wrap.models import Category, Unit

logger = logging.getLogger(__name__)

_POS_CATEGORIES: dict[str, Category] = {
    "助詞": Category.PARTICLE,
    "記号": Category.SYMBOL,
}


def map_part_of_speech(pos: str) -> Category:
    """Map an IPADIC part-of-speech string to a Category.

    Only the major tag (the first comma-separated field) is considered,
    e.g. "助詞,格助詞,一般,*" → PARTICLE.
    """
    major = pos.split(",", 1)[0] if pos else ""
    return _POS_CATEGORIES.get(major, Category.OTHER)


class BaseSegmenter(ABC):
    """Abstract segmentation capability.

    To plug in another analyzer:
    1. Subclass BaseSegmenter
    2. Implement segment() returning Units in text order
    3. Raise AnalyzerError on failure
    4. Pass the instance to ja_title_wrap.analyze_title(segmenter=...)
    """

    @abstractmethod
    def segment(self, text: str) -> list[Unit]:
        """Split text into ordered units.

        Raises:
            AnalyzerError: If the analyzer cannot process the text.
        """


class JanomeSegmenter(BaseSegmenter):
    """Segmenter backed by janome and its bundled IPADIC dictionary.

    The janome Tokenizer is built on first use and then reused. Tokenizing
    does not mutate the dictionary, so one instance can serve several
    threads.
    """

    def __init__(
        self,
        user_dict: Optional[str] = None,
        user_dict_encoding: str = "utf8",
    ) -> None:
        self._user_dict = user_dict
        self._user_dict_encoding = user_dict_encoding
        self._tokenizer: Optional[Tokenizer] = None
        self._lock = threading.Lock()

    def _get_tokenizer(self) -> Tokenizer:
        with self._lock:
            if self._tokenizer is None:
                self._tokenizer = self._build_tokenizer()
            return self._tokenizer

    def _build_tokenizer(self) -> Tokenizer:
        try:
            if self._user_dict:
                logger.info("Loading janome tokenizer with user dictionary %s", self._user_dict)
                return Tokenizer(self._user_dict, udic_enc=self._user_dict_encoding)
            logger.info("Loading janome tokenizer")
            return Tokenizer()
        except Exception as exc:
            logger.error("Failed to load janome dictionary: %s", exc)
            raise AnalyzerError("Failed to load dictionary: {}".format(exc)) from exc

    def segment(self, text: str) -> list[Unit]:
        tokenizer = self._get_tokenizer()
        try:
            tokens = list(tokenizer.tokenize(text))
        except Exception as exc:
            raise AnalyzerError("Tokenization failed: {}".format(exc)) from exc
        return [
            Unit(token.surface, map_part_of_speech(token.part_of_speech))
            for token in tokens
        ]


_default_segmenter: Optional[JanomeSegmenter] = None
_default_lock = threading.Lock()


def get_default_segmenter() -> JanomeSegmenter:
    """Return the process-wide segmenter configured from the environment."""
    global _default_segmenter
    with _default_lock:
        if _default_segmenter is None:
            _default_segmenter = JanomeSegmenter(
                user_dict=USER_DICT_PATH,
                user_dict_encoding=USER_DICT_ENCODING,
            )
        return _default_segmenter
