"""
Dictionary-based stemmers using Hunspell.

Hunspell returns the dictionary entries a word can be derived from. When a
word has several candidates the last one is used; a word the dictionary
doesn't know has no stem.

The dictionary object only needs a `stem(word)` method returning a sequence
of stems (cyhunspell's `Hunspell` API). By default it is loaded lazily from
PTSTEM_HUNSPELL_LANGUAGE / PTSTEM_HUNSPELL_DIR on first use.

Two variants:
- HunspellStemmer: dictionary only (out-of-vocabulary words -> None)
- ModifiedHunspellStemmer: out-of-vocabulary words fall back to RSLP
"""

import logging
from typing import Any, Optional

from ..config import get_settings
from .base import Algorithm, BaseStemmer
from .rslp import RSLPStemmer

logger = logging.getLogger(__name__)


class HunspellStemmer(BaseStemmer):
    """
    Dictionary-based Portuguese stemmer.

    Stems are dictionary entries, so with complete=False the output is
    already made of real words ("gostou" -> "gostar"). Those are the
    dictionary's lemmas, though, not the most frequent corpus word per stem;
    complete=True swaps each lemma for that word ("gostar" -> "gosto" when
    "gosto" is the most frequent inflection in the input).
    """

    algorithm = Algorithm.HUNSPELL

    def __init__(
        self,
        dictionary: Any = None,
        language: Optional[str] = None,
        data_dir: Optional[str] = None,
    ):
        """
        Initialize dictionary stemmer (dictionary loads on first use).

        Args:
            dictionary: Ready dictionary object exposing stem(word)
            language: Dictionary name, e.g. 'pt_BR' (default from settings)
            data_dir: Directory with <language>.dic and .aff (default from settings)
        """
        self.dictionary = dictionary
        self.language = language
        self.data_dir = data_dir

    def _ensure_loaded(self):
        """Lazy load dictionary on first use"""
        if self.dictionary is not None:
            return
        if self.language is None or self.data_dir is None:
            settings = get_settings()
            self.language = self.language or settings.hunspell_language
            self.data_dir = self.data_dir or settings.hunspell_dir

        logger.info(f"Loading hunspell dictionary: {self.language} (dir={self.data_dir or 'default'})")
        try:
            from hunspell import Hunspell
            if self.data_dir:
                self.dictionary = Hunspell(self.language, hunspell_data_dir=self.data_dir)
            else:
                self.dictionary = Hunspell(self.language)
        except Exception as e:
            logger.error(f"Failed to load hunspell dictionary {self.language}: {e}")
            raise

    def lookup(self, word: str) -> Optional[str]:
        """Dictionary stem of a word, or None if the dictionary doesn't know it."""
        if not word:
            return None
        self._ensure_loaded()
        candidates = self.dictionary.stem(word)
        if not candidates:
            return None
        stem = candidates[-1]
        if isinstance(stem, bytes):
            stem = stem.decode("utf-8")
        return stem or None

    def stem(self, word: str) -> Optional[str]:
        return self.lookup(word)

    def get_info(self) -> dict:
        return {
            "name": "Hunspell",
            "algorithm": self.algorithm.value,
            "provider": "cyhunspell",
            "language": self.language,
            "loaded": self.dictionary is not None,
        }


class ModifiedHunspellStemmer(HunspellStemmer):
    """Dictionary stemmer that falls back to RSLP for unknown words."""

    algorithm = Algorithm.MODIFIED_HUNSPELL

    def __init__(
        self,
        dictionary: Any = None,
        language: Optional[str] = None,
        data_dir: Optional[str] = None,
    ):
        super().__init__(dictionary=dictionary, language=language, data_dir=data_dir)
        self._fallback: Optional[RSLPStemmer] = None

    def stem(self, word: str) -> Optional[str]:
        stem = self.lookup(word)
        if stem is not None or not word:
            return stem
        if self._fallback is None:
            self._fallback = RSLPStemmer()
        return self._fallback.stem(word)

    def get_info(self) -> dict:
        info = super().get_info()
        info["name"] = "Hunspell + RSLP fallback"
        info["provider"] = "cyhunspell+nltk"
        return info
