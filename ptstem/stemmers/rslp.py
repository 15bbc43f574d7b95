"""
RSLP stemmer (Removedor de Sufixos da Lingua Portuguesa) via NLTK.

Suffix-stripping rules for Portuguese by Orengo & Huyck (2001). Rules are
applied in steps: plural, feminine, augmentative, adverb, noun, verb and
vowel removal.

Example: "gostaram" → "gost"
"""

import logging
from typing import Optional

import nltk
from nltk.stem import RSLPStemmer as _NLTKRSLPStemmer

from .base import Algorithm, BaseStemmer

logger = logging.getLogger(__name__)


def load_rslp() -> _NLTKRSLPStemmer:
    """Create the NLTK RSLP stemmer, downloading its rule files if missing."""
    try:
        return _NLTKRSLPStemmer()
    except LookupError:
        logger.info("NLTK 'rslp' resource not found, downloading")
        nltk.download("rslp", quiet=True)
        return _NLTKRSLPStemmer()


class RSLPStemmer(BaseStemmer):
    """Suffix-rule-based Portuguese stemmer."""

    algorithm = Algorithm.RSLP

    def __init__(self):
        self._stemmer = load_rslp()

    def stem(self, word: str) -> Optional[str]:
        if not word:
            return None
        return self._stemmer.stem(word) or None

    def get_info(self) -> dict:
        return {
            "name": "RSLP",
            "algorithm": self.algorithm.value,
            "provider": "nltk",
        }
