"""
Porter stemmer for Portuguese (Snowball, via NLTK).

Uses the Snowball adaptation of Porter's algorithm for Portuguese:
https://snowballstem.org/algorithms/portuguese/stemmer.html

Example: "gostaram" → "gost"
"""

import logging
from typing import Optional

import nltk
from nltk.stem.snowball import SnowballStemmer

from .base import Algorithm, BaseStemmer

logger = logging.getLogger(__name__)


def load_porter(ignore_stopwords: bool = False) -> SnowballStemmer:
    """Create the Snowball Portuguese stemmer, downloading the stopword list if missing."""
    try:
        return SnowballStemmer("portuguese", ignore_stopwords=ignore_stopwords)
    except LookupError:
        logger.info("NLTK 'stopwords' corpus not found, downloading")
        nltk.download("stopwords", quiet=True)
        return SnowballStemmer("portuguese", ignore_stopwords=ignore_stopwords)


class PorterStemmer(BaseStemmer):
    """Porter-rule-based Portuguese stemmer."""

    algorithm = Algorithm.PORTER

    def __init__(self, ignore_stopwords: bool = False):
        """
        Args:
            ignore_stopwords: Leave Portuguese stopwords unstemmed
                (uses the NLTK 'stopwords' corpus, downloaded when missing)
        """
        self.ignore_stopwords = ignore_stopwords
        self._stemmer = load_porter(ignore_stopwords)

    def stem(self, word: str) -> Optional[str]:
        if not word:
            return None
        return self._stemmer.stem(word) or None

    def get_info(self) -> dict:
        return {
            "name": "Snowball Portuguese",
            "algorithm": self.algorithm.value,
            "provider": "nltk",
            "ignore_stopwords": self.ignore_stopwords,
        }
