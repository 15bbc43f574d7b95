"""
Stemming backends for Portuguese.

Usage:
    # Stem words with a named algorithm:
    from ptstem.stemmers import stem

    stems = stem(["gostou", "gosto"], algorithm="porter", complete=False)

    # Or create a specific backend:
    from ptstem.stemmers import StemmerFactory

    stemmer = StemmerFactory.create("hunspell", language="pt_BR")
    stems = stemmer.stem_words(words, complete=True)
"""

from typing import Dict, Optional, Sequence, Union

from .base import Algorithm, BaseStemmer
from .rslp import RSLPStemmer
from .porter import PorterStemmer
from .hunspell import HunspellStemmer, ModifiedHunspellStemmer
from .factory import StemmerFactory, validate_algorithm, validate_complete


def stem(
    words: Sequence[str],
    algorithm: Union[str, Algorithm] = Algorithm.RSLP,
    complete: bool = True,
    **options,
) -> Dict[str, Optional[str]]:
    """
    Stem words and return a word -> stem mapping (None = stemming failed).

    Keys are the distinct words in first-seen order.
    """
    validate_complete(complete)
    stems = StemmerFactory.create(algorithm, **options).stem_words(words, complete=complete)
    mapping: Dict[str, Optional[str]] = {}
    for word, word_stem in zip(words, stems):
        mapping.setdefault(word, word_stem)
    return mapping


__all__ = [
    'Algorithm',
    'BaseStemmer',
    'RSLPStemmer',
    'PorterStemmer',
    'HunspellStemmer',
    'ModifiedHunspellStemmer',
    'StemmerFactory',
    'validate_algorithm',
    'validate_complete',
    'stem',
]
