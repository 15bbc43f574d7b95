"""
Abstract base class for stemming backends.

All backends must implement this interface to be swappable.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Mapping, Optional, Sequence

from ..completion import apply_completion, complete_stems


class Algorithm(str, Enum):
    """Available stemming algorithms"""
    HUNSPELL = "hunspell"                    # dictionary-based
    RSLP = "rslp"                            # suffix-rule-based
    PORTER = "porter"                        # Porter-rule-based
    MODIFIED_HUNSPELL = "modified-hunspell"  # dictionary-based with rule fallback

    @classmethod
    def values(cls) -> List[str]:
        return [member.value for member in cls]


class BaseStemmer(ABC):
    """
    Abstract base class for stemming backends.

    Subclasses implement stem() for a single word. stem_words() handles
    batches and optional completion; backends may override it when they
    complete differently.
    """

    algorithm: Algorithm

    @abstractmethod
    def stem(self, word: str) -> Optional[str]:
        """
        Stem a single word.

        Args:
            word: Word exactly as extracted from the text

        Returns:
            Stem, or None if the backend can't stem this word
        """
        pass

    def stem_words(
        self,
        words: Sequence[str],
        complete: bool = True,
        word_counts: Optional[Mapping[str, int]] = None,
    ) -> List[Optional[str]]:
        """
        Stem a batch of words.

        Args:
            words: Words to stem (duplicates count as occurrences for completion)
            complete: Replace each stem by the most frequent word sharing it
            word_counts: Corpus-wide counts (e.g. merged from all shards).
                Every counted word is a candidate representative, so a
                shard can complete to a word it never saw.

        Returns:
            One entry per input word, same order (None = stemming failed)
        """
        stems = [self.stem(word) for word in words]
        if not complete:
            return stems

        if word_counts is None:
            representatives = complete_stems(words, stems)
        else:
            known = dict(zip(words, stems))
            vocabulary = list(dict.fromkeys([*words, *word_counts]))
            vocabulary_stems = [known[w] if w in known else self.stem(w) for w in vocabulary]
            representatives = complete_stems(vocabulary, vocabulary_stems, word_counts=word_counts)
        return apply_completion(stems, representatives)

    @abstractmethod
    def get_info(self) -> dict:
        """
        Get information about the backend.

        Returns:
            Dict with keys: name, algorithm, provider (+ backend-specific keys)
        """
        pass
