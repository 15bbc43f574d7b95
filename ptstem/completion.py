"""
Stem completion - replaces abstract stems with attested words.

Completion maps every stem to the word that appears most often with it in
the corpus, so "gost" becomes "gosto" when "gosto" is the most frequent of
"gosto", "gostei", "gostou".

Two passes:
1. Count occurrences of each distinct word
2. Per stem, keep the word with the highest count (ties: first seen wins)

Completion needs corpus-wide counts. When a corpus is stemmed in independent
shards, either disable completion or merge the shard counts with
merge_word_counts() and complete over the merged vocabulary (stem_words
does this when given word_counts).
"""

import logging
from collections import Counter
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)


def count_words(words: Iterable[str]) -> Counter:
    """Count occurrences of each distinct word."""
    return Counter(words)


def merge_word_counts(*counts: Mapping[str, int]) -> Counter:
    """
    Merge word counts computed on separate shards of one corpus.

    Example:
        >>> merge_word_counts({"gosto": 2}, {"gosto": 1, "gostou": 1})
        Counter({'gosto': 3, 'gostou': 1})
    """
    merged: Counter = Counter()
    for shard_counts in counts:
        merged.update(shard_counts)
    return merged


def complete_stems(
    words: Sequence[str],
    stems: Sequence[Optional[str]],
    word_counts: Optional[Mapping[str, int]] = None,
) -> Dict[str, str]:
    """
    Pick the most frequent word of each stem group.

    Args:
        words: Words, in corpus order (duplicates count as occurrences)
        stems: Stem of each word (None = stemming failed, word is skipped)
        word_counts: Precomputed counts (e.g. merged across shards).
            Defaults to counting `words`.

    Returns:
        Dict stem -> representative word. The representative is always one
        of the words sharing that stem.

    Raises:
        ValueError: words and stems have different lengths

    Example:
        >>> complete_stems(["gostou", "gosto", "gosto"], ["gost", "gost", "gost"])
        {'gost': 'gosto'}
    """
    if len(words) != len(stems):
        raise ValueError(f"words and stems must have the same length ({len(words)} != {len(stems)})")

    if word_counts is None:
        word_counts = count_words(words)

    best: Dict[str, Tuple[str, int]] = {}
    for word, stem in zip(words, stems):
        if stem is None:
            continue
        n_word = word_counts.get(word, 0)
        current = best.get(stem)
        # Strict comparison keeps the first seen word on ties
        if current is None or n_word > current[1]:
            best[stem] = (word, n_word)

    logger.debug(f"Completed {len(best)} stems from {len(words)} words")
    return {stem: word for stem, (word, _) in best.items()}


def apply_completion(
    stems: Iterable[Optional[str]],
    representatives: Mapping[str, str],
) -> List[Optional[str]]:
    """Replace each stem by its representative word (None stays None)."""
    return [None if stem is None else representatives.get(stem, stem) for stem in stems]
