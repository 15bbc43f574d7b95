"""
Public stemming operations.

stem_words(): stem a list of words with the selected algorithm.
stem_text(): stem every eligible word inside texts and rewrite the texts.

Pipeline for stem_text:
1. Validate configuration (algorithm, complete, ignore) - fail before any work
2. Tokenize all texts into one word list
3. Filter by length and ignore rules
4. Stem surviving words (completion sees corpus-wide frequencies)
5. Build word -> replacement map, skipping words that could not be stemmed
6. Rewrite texts in a single whole-word pass

Completion uses the frequencies of the whole input. Stemming one corpus in
parallel shards with complete=True gives per-shard representatives; pass
the counts of all shards merged with completion.merge_word_counts() as
word_counts to stem_words, or use complete=False.
"""

import logging
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Union

from .errors import ConfigurationError
from .filters import IgnoreInput, filter_words, split_ignore_rules
from .rewriter import replace_words
from .stemmers import Algorithm, StemmerFactory, validate_algorithm, validate_complete
from .tokenizer import extract_words

logger = logging.getLogger(__name__)

DEFAULT_MIN_LENGTH = 3


def stem_words(
    words: Sequence[str],
    algorithm: Union[str, Algorithm] = Algorithm.RSLP,
    complete: bool = True,
    word_counts: Optional[Mapping[str, int]] = None,
    **options,
) -> List[Optional[str]]:
    """
    Stem words using the selected algorithm.

    Every word is stemmed, no length filter applies.

    Args:
        words: Words to stem
        algorithm: 'hunspell', 'rslp', 'porter' or 'modified-hunspell'
        complete: Replace stems by the most frequent word sharing the stem
        word_counts: Corpus-wide word counts for completion (sharded runs)
        **options: Passed to the backend (e.g. dictionary=, ignore_stopwords=)

    Returns:
        One stem per input word, same order (None where stemming failed)

    Raises:
        ConfigurationError: Unknown algorithm or non-bool complete

    Usage:
        words = ["balões", "aviões", "avião", "gostou", "gosto", "gostaram"]
        stem_words(words)  # RSLP, completed
        stem_words(words, algorithm="porter", complete=False)
    """
    algorithm = validate_algorithm(algorithm)
    validate_complete(complete)

    words = list(words)
    stemmer = StemmerFactory.create(algorithm, **options)
    stems = stemmer.stem_words(words, complete=complete, word_counts=word_counts)

    logger.debug(f"Stemmed {len(words)} words with {algorithm.value} (complete={complete})")
    return stems


def build_replacements(words: Sequence[str], stems: Sequence[Optional[str]]) -> Dict[str, str]:
    """Map each distinct word to its stem, leaving out words without a stem."""
    replacements: Dict[str, str] = {}
    for word, word_stem in zip(words, stems):
        if word_stem is not None:
            replacements.setdefault(word, word_stem)
    return replacements


def resolve_min_length(n_char: Optional[int], min_word_length: Optional[int]) -> int:
    """Merge the two names of the length threshold (default 3)."""
    if n_char is None:
        return DEFAULT_MIN_LENGTH if min_word_length is None else min_word_length
    if min_word_length is not None and min_word_length != n_char:
        raise ConfigurationError(
            f"n_char={n_char} and min_word_length={min_word_length} disagree, pass only one"
        )
    return n_char


def stem_text(
    texts: Union[str, Iterable[str]],
    algorithm: Union[str, Algorithm] = Algorithm.RSLP,
    n_char: Optional[int] = None,
    complete: bool = True,
    ignore: IgnoreInput = None,
    min_word_length: Optional[int] = None,
    **options,
) -> List[str]:
    """
    Stem the words of each text in place.

    Args:
        texts: Texts to stem (a single string counts as one text)
        algorithm: 'hunspell', 'rslp', 'porter' or 'modified-hunspell'
        n_char: Minimum number of characters a word needs to be stemmed
            (default 3)
        complete: Replace stems by the most frequent word sharing the stem
        ignore: Words and regexes to leave alone. Entries with punctuation
            are regexes ("av.*"), others are whole words ("ana")
        min_word_length: Same as n_char, under the name filter_words uses.
            Passing both with different values is an error
        **options: Passed to the backend

    Returns:
        Rewritten texts, same length and order as the input

    Raises:
        ConfigurationError: Unknown algorithm, non-bool complete, an
            undefined/invalid ignore value, or conflicting n_char and
            min_word_length

    Usage:
        texts = ["coma frutas pois elas fazem bem para a saúde.",
                 "não coma doces, eles fazem mal para os dentes."]
        stem_text(texts, n_char=5)
        stem_text(texts, "porter", n_char=4, complete=False)
        stem_text(texts, ignore="fa.*")  # words containing "fa" are kept
    """
    algorithm = validate_algorithm(algorithm)
    validate_complete(complete)
    rules = split_ignore_rules(ignore)
    min_length = resolve_min_length(n_char, min_word_length)

    if isinstance(texts, str):
        texts = [texts]
    texts = list(texts)

    words = filter_words(extract_words(texts), min_length=min_length, ignore=rules)
    if not words:
        logger.debug("No words left after filtering, texts returned unchanged")
        return texts

    stems = stem_words(words, algorithm=algorithm, complete=complete, **options)
    replacements = build_replacements(words, stems)

    logger.debug(f"Replacing {len(replacements)} distinct words across {len(texts)} texts")
    return replace_words(texts, replacements)
