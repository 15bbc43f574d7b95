"""
Word filtering before stemming.

Two filters run in sequence:
1. Length filter: words shorter than `min_length` characters are kept out
2. Ignore rules: user-supplied literal words and regex patterns

Ignore rule classification:
- Entry with at least one Unicode punctuation character -> regex pattern
  ("av.*", "gost.+", "não.")
- Any other entry -> literal word, compared as fixed text against the whole
  token ("ana" ignores "ana" but not "banana" or "diana")

Punctuation presence is the only discriminator, so "não." is a regex even if
the caller meant it literally.
"""

import logging
import math
import re
import unicodedata
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, List, Optional, Tuple, Union

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

IgnoreInput = Optional[Union[str, Iterable[Optional[str]]]]


@dataclass(frozen=True)
class IgnoreRules:
    """Ignore entries partitioned into literal words and compiled patterns"""
    literals: FrozenSet[str] = field(default_factory=frozenset)
    patterns: Tuple[re.Pattern, ...] = ()

    def __bool__(self) -> bool:
        return bool(self.literals or self.patterns)


def has_punctuation(entry: str) -> bool:
    """True if any character belongs to a Unicode punctuation category (P*)."""
    return any(unicodedata.category(ch).startswith("P") for ch in entry)


def _is_undefined(value) -> bool:
    return value is None or (isinstance(value, float) and math.isnan(value))


def split_ignore_rules(ignore: IgnoreInput = None) -> IgnoreRules:
    """
    Validate ignore entries and partition them into literals and patterns.

    Args:
        ignore: None (no filtering), a single entry, or a list of entries

    Returns:
        IgnoreRules (empty when ignore is None)

    Raises:
        ConfigurationError: ignore is an undefined value (NaN) or contains
            undefined entries, or a pattern does not compile

    Example:
        >>> rules = split_ignore_rules(["ana", "av.*"])
        >>> sorted(rules.literals)
        ['ana']
        >>> [p.pattern for p in rules.patterns]
        ['av.*']
    """
    if ignore is None:
        return IgnoreRules()
    if _is_undefined(ignore):
        raise ConfigurationError("ignore must not be NaN, omit it or pass None instead")
    if isinstance(ignore, str):
        ignore = [ignore]

    try:
        entries = list(ignore)
    except TypeError:
        raise ConfigurationError(f"ignore must be a string or a list of strings, got {ignore!r}") from None
    if any(_is_undefined(entry) for entry in entries):
        raise ConfigurationError("ignore entries must not be None or NaN")

    literals = set()
    patterns = []
    for entry in entries:
        if not isinstance(entry, str):
            raise ConfigurationError(f"ignore entries must be strings, got {type(entry).__name__}")
        if has_punctuation(entry):
            try:
                patterns.append(re.compile(entry))
            except re.error as e:
                raise ConfigurationError(f"Invalid ignore pattern {entry!r}: {e}") from e
        else:
            literals.add(entry)

    logger.debug(f"Ignore rules: {len(literals)} literal words, {len(patterns)} patterns")
    return IgnoreRules(literals=frozenset(literals), patterns=tuple(patterns))


def is_ignored(word: str, rules: IgnoreRules) -> bool:
    """True if the word equals a literal entry or any pattern matches inside it."""
    if word in rules.literals:
        return True
    return any(pattern.search(word) for pattern in rules.patterns)


def filter_words(
    words: Iterable[str],
    min_length: int = 3,
    ignore: Union[IgnoreInput, IgnoreRules] = None,
) -> List[str]:
    """
    Keep the words eligible for stemming.

    Order and duplicates are preserved (completion needs word frequencies).

    Args:
        words: Tokens to filter
        min_length: Minimum number of characters a word needs to be kept
        ignore: Ignore entries, or already split IgnoreRules

    Returns:
        Filtered list of words

    Examples:
        >>> filter_words(["eu", "vou", "gostaria"], min_length=5)
        ['gostaria']

        >>> filter_words(["ana", "banana", "diana"], ignore=["ana"])
        ['banana', 'diana']
    """
    rules = ignore if isinstance(ignore, IgnoreRules) else split_ignore_rules(ignore)

    kept = [word for word in words if len(word) >= min_length]
    if rules:
        kept = [word for word in kept if not is_ignored(word, rules)]
    return kept
