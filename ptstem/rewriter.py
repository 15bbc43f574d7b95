"""
Whole-word text rewriting.

All replacements happen in one left-to-right pass per text: every token
(same pattern as the tokenizer) is looked up in the replacement map and
swapped when found. Replacement output is never rescanned, so a stem
produced for one word can't be matched again by another entry, and a key
can only ever match a complete token.

Cost is linear in text length; the size of the map doesn't matter.
"""

import logging
from typing import Iterable, List, Mapping, Optional, Union

from .tokenizer import WORD_PATTERN

logger = logging.getLogger(__name__)


def replace_words(
    texts: Union[str, Iterable[str]],
    replacements: Mapping[str, Optional[str]],
) -> List[str]:
    """
    Replace whole-word occurrences of each key by its value.

    Keys are tokens as produced by the tokenizer; a key that is not a single
    token (e.g. "e.g") never matches. Entries whose value is None are
    dropped, so those words stay exactly as they were. Everything that is
    not a match (punctuation, whitespace, casing of other words) is
    preserved verbatim.

    Args:
        texts: Texts to rewrite (a single string counts as one text)
        replacements: Word -> replacement

    Returns:
        Rewritten texts, same length and order as the input

    Examples:
        >>> replace_words(["gosto muito, gostosamente"], {"gosto": "gost"})
        ['gost muito, gostosamente']

        >>> replace_words(["avião"], {"avião": None})
        ['avião']
    """
    if isinstance(texts, str):
        texts = [texts]
    texts = list(texts)

    active = {word: value for word, value in replacements.items() if value is not None}
    if not active:
        return texts

    def substitute(match):
        token = match.group(0)
        return active.get(token, token)

    logger.debug(f"Rewriting {len(texts)} texts with {len(active)} replacements")
    return [WORD_PATTERN.sub(substitute, text) for text in texts]
