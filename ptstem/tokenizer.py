"""
Word tokenizer for stemming pipelines.

Tokenization rules:
1. A token is a maximal run of Unicode word characters (letters, digits, underscore)
   and combining marks
2. Accented Portuguese letters are word characters ("ação", "balões"), whether
   precomposed (NFC) or written as base letter + combining mark (NFD)
3. Punctuation and whitespace are boundaries, never tokens
4. Case is preserved (words are identified by their exact characters)

Text is never normalized: tokens are exact slices of the input, so the
rewriter can match them back with the same pattern.
"""

import re
from typing import Iterable, List, Union

# \w leaves out combining marks (category Mn), which NFD text uses for accents
COMBINING_MARKS = r"\u0300-\u036f\u1ab0-\u1aff\u1dc0-\u1dff\u20d0-\u20ff\ufe20-\ufe2f"
WORD_PATTERN = re.compile(rf"[\w{COMBINING_MARKS}]+")


def tokenize(text: str) -> List[str]:
    """
    Split a single text into word tokens.

    Args:
        text: Input text

    Returns:
        List of tokens in order of appearance

    Examples:
        >>> tokenize("não coma doces, eles fazem mal!")
        ['não', 'coma', 'doces', 'eles', 'fazem', 'mal']

        >>> tokenize("   ")
        []
    """
    if not text:
        return []
    return WORD_PATTERN.findall(text)


def extract_words(texts: Union[str, Iterable[str]]) -> List[str]:
    """
    Tokenize every text and flatten the result.

    Args:
        texts: Texts to tokenize (a single string counts as one text)

    Returns:
        Flat list of tokens, text by text, in order of appearance

    Example:
        >>> extract_words(["coma frutas.", "Coma doces"])
        ['coma', 'frutas', 'Coma', 'doces']
    """
    if isinstance(texts, str):
        texts = [texts]

    words: List[str] = []
    for text in texts:
        words.extend(tokenize(text))
    return words
