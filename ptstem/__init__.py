"""
Stemming for Portuguese texts.

Reduces words to stems with one of four algorithms and rewrites texts with
the stems, or with the most frequent word sharing each stem (completion).

Components:
- tokenizer: Word extraction
- filters: Length filter and ignore rules (literal words and regexes)
- stemmers: Pluggable backends (hunspell, rslp, porter, modified-hunspell)
- completion: Most frequent word per stem
- rewriter: Simultaneous whole-word replacement
- pipeline: stem_words() and stem_text()
- logging_config: Optional console + rotating file logging for applications
"""

from .errors import ConfigurationError
from .tokenizer import extract_words, tokenize
from .filters import IgnoreRules, filter_words, split_ignore_rules
from .completion import complete_stems, count_words, merge_word_counts
from .rewriter import replace_words
from .stemmers import Algorithm, StemmerFactory
from .pipeline import stem_text, stem_words
from .logging_config import setup_logging, setup_logging_from_settings

__all__ = [
    "ConfigurationError",
    "extract_words",
    "tokenize",
    "IgnoreRules",
    "filter_words",
    "split_ignore_rules",
    "complete_stems",
    "count_words",
    "merge_word_counts",
    "replace_words",
    "Algorithm",
    "StemmerFactory",
    "stem_text",
    "stem_words",
    "setup_logging",
    "setup_logging_from_settings",
]
