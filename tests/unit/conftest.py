"""Unit test configuration - deterministic backends, isolated environment"""

import logging
from typing import Optional

import pytest

from ptstem.stemmers import Algorithm, BaseStemmer, StemmerFactory


class PrefixStemmer(BaseStemmer):
    """
    Deterministic stand-in for the real algorithms.

    Stem = first `size` characters. Words in UNKNOWN have no stem, like
    out-of-vocabulary words for a dictionary backend.
    """

    algorithm = Algorithm.RSLP
    UNKNOWN = {"xyzzy", "Xyzzy"}

    def __init__(self, size: int = 4):
        self.size = size

    def stem(self, word: str) -> Optional[str]:
        if word in self.UNKNOWN:
            return None
        return word[:self.size]

    def get_info(self) -> dict:
        return {"name": "prefix", "algorithm": "test", "provider": "tests"}


class FakeDictionary:
    """Hunspell-like dictionary: stem(word) returns candidate stems"""

    ENTRIES = {
        "gosto": ("gosto", "gostar"),
        "gostou": ("gostar",),
        "gostei": ("gostar",),
        "balões": (b"bal\xc3\xa3o",),  # some bindings return bytes
        "vazio": ("",),
    }

    def __init__(self):
        self.calls = []

    def stem(self, word):
        self.calls.append(word)
        return self.ENTRIES.get(word, ())


@pytest.fixture
def prefix_backend(monkeypatch):
    """Route every algorithm to PrefixStemmer for the duration of a test"""
    for algorithm in Algorithm:
        monkeypatch.setitem(StemmerFactory._registry, algorithm, PrefixStemmer)
    return PrefixStemmer


@pytest.fixture
def fake_dictionary():
    return FakeDictionary()


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """
    Keep settings independent of the developer's shell and .env files.

    Runs every test from an empty temporary directory.
    """
    for name in ("PTSTEM_HUNSPELL_LANGUAGE", "PTSTEM_HUNSPELL_DIR", "PTSTEM_LOG_FILE", "PTSTEM_LOG_LEVEL"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    yield


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers after tests that call setup_logging()"""
    root_logger = logging.getLogger()
    saved_handlers = list(root_logger.handlers)
    saved_level = root_logger.level
    yield root_logger
    for handler in root_logger.handlers:
        if handler not in saved_handlers:
            handler.close()
    root_logger.handlers[:] = saved_handlers
    root_logger.setLevel(saved_level)
