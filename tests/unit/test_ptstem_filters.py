"""
Unit tests for length filtering and ignore rules.
"""

import pytest

from ptstem.errors import ConfigurationError
from ptstem.filters import (
    IgnoreRules,
    filter_words,
    has_punctuation,
    is_ignored,
    split_ignore_rules,
)

pytestmark = pytest.mark.unit


class TestHasPunctuation:
    """Test literal vs regex classification"""

    def test_plain_words(self):
        assert has_punctuation("ana") is False
        assert has_punctuation("avião") is False

    def test_regex_like_entries(self):
        assert has_punctuation("av.*") is True
        assert has_punctuation("(gost|am)") is True

    def test_punctuation_bearing_literal_is_regex(self):
        """'não.' counts as a regex: punctuation is the only discriminator"""
        assert has_punctuation("não.") is True
        rules = split_ignore_rules(["não."])
        assert rules.literals == frozenset()
        assert [p.pattern for p in rules.patterns] == ["não."]


class TestSplitIgnoreRules:
    """Test validation and partitioning of ignore entries"""

    def test_none_means_no_rules(self):
        rules = split_ignore_rules(None)
        assert not rules
        assert rules == IgnoreRules()

    def test_partition(self):
        rules = split_ignore_rules(["ana", "av.*", "gosto"])
        assert rules.literals == frozenset({"ana", "gosto"})
        assert [p.pattern for p in rules.patterns] == ["av.*"]

    def test_single_string(self):
        """A single string is one entry"""
        rules = split_ignore_rules("av.*")
        assert [p.pattern for p in rules.patterns] == ["av.*"]

    def test_nan_rejected(self):
        """An explicitly undefined value is a configuration error"""
        with pytest.raises(ConfigurationError, match="NaN"):
            split_ignore_rules(float("nan"))

    @pytest.mark.parametrize("ignore", [[None], ["ana", None], [float("nan")]])
    def test_undefined_entries_rejected(self, ignore):
        with pytest.raises(ConfigurationError):
            split_ignore_rules(ignore)

    def test_non_string_entry_rejected(self):
        with pytest.raises(ConfigurationError, match="strings"):
            split_ignore_rules(["ana", 3])

    def test_non_iterable_rejected(self):
        with pytest.raises(ConfigurationError):
            split_ignore_rules(3)

    def test_invalid_pattern(self):
        with pytest.raises(ConfigurationError, match="Invalid ignore pattern"):
            split_ignore_rules(["(av"])

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            split_ignore_rules(float("nan"))


class TestIsIgnored:
    """Test matching of words against rules"""

    def test_literal_matches_whole_word_only(self):
        rules = split_ignore_rules(["ana"])
        assert is_ignored("ana", rules) is True
        assert is_ignored("banana", rules) is False
        assert is_ignored("diana", rules) is False

    def test_literal_is_not_regex(self):
        """Literal entries are compared as fixed text"""
        rules = split_ignore_rules(["ana"])
        assert is_ignored("Ana", rules) is False

    def test_pattern_searches_anywhere(self):
        rules = split_ignore_rules(["av.*"])
        assert is_ignored("avião", rules) is True
        assert is_ignored("aviões", rules) is True
        assert is_ignored("balões", rules) is False

    def test_anchored_pattern(self):
        rules = split_ignore_rules([r"ões\b"])
        assert is_ignored("balões", rules) is True
        assert is_ignored("avião", rules) is False


class TestFilterWords:
    """Test the combined filter"""

    def test_min_length(self):
        """Words strictly shorter than min_length are dropped"""
        assert filter_words(["eu", "vou", "gostaria"], min_length=5) == ["gostaria"]
        assert filter_words(["eu", "vou", "gostaria"], min_length=3) == ["vou", "gostaria"]

    def test_min_length_counts_characters(self):
        """Accented letters count as one character"""
        assert filter_words(["ação"], min_length=4) == ["ação"]

    def test_literal_ignore(self):
        words = ["ana", "banana", "diana"]
        assert filter_words(words, ignore=["ana"]) == ["banana", "diana"]

    def test_regex_ignore(self):
        words = ["balões", "aviões", "avião", "gostou"]
        assert filter_words(words, ignore="av.*") == ["balões", "gostou"]

    def test_any_rule_drops(self):
        words = ["balões", "aviões", "avião", "gostou"]
        assert filter_words(words, ignore=["gostou", "av.*"]) == ["balões"]

    def test_duplicates_and_order_preserved(self):
        words = ["gosto", "eu", "gostou", "gosto"]
        assert filter_words(words) == ["gosto", "gostou", "gosto"]

    def test_accepts_prepared_rules(self):
        rules = split_ignore_rules(["ana"])
        assert filter_words(["ana", "banana"], ignore=rules) == ["banana"]

    def test_everything_filtered(self):
        assert filter_words(["eu", "tu"], min_length=3) == []
