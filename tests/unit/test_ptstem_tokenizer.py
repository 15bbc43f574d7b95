"""
Unit tests for word extraction.
"""

import unicodedata

import pytest

from ptstem.tokenizer import extract_words, tokenize

pytestmark = pytest.mark.unit


class TestTokenize:
    """Test single-text tokenization"""

    def test_basic_tokenization(self):
        """Words are split on whitespace and punctuation"""
        tokens = tokenize("não coma doces, eles fazem mal para os dentes.")
        assert tokens == ["não", "coma", "doces", "eles", "fazem", "mal", "para", "os", "dentes"]

    def test_accented_letters_are_word_characters(self):
        """Portuguese diacritics stay inside tokens"""
        tokens = tokenize("balões, aviões e avião; ação!")
        assert tokens == ["balões", "aviões", "e", "avião", "ação"]

    def test_case_preserved(self):
        """Tokens keep their original casing"""
        assert tokenize("Gosto de GOSTAR") == ["Gosto", "de", "GOSTAR"]

    def test_hyphen_splits_words(self):
        """Hyphen is punctuation, so compound words split"""
        assert tokenize("guarda-chuva") == ["guarda", "chuva"]

    def test_numbers_are_tokens(self):
        """Digit runs are kept as tokens"""
        assert tokenize("versão 2, 15.3") == ["versão", "2", "15", "3"]

    def test_empty_string(self):
        """Empty and whitespace-only texts give no tokens"""
        assert tokenize("") == []
        assert tokenize("   ") == []
        assert tokenize("\n\t") == []

    def test_deterministic(self):
        """Same input always yields the same tokens"""
        text = "coma frutas pois elas fazem bem para a saúde."
        assert tokenize(text) == tokenize(text)


class TestExtractWords:
    """Test flattening across several texts"""

    def test_flattens_in_order(self):
        """Tokens of all texts in text order"""
        words = extract_words(["coma frutas.", "Coma doces"])
        assert words == ["coma", "frutas", "Coma", "doces"]

    def test_single_string_is_one_text(self):
        """A bare string is not iterated character by character"""
        assert extract_words("gosto muito") == ["gosto", "muito"]

    def test_empty_texts(self):
        """Empty texts contribute nothing"""
        assert extract_words(["", "  ", "bem"]) == ["bem"]
        assert extract_words([]) == []


class TestDecomposedText:
    """Test texts written with combining accents (NFD)"""

    def test_combining_marks_stay_in_token(self):
        """Base letter + combining mark is one word, not two"""
        text = unicodedata.normalize("NFD", "canção informação")
        assert tokenize(text) == text.split(" ")
        assert len(tokenize(text)) == 2

    def test_tokens_are_not_normalized(self):
        """Tokens are exact slices of the input"""
        text = unicodedata.normalize("NFD", "balões")
        assert tokenize(text) == [text]
        assert tokenize(text) != ["balões"]

    def test_mixed_forms(self):
        """Composed and decomposed words tokenize alike"""
        decomposed = unicodedata.normalize("NFD", "avião")
        assert tokenize(f"avião, {decomposed}.") == ["avião", decomposed]
