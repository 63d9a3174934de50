"""Tests for curriculum content validation."""
import pytest

from wordquest.models.catalog_models import Category, WordEntry
from wordquest.services import content_validator, word_bank
from wordquest.services.content_validator import ContentValidator, STRUCTURAL_WORDS


def test_every_catalog_token_validates() -> None:
    """Test that each catalog token is valid on its own."""
    for entry in word_bank.all_words():
        result = content_validator.validate(entry.token)
        assert result.valid, entry.token
        assert result.invalid_tokens == []


def test_multi_word_parts_are_allowed() -> None:
    """Test that parts of multi-word tokens are allowed individually."""
    allowed = content_validator.allow_list()
    for part in ["wake", "up", "living", "room"]:
        assert part in allowed


def test_structural_words_are_allowed() -> None:
    """Test that structural words are allowed."""
    allowed = content_validator.allow_list()
    for word in ["the", "is", "are", "a", "an", "i", "my", "e"]:
        assert word in allowed
    assert STRUCTURAL_WORDS <= allowed


@pytest.mark.parametrize("sentence", [
    "The shirt is new",
    "The boots is clean",
    "The coat is long",
    "The shirt is fifty dollar",
    "The coat is hundred dollar",
    "I wake up late",
])
def test_sentence_patterns_validate(sentence: str) -> None:
    """Test that the sentence patterns used by the games are valid."""
    assert content_validator.validate(sentence).valid


def test_out_of_vocabulary_words_are_listed() -> None:
    """Test that unknown words are reported in order and original spelling."""
    result = content_validator.validate("The Beautiful shirt is amazing!")
    assert result.valid is False
    assert result.invalid_tokens == ["Beautiful", "amazing"]


@pytest.mark.parametrize("word", ["beautiful", "amazing", "expensive", "wonderful", "fantastic"])
def test_allow_list_excludes_other_words(word: str) -> None:
    """Test that the allow-list stays within the curriculum."""
    assert word not in content_validator.allow_list()


def test_non_latin_text_is_ignored() -> None:
    """Test that Hebrew, digits and punctuation are not checked."""
    assert content_validator.validate("המחיר הוא 50 ✨").valid


def test_custom_catalog() -> None:
    """Test that a validator can be built from another catalog."""
    validator = ContentValidator([WordEntry("ice cream", "גלידה", Category.HOUSE, "🍦")])
    assert validator.validate("the ice cream").valid
    assert validator.validate("the shirt").invalid_tokens == ["shirt"]
