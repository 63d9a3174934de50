"""Validation of English text against the curriculum vocabulary."""
import logging
import re
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, List, Optional

from wordquest.models.catalog_models import WordEntry
from wordquest.services import word_bank

logger = logging.getLogger(__name__)

# Words that appear in sentence patterns without being taught themselves
STRUCTURAL_WORDS = frozenset({"the", "is", "are", "a", "an", "i", "my", "e"})

ENGLISH_WORD_PATTERN = re.compile(r"[A-Za-z]+")


@dataclass
class ValidationResult:
    """Result of checking a text against the allow-list."""
    valid: bool
    invalid_tokens: List[str] = field(default_factory=list)


def extract_english_words(text: str) -> List[str]:
    """Extract maximal runs of Latin letters from text."""
    return ENGLISH_WORD_PATTERN.findall(text)


class ContentValidator:
    """Checks that English text only uses words the learner was taught."""

    def __init__(self, entries: Optional[Iterable[WordEntry]] = None):
        """Initialize the validator with a catalog, the built-in one by default."""
        self.entries = list(entries) if entries is not None else word_bank.all_words()
        self._allow_list = self._build_allow_list(self.entries)

    @staticmethod
    def _build_allow_list(entries: List[WordEntry]) -> FrozenSet[str]:
        allowed = {entry.token.lower() for entry in entries}
        allowed.update(STRUCTURAL_WORDS)
        for entry in entries:
            if " " in entry.token:
                allowed.update(part.lower() for part in entry.token.split(" ") if part)
        return frozenset(allowed)

    def allow_list(self) -> FrozenSet[str]:
        """Get the lower-cased set of allowed English words."""
        return self._allow_list

    def is_allowed(self, word: str) -> bool:
        return word.lower() in self._allow_list

    def validate(self, text: str) -> ValidationResult:
        """Flag every English word in text that is outside the allow-list."""
        invalid_tokens = [word for word in extract_english_words(text) if not self.is_allowed(word)]
        if invalid_tokens:
            logger.debug(f"Out-of-vocabulary words {invalid_tokens} in: {text!r}")
        return ValidationResult(valid=not invalid_tokens, invalid_tokens=invalid_tokens)


_default_validator: Optional[ContentValidator] = None


def get_validator() -> ContentValidator:
    """Get the validator for the built-in catalog."""
    global _default_validator
    if _default_validator is None:
        _default_validator = ContentValidator()
    return _default_validator


def allow_list() -> FrozenSet[str]:
    return get_validator().allow_list()


def validate(text: str) -> ValidationResult:
    return get_validator().validate(text)
