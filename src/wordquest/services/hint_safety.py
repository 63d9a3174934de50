"""Guard that keeps hints from giving away the answer."""
import logging
import re
from typing import Dict, FrozenSet, Iterable, List, Optional, Set

from wordquest.models.catalog_models import Category, WordEntry, normalize_token
from wordquest.models.hint_models import ModuleType
from wordquest.services import word_bank
from wordquest.services.content_validator import extract_english_words

logger = logging.getLogger(__name__)

# English words a hint may use even though some are catalog tokens
HINT_ALLOWED_WORDS: FrozenSet[str] = frozenset({
    "e", "magic", "the", "is", "are", "a", "an", "i", "my",
    "dollar",  # price phrasing
    "ty",  # number endings
})

# Translations this short recur innocuously inside other Hebrew words
MIN_TRANSLATION_LENGTH = 4

GENERIC_TRANSLATIONS: FrozenSet[str] = frozenset({
    "בית", "חדש", "ישן", "ארוך", "קר", "חם", "גדול", "קטן",
    "לחשוב", "יותר", "חיוך", "כלל", "גודל", "משחק",
    "אותו דבר", "להתעורר",
})

ANSWER_REVEAL_PATTERNS = [
    re.compile(r"\bthe\s+(correct\s+|right\s+)?(answer|word)\s+is\b", re.IGNORECASE),
    re.compile(r"\b(correct|right)\s+(answer|word)\b", re.IGNORECASE),
    re.compile(r"התשובה\s+היא"),
    re.compile(r"התשובה\s+הנכונה"),
    re.compile(r"המילה\s+הנכונה"),
    re.compile(r"הנכונה\s+היא"),
    re.compile(r"תבחר\s+ב-"),
]

# Which catalog categories a module's exercises ask about
MODULE_ANSWER_DOMAINS: Dict[ModuleType, FrozenSet[Category]] = {
    ModuleType.MAGIC_E: frozenset({Category.MAGIC_E}),
    ModuleType.PRICE_TAG: frozenset({Category.CLOTHING, Category.NUMBERS}),
    ModuleType.SENTENCE_BUILDER: frozenset({Category.CLOTHING, Category.HOUSE}),
    ModuleType.VOCABULARY: frozenset(Category),
    ModuleType.BOSS: frozenset(Category),
    ModuleType.MOCK_TEST: frozenset(Category),
}


def _contains_phrase(text: str, phrase: str) -> bool:
    """Check for a phrase as whole English words, ignoring case."""
    pattern = r"(?<![A-Za-z])" + r"\s+".join(map(re.escape, phrase.split())) + r"(?![A-Za-z])"
    return re.search(pattern, text, re.IGNORECASE) is not None


class HintSafetyFilter:
    """Rejects hints that reveal a catalog answer or its translation."""

    def __init__(self, entries: Optional[Iterable[WordEntry]] = None):
        self.entries = list(entries) if entries is not None else word_bank.all_words()

    def answer_domain(self, module: ModuleType) -> List[WordEntry]:
        categories = MODULE_ANSWER_DOMAINS[module]
        return [entry for entry in self.entries if entry.category in categories]

    def _forbidden_tokens(self, module: ModuleType) -> Set[str]:
        return {entry.key for entry in self.answer_domain(module)} - HINT_ALLOWED_WORDS

    def _forbidden_translations(self, module: ModuleType) -> Set[str]:
        return {
            entry.translation
            for entry in self.answer_domain(module)
            if len(entry.translation) >= MIN_TRANSLATION_LENGTH
            and entry.translation not in GENERIC_TRANSLATIONS
        }

    def find_violations(
        self,
        hint: str,
        module: ModuleType,
        target_word: Optional[str] = None,
    ) -> List[str]:
        """Describe every way ``hint`` could leak an answer."""
        violations = []

        forbidden_tokens = self._forbidden_tokens(module)
        for word in extract_english_words(hint):
            if word.lower() in forbidden_tokens:
                violations.append(f"contains answer word {word!r}")
        for token in forbidden_tokens:
            if " " in token and _contains_phrase(hint, token):
                violations.append(f"contains answer phrase {token!r}")

        for translation in self._forbidden_translations(module):
            if translation in hint:
                violations.append(f"contains translation {translation!r}")

        for pattern in ANSWER_REVEAL_PATTERNS:
            if pattern.search(hint):
                violations.append(f"announces the answer ({pattern.pattern!r})")

        if target_word:
            violations.extend(self._target_violations(hint, target_word))

        return violations

    def _target_violations(self, hint: str, target_word: str) -> List[str]:
        """The concrete answer of the current exercise is never allowed."""
        violations = []
        target = normalize_token(target_word)
        if target and _contains_phrase(hint, target):
            violations.append(f"contains the target word {target_word!r}")
        entry = word_bank.find_word(target_word)
        if entry is not None and not entry.translation.isdigit() and entry.translation in hint:
            violations.append(f"contains the target translation {entry.translation!r}")
        return violations

    def is_safe(self, hint: str, module: ModuleType, target_word: Optional[str] = None) -> bool:
        violations = self.find_violations(hint, module, target_word)
        if violations:
            logger.warning(f"Unsafe hint for {module.value}: {violations}")
        return not violations

    def check_catalog(self, hints_by_module: Dict[ModuleType, Dict[object, List[str]]]) -> List[str]:
        """Validate a whole canned-hint catalog; returns readable violations."""
        problems = []
        for module, cells in hints_by_module.items():
            for trigger, hints in cells.items():
                for hint in hints:
                    for violation in self.find_violations(hint, module):
                        label = getattr(trigger, "value", trigger)
                        problems.append(f"{module.value}/{label}: {violation} - hint: {hint!r}")
        return problems


_default_filter: Optional[HintSafetyFilter] = None


def get_filter() -> HintSafetyFilter:
    global _default_filter
    if _default_filter is None:
        _default_filter = HintSafetyFilter()
    return _default_filter


def is_safe(hint: str, module: ModuleType, target_word: Optional[str] = None) -> bool:
    return get_filter().is_safe(hint, module, target_word)
