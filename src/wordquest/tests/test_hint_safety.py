"""Tests for the hint safety filter."""
import pytest

from wordquest.models.catalog_models import Category, WordEntry
from wordquest.models.hint_models import ModuleType
from wordquest.services import hint_safety
from wordquest.services.hint_safety import HintSafetyFilter
from wordquest.services.local_hints import LOCAL_HINTS


@pytest.fixture
def safety_filter() -> HintSafetyFilter:
    """Create a filter over the full catalog."""
    return HintSafetyFilter()


def test_canned_hints_are_safe(safety_filter: HintSafetyFilter) -> None:
    """Test that no canned hint leaks an answer."""
    assert safety_filter.check_catalog(LOCAL_HINTS) == []


def test_plain_hebrew_hint_is_safe(safety_filter: HintSafetyFilter) -> None:
    """Test that an encouraging hint passes."""
    assert safety_filter.is_safe("תקשיב לצליל של האות באמצע 👂", ModuleType.MAGIC_E)
    assert hint_safety.is_safe("כל הכבוד, ממשיכים! 🎉", ModuleType.VOCABULARY)


@pytest.mark.parametrize("hint", [
    "The answer is bake",
    "the correct word is here",
    "right answer!",
    "התשובה היא ממש קרובה",
    "התשובה הנכונה מחכה לך",
    "המילה הנכונה מתחילה באות b",
    "תבחר ב-2",
])
def test_answer_announcements_are_rejected(safety_filter: HintSafetyFilter, hint: str) -> None:
    """Test that phrases announcing the answer are caught."""
    assert safety_filter.find_violations(hint, ModuleType.VOCABULARY)


def test_answer_word_is_rejected(safety_filter: HintSafetyFilter) -> None:
    """Test that catalog words in the module domain are caught."""
    violations = safety_filter.find_violations("תחשוב על Shirt 👕", ModuleType.PRICE_TAG)
    assert violations == ["contains answer word 'Shirt'"]


def test_answer_phrase_is_rejected(safety_filter: HintSafetyFilter) -> None:
    """Test that multi-word answers are caught as phrases."""
    violations = safety_filter.find_violations("בבוקר אני wake  up מוקדם", ModuleType.MAGIC_E)
    assert any("wake up" in violation for violation in violations)


def test_translation_is_rejected(safety_filter: HintSafetyFilter) -> None:
    """Test that Hebrew translations of domain answers are caught."""
    assert not safety_filter.is_safe("זה כמו מעיל בחורף", ModuleType.PRICE_TAG)


def test_words_outside_module_domain_are_allowed(safety_filter: HintSafetyFilter) -> None:
    """Test that magic e hints may mention other categories."""
    assert safety_filter.find_violations("כמו shirt", ModuleType.MAGIC_E) == []
    assert safety_filter.find_violations("כמו shirt", ModuleType.VOCABULARY)


def test_hint_whitelist(safety_filter: HintSafetyFilter) -> None:
    """Test that structural words and hint helpers are always fine."""
    assert safety_filter.is_safe("The Magic E is my friend", ModuleType.MAGIC_E)
    assert safety_filter.is_safe("המחיר תמיד ב-dollar, והמספרים נגמרים ב-ty", ModuleType.PRICE_TAG)


def test_target_word_is_rejected(safety_filter: HintSafetyFilter) -> None:
    """Test that the concrete answer of an exercise is rejected."""
    violations = safety_filter.find_violations("כמו dollar", ModuleType.PRICE_TAG, target_word="dollar")
    assert violations == ["contains the target word 'dollar'"]


def test_target_translation_is_rejected(safety_filter: HintSafetyFilter) -> None:
    """Test that even a generic translation of the target is rejected."""
    assert safety_filter.find_violations("יש לי בית גדול", ModuleType.VOCABULARY) == []
    assert safety_filter.find_violations("יש לי בית גדול", ModuleType.VOCABULARY, target_word="home")


def test_target_digit_translation_is_ignored(safety_filter: HintSafetyFilter) -> None:
    """Test that number translations do not block every digit."""
    assert safety_filter.find_violations("תספור עד 50 🔢", ModuleType.PRICE_TAG, target_word="fifty") == []


def test_answer_domain(safety_filter: HintSafetyFilter) -> None:
    """Test which categories each module asks about."""
    categories = {entry.category for entry in safety_filter.answer_domain(ModuleType.PRICE_TAG)}
    assert categories == {Category.CLOTHING, Category.NUMBERS}
    assert len(safety_filter.answer_domain(ModuleType.MOCK_TEST)) == len(safety_filter.entries)


def test_check_catalog_reports_problems() -> None:
    """Test that a bad catalog entry is reported with its location."""
    safety_filter = HintSafetyFilter([WordEntry("kite", "עפיפון", Category.HOUSE, "🪁")])
    problems = safety_filter.check_catalog({
        ModuleType.VOCABULARY: {"start": ["תחשוב על kite", "יופי!"]},
    })
    assert len(problems) == 1
    assert problems[0].startswith("vocabulary/start: contains answer word 'kite'")
