"""Tests for canned coach hints."""
import random
import re

import pytest

from wordquest.models.hint_models import HintTrigger, ModuleType
from wordquest.services import local_hints
from wordquest.services.local_hints import LOCAL_HINTS

HEBREW_PATTERN = re.compile(r"[\u0590-\u05ff]")


def test_every_cell_has_five_hints() -> None:
    """Test that every module and trigger has enough variety."""
    assert set(LOCAL_HINTS) == set(ModuleType)
    for module, cells in LOCAL_HINTS.items():
        assert set(cells) == set(HintTrigger), module
        for trigger, hints in cells.items():
            assert len(hints) >= 5, (module, trigger)
            assert len(set(hints)) == len(hints), (module, trigger)


def test_catalog_size() -> None:
    """Test the total number of canned hints."""
    total = sum(len(hints) for cells in LOCAL_HINTS.values() for hints in cells.values())
    assert total >= 140


def test_hints_are_short_hebrew() -> None:
    """Test that every hint is written in Hebrew and fits a speech bubble."""
    for cells in LOCAL_HINTS.values():
        for hints in cells.values():
            for hint in hints:
                assert HEBREW_PATTERN.search(hint), hint
                assert len(hint) < 100, hint


def test_get_hint_comes_from_the_cell(rng: random.Random) -> None:
    """Test that a picked hint belongs to the requested cell."""
    for module in ModuleType:
        for trigger in HintTrigger:
            assert local_hints.get_hint(module, trigger, rng) in LOCAL_HINTS[module][trigger]


def test_get_hint_is_reproducible() -> None:
    """Test that a seeded random source picks the same hint."""
    first = local_hints.get_hint(ModuleType.BOSS, HintTrigger.STREAK, random.Random(5))
    second = local_hints.get_hint(ModuleType.BOSS, HintTrigger.STREAK, random.Random(5))
    assert first == second


def test_get_all_hints_for_module_is_a_copy() -> None:
    """Test that callers cannot change the catalog."""
    hints = local_hints.get_all_hints_for_module(ModuleType.PRICE_TAG)
    hints[HintTrigger.START].clear()
    assert LOCAL_HINTS[ModuleType.PRICE_TAG][HintTrigger.START]


@pytest.mark.parametrize("attempts,expected", [
    (0, HintTrigger.START),
    (1, HintTrigger.WRONG_1),
    (2, HintTrigger.WRONG_2),
    (3, HintTrigger.WRONG_3),
    (7, HintTrigger.WRONG_3),
])
def test_trigger_for_attempts(attempts: int, expected: HintTrigger) -> None:
    """Test the mapping from failed attempts to triggers."""
    assert local_hints.trigger_for_attempts(attempts) is expected


def test_select_trigger() -> None:
    """Test which learning events get a hint."""
    assert local_hints.select_trigger(game_complete=True, streak=5) is HintTrigger.COMPLETE
    assert local_hints.select_trigger(is_correct=True, streak=3) is HintTrigger.STREAK
    assert local_hints.select_trigger(is_correct=True, streak=2) is None
    assert local_hints.select_trigger(is_correct=False, attempt_count=2) is HintTrigger.WRONG_2
    assert local_hints.select_trigger(is_correct=False) is HintTrigger.WRONG_1
    assert local_hints.select_trigger() is None


def test_module_from_task_type() -> None:
    """Test that task types resolve to modules, defaulting to vocabulary."""
    assert ModuleType.from_task_type("priceTag") is ModuleType.PRICE_TAG
    assert ModuleType.from_task_type("MAGICE") is ModuleType.MAGIC_E
    assert ModuleType.from_task_type("crossword") is ModuleType.VOCABULARY
