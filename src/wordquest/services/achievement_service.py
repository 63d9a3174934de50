"""Achievement catalog and unlock rules."""
import logging
from typing import AbstractSet, Callable, Dict, List, Optional

from wordquest.models.achievement_models import Achievement
from wordquest.models.state import AdaptiveState
from wordquest.services import adaptive_engine

logger = logging.getLogger(__name__)

ACHIEVEMENTS: List[Achievement] = [
    Achievement("first_correct", "צעד ראשון!", "תשובה נכונה ראשונה", "🌟"),
    Achievement("combo_3", "קומבו 3!", "3 תשובות נכונות ברצף", "🔥"),
    Achievement("combo_5", "על אש!", "5 תשובות נכונות ברצף", "💥"),
    Achievement("combo_10", "בלתי ניתן לעצירה!", "10 תשובות נכונות ברצף", "🚀"),
    Achievement("score_100", "100 נקודות!", "הגעת ל-100 נקודות", "💯"),
    Achievement("score_250", "כוכב עולה!", "הגעת ל-250 נקודות", "⭐"),
    Achievement("score_500", "אלוף!", "הגעת ל-500 נקודות", "🏆"),
    Achievement("first_boss", "מנצח בוס!", "ניצחת בוס ראשון", "👾"),
    Achievement("all_bosses", "שליט הבוסים!", "ניצחת את כל הבוסים", "👑"),
    Achievement("mock_test_pass", "מוכן למבחן!", "עברת מבחן דמה עם 70%+", "📝"),
    Achievement("mock_test_ace", "מושלם!", "90%+ במבחן דמה", "🌈"),
    Achievement("ten_words", "10 מילים!", "למדת 10 מילים שונות", "📚"),
]

_BY_ID: Dict[str, Achievement] = {achievement.id: achievement for achievement in ACHIEVEMENTS}


def _mock_test_at_least(threshold: int) -> Callable[[AdaptiveState], bool]:
    def predicate(state: AdaptiveState) -> bool:
        return state.mock_test_completed and (state.mock_test_score or 0) >= threshold
    return predicate


RULES: Dict[str, Callable[[AdaptiveState], bool]] = {
    "first_correct": lambda state: adaptive_engine.total_correct(state) >= 1,
    "combo_3": lambda state: state.max_combo >= 3,
    "combo_5": lambda state: state.max_combo >= 5,
    "combo_10": lambda state: state.max_combo >= 10,
    "score_100": lambda state: state.total_score >= 100,
    "score_250": lambda state: state.total_score >= 250,
    "score_500": lambda state: state.total_score >= 500,
    "first_boss": lambda state: any(p.boss_completed for p in state.category_progress.values()),
    "all_bosses": adaptive_engine.all_bosses_completed,
    "mock_test_pass": _mock_test_at_least(70),
    "mock_test_ace": _mock_test_at_least(90),
    "ten_words": lambda state: adaptive_engine.learned_word_count(state) >= 10,
}


def get_achievement(achievement_id: str) -> Optional[Achievement]:
    return _BY_ID.get(achievement_id)


def check_achievements(state: AdaptiveState, unlocked_ids: AbstractSet[str]) -> List[Achievement]:
    """Return achievements newly earned by ``state``, in catalog order.

    Achievements whose id is already in ``unlocked_ids`` are never returned.
    """
    newly_unlocked = [
        achievement
        for achievement in ACHIEVEMENTS
        if achievement.id not in unlocked_ids and RULES[achievement.id](state)
    ]
    if newly_unlocked:
        logger.info(f"Achievements unlocked: {[a.id for a in newly_unlocked]}")
    return newly_unlocked
