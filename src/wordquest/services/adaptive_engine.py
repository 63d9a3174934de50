"""Adaptive progress engine.

Every operation here is a pure transform: it takes an ``AdaptiveState``,
returns a new one and leaves its input untouched. Persistence is the
caller's business (see ``GameSession``).
"""
import copy
import logging
import math
import random
from datetime import datetime, UTC
from typing import List, Optional, Sequence

from wordquest.config import settings
from wordquest.models.catalog_models import Category, normalize_token
from wordquest.models.state import AdaptiveState, CategoryProgress, WordPerformance
from wordquest.services import word_bank

logger = logging.getLogger(__name__)


def initial_state() -> AdaptiveState:
    """Create the state of a learner who has not played yet."""
    return AdaptiveState()


def reset_progress() -> AdaptiveState:
    """Discard all progress."""
    return initial_state()


def _check_category(category: Category) -> Category:
    if not isinstance(category, Category):
        raise ValueError(f"Unknown category: {category!r}")
    return category


def record_answer(
    state: AdaptiveState,
    token: str,
    category: Category,
    correct: bool,
    response_time_ms: float,
    now: Optional[datetime] = None,
) -> AdaptiveState:
    """Apply one answer to the state.

    Raises:
        ValueError: If the token is not in the catalog or the category is unknown.
    """
    _check_category(category)
    entry = word_bank.find_word(token)
    if entry is None:
        raise ValueError(f"Word {token!r} is not in the catalog")

    learning = settings.learning
    new_state = copy.deepcopy(state)
    key = entry.key

    # Word performance
    perf = new_state.word_performance.get(key) or WordPerformance(token=key)
    perf.attempts += 1
    if correct:
        perf.correct += 1
        perf.streak += 1
    else:
        perf.streak = 0
    perf.avg_response_time_ms = (
        perf.avg_response_time_ms * (perf.attempts - 1) + response_time_ms
    ) / perf.attempts
    perf.last_seen_at = now or datetime.now(UTC)
    new_state.word_performance[key] = perf

    # Category progress
    progress = new_state.category_progress.setdefault(category, CategoryProgress(category=category))
    progress.total_attempts += 1
    if correct:
        progress.total_correct += 1
    if progress.total_correct >= learning.boss_unlock_threshold and not progress.boss_unlocked:
        progress.boss_unlocked = True
        logger.info(f"Boss unlocked for category {category.value}")

    # Combo and score
    if correct:
        new_state.combo += 1
        new_state.max_combo = max(new_state.max_combo, new_state.combo)
        multiplier = min(new_state.combo, learning.max_combo_multiplier)
        new_state.total_score += learning.points_per_correct * multiplier
        new_state.consecutive_errors = 0
    else:
        new_state.combo = 0
        new_state.consecutive_errors += 1

    # Difficulty mode
    if new_state.consecutive_errors >= learning.easy_mode_error_threshold and not new_state.easy_mode:
        new_state.easy_mode = True
        logger.info("Entering easy mode")
    if correct and new_state.combo >= learning.easy_mode_recovery_combo:
        if new_state.easy_mode:
            logger.info("Leaving easy mode")
        new_state.easy_mode = False
        new_state.consecutive_errors = 0

    return new_state


def complete_boss(state: AdaptiveState, category: Category, stars: int) -> AdaptiveState:
    """Record a finished boss challenge; stored stars never go down."""
    _check_category(category)
    max_stars = settings.learning.max_boss_stars
    if not 0 <= stars <= max_stars:
        raise ValueError(f"Stars must be between 0 and {max_stars}, got {stars}")

    new_state = copy.deepcopy(state)
    progress = new_state.category_progress.setdefault(category, CategoryProgress(category=category))
    progress.boss_completed = True
    progress.stars = max(progress.stars, stars)
    new_state.total_score += stars * settings.learning.points_per_boss_star
    return new_state


def complete_mock_test(state: AdaptiveState, score: int) -> AdaptiveState:
    """Record a mock test result as a percentage; the latest result is kept."""
    if not 0 <= score <= 100:
        raise ValueError(f"Mock test score must be a percentage, got {score}")

    new_state = copy.deepcopy(state)
    new_state.mock_test_completed = True
    new_state.mock_test_score = score
    return new_state


def get_success_rate(state: AdaptiveState, token: str) -> float:
    """Get the share of correct answers for a word, 0 if never attempted."""
    perf = state.word_performance.get(normalize_token(token))
    if perf is None:
        return 0.0
    return perf.success_rate


def get_category_success_rate(state: AdaptiveState, category: Category) -> float:
    progress = state.category_progress.get(category)
    if progress is None:
        return 0.0
    return progress.success_rate


def is_boss_unlocked(state: AdaptiveState, category: Category) -> bool:
    progress = state.category_progress.get(category)
    return progress is not None and progress.boss_unlocked


def all_bosses_completed(state: AdaptiveState) -> bool:
    return all(
        category in state.category_progress and state.category_progress[category].boss_completed
        for category in Category
    )


def is_mock_test_available(state: AdaptiveState) -> bool:
    """The mock test opens once every boss has been beaten."""
    return all_bosses_completed(state)


def total_correct(state: AdaptiveState) -> int:
    return sum(progress.total_correct for progress in state.category_progress.values())


def learned_word_count(state: AdaptiveState) -> int:
    """Count words answered correctly at least once."""
    return sum(1 for perf in state.word_performance.values() if perf.correct > 0)


def get_weak_words(state: AdaptiveState, tokens: Sequence[str]) -> List[str]:
    """Order tokens weakest first.

    Words never attempted come before everything else; ties keep input order.
    """
    def weakness(token: str):
        perf = state.word_performance.get(normalize_token(token))
        if perf is None or perf.attempts == 0:
            return (0, 0.0)
        return (1, perf.success_rate)

    return sorted(tokens, key=weakness)


def pick_adaptive_words(
    state: AdaptiveState,
    pool: Sequence[str],
    count: int,
    rng: Optional[random.Random] = None,
    weak_ratio: Optional[float] = None,
    weak_pool_fraction: Optional[float] = None,
) -> List[str]:
    """Pick up to ``count`` distinct words, biased toward weak ones.

    The pool is ordered by weakness and split in two. Most of the round
    comes from the weak half; the rest is drawn from whatever is left.
    """
    if rng is None:
        rng = random.Random()
    if weak_ratio is None:
        weak_ratio = settings.learning.weak_words_ratio
    if weak_pool_fraction is None:
        weak_pool_fraction = settings.learning.weak_pool_fraction
    if count <= 0:
        return []

    # One entry per word, first spelling wins
    seen = set()
    distinct = []
    for token in pool:
        key = normalize_token(token)
        if key not in seen:
            seen.add(key)
            distinct.append(token)
    ordered = get_weak_words(state, distinct)
    split = math.ceil(len(ordered) * weak_pool_fraction)
    weak_pool = ordered[:split]
    strong_pool = ordered[split:]

    chosen: List[str] = []
    weak_count = math.ceil(count * weak_ratio)
    while len(chosen) < weak_count and weak_pool:
        chosen.append(weak_pool.pop(rng.randrange(len(weak_pool))))

    rest = strong_pool + weak_pool
    while len(chosen) < count and rest:
        chosen.append(rest.pop(rng.randrange(len(rest))))

    logger.debug(f"Picked {len(chosen)} of {len(distinct)} words: {chosen}")
    return chosen
