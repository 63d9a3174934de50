"""Game session: the single owner of a learner's state."""
import logging
import random
import threading
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, List, Optional, Sequence, Set

from wordquest import monitoring
from wordquest.models.achievement_models import Achievement
from wordquest.models.catalog_models import Category
from wordquest.models.state import AdaptiveState
from wordquest.services import achievement_service, adaptive_engine
from wordquest.services.storage_service import ProgressStorage

logger = logging.getLogger(__name__)


@dataclass
class SessionUpdate:
    """What the UI gets back after an event."""
    state: AdaptiveState
    new_achievements: List[Achievement] = field(default_factory=list)


class GameSession:
    """Applies UI events to the learner state, then saves and checks achievements.

    Calls are serialized with a lock so a multi-threaded host cannot apply
    two events to the same snapshot.
    """

    def __init__(self, storage: ProgressStorage, rng: Optional[random.Random] = None):
        """Initialize the session from storage, starting fresh if nothing is saved."""
        self.storage = storage
        self.rng = rng or random.Random()
        self._lock = threading.Lock()
        self.state = storage.load_state() or adaptive_engine.initial_state()
        self.unlocked_achievements: Set[str] = storage.load_unlocked_achievements()
        self.player_name = storage.load_player_name()
        self._pending: Deque[Achievement] = deque()

    def _apply(self, new_state: AdaptiveState) -> SessionUpdate:
        self.state = new_state
        self.storage.save_state(new_state)

        newly_unlocked = achievement_service.check_achievements(new_state, self.unlocked_achievements)
        if newly_unlocked:
            self.unlocked_achievements |= {achievement.id for achievement in newly_unlocked}
            self.storage.save_unlocked_achievements(self.unlocked_achievements)
            self._pending.extend(newly_unlocked)
            for achievement in newly_unlocked:
                monitoring.achievements_unlocked.labels(achievement_id=achievement.id).inc()
        return SessionUpdate(state=new_state, new_achievements=newly_unlocked)

    def record_answer(
        self, token: str, category: Category, correct: bool, response_time_ms: float
    ) -> SessionUpdate:
        with self._lock:
            new_state = adaptive_engine.record_answer(
                self.state, token, category, correct, max(response_time_ms, 0)
            )
            monitoring.answers_recorded.labels(
                category=category.value, result="correct" if correct else "incorrect"
            ).inc()
            return self._apply(new_state)

    def complete_boss(self, category: Category, stars: int) -> SessionUpdate:
        with self._lock:
            new_state = adaptive_engine.complete_boss(self.state, category, stars)
            monitoring.bosses_completed.labels(category=category.value).inc()
            logger.info(f"Boss {category.value} completed with {stars} stars")
            return self._apply(new_state)

    def complete_mock_test(self, score: int) -> SessionUpdate:
        with self._lock:
            new_state = adaptive_engine.complete_mock_test(self.state, score)
            monitoring.mock_tests_completed.inc()
            logger.info(f"Mock test completed with score {score}")
            return self._apply(new_state)

    def reset_progress(self) -> SessionUpdate:
        """Start over: fresh state, no achievements, nothing pending."""
        with self._lock:
            self.state = adaptive_engine.reset_progress()
            self.unlocked_achievements = set()
            self._pending.clear()
            self.storage.save_state(self.state)
            self.storage.save_unlocked_achievements(self.unlocked_achievements)
            logger.info("Progress reset")
            return SessionUpdate(state=self.state)

    def pick_words(self, pool: Sequence[str], count: int) -> List[str]:
        """Choose the words for a new round."""
        return adaptive_engine.pick_adaptive_words(self.state, pool, count, self.rng)

    def set_player_name(self, name: str) -> None:
        with self._lock:
            self.player_name = name.strip()
            self.storage.save_player_name(self.player_name)

    @property
    def pending_achievement(self) -> Optional[Achievement]:
        """The achievement the UI should show now, if any."""
        return self._pending[0] if self._pending else None

    def dismiss_achievement(self) -> Optional[Achievement]:
        """Drop the shown achievement and return the next one."""
        with self._lock:
            if self._pending:
                self._pending.popleft()
            return self.pending_achievement

    def is_boss_unlocked(self, category: Category) -> bool:
        return adaptive_engine.is_boss_unlocked(self.state, category)

    def all_bosses_completed(self) -> bool:
        return adaptive_engine.all_bosses_completed(self.state)

    def is_mock_test_available(self) -> bool:
        return adaptive_engine.is_mock_test_available(self.state)
