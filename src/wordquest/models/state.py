"""Progress state of a single learner."""
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional

from wordquest.models.catalog_models import Category

logger = logging.getLogger(__name__)


@dataclass
class WordPerformance:
    """Performance history of one word."""
    token: str
    attempts: int = 0
    correct: int = 0
    avg_response_time_ms: float = 0.0
    last_seen_at: Optional[datetime] = None
    streak: int = 0

    @property
    def success_rate(self) -> float:
        if self.attempts == 0:
            return 0.0
        return self.correct / self.attempts

    def to_dict(self) -> Dict[str, Any]:
        return {
            "token": self.token,
            "attempts": self.attempts,
            "correct": self.correct,
            "avg_response_time_ms": self.avg_response_time_ms,
            "last_seen_at": self.last_seen_at.isoformat() if self.last_seen_at else None,
            "streak": self.streak,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WordPerformance":
        last_seen_at = data.get("last_seen_at")
        return cls(
            token=data["token"],
            attempts=int(data.get("attempts", 0)),
            correct=int(data.get("correct", 0)),
            avg_response_time_ms=float(data.get("avg_response_time_ms", 0.0)),
            last_seen_at=datetime.fromisoformat(last_seen_at) if last_seen_at else None,
            streak=int(data.get("streak", 0)),
        )


@dataclass
class CategoryProgress:
    """Aggregate progress and boss status of one category."""
    category: Category
    total_attempts: int = 0
    total_correct: int = 0
    boss_unlocked: bool = False
    boss_completed: bool = False
    stars: int = 0  # 0-3

    @property
    def success_rate(self) -> float:
        if self.total_attempts == 0:
            return 0.0
        return self.total_correct / self.total_attempts

    def to_dict(self) -> Dict[str, Any]:
        return {
            "category": self.category.value,
            "total_attempts": self.total_attempts,
            "total_correct": self.total_correct,
            "boss_unlocked": self.boss_unlocked,
            "boss_completed": self.boss_completed,
            "stars": self.stars,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CategoryProgress":
        return cls(
            category=Category(data["category"]),
            total_attempts=int(data.get("total_attempts", 0)),
            total_correct=int(data.get("total_correct", 0)),
            boss_unlocked=bool(data.get("boss_unlocked", False)),
            boss_completed=bool(data.get("boss_completed", False)),
            stars=int(data.get("stars", 0)),
        )


def _fresh_category_progress() -> Dict[Category, CategoryProgress]:
    return {category: CategoryProgress(category=category) for category in Category}


@dataclass
class AdaptiveState:
    """Everything the engine knows about the learner.

    Treated as an immutable snapshot: engine operations return a new
    instance and never modify the one they were given.
    """
    word_performance: Dict[str, WordPerformance] = field(default_factory=dict)
    category_progress: Dict[Category, CategoryProgress] = field(default_factory=_fresh_category_progress)
    consecutive_errors: int = 0
    easy_mode: bool = False
    total_score: int = 0
    combo: int = 0
    max_combo: int = 0
    mock_test_completed: bool = False
    mock_test_score: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "word_performance": {
                token: perf.to_dict() for token, perf in self.word_performance.items()
            },
            "category_progress": {
                category.value: progress.to_dict()
                for category, progress in self.category_progress.items()
            },
            "consecutive_errors": self.consecutive_errors,
            "easy_mode": self.easy_mode,
            "total_score": self.total_score,
            "combo": self.combo,
            "max_combo": self.max_combo,
            "mock_test_completed": self.mock_test_completed,
            "mock_test_score": self.mock_test_score,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AdaptiveState":
        """Build a state from stored data, filling anything missing with defaults."""
        state = cls()
        for token, perf in data.get("word_performance", {}).items():
            state.word_performance[token] = WordPerformance.from_dict(perf)
        for key, progress in data.get("category_progress", {}).items():
            try:
                category = Category(key)
            except ValueError:
                logger.warning(f"Dropping progress for unknown category: {key}")
                continue
            state.category_progress[category] = CategoryProgress.from_dict(progress)
        state.consecutive_errors = int(data.get("consecutive_errors", 0))
        state.easy_mode = bool(data.get("easy_mode", False))
        state.total_score = int(data.get("total_score", 0))
        state.combo = int(data.get("combo", 0))
        state.max_combo = int(data.get("max_combo", 0))
        state.mock_test_completed = bool(data.get("mock_test_completed", False))
        mock_test_score = data.get("mock_test_score")
        state.mock_test_score = int(mock_test_score) if mock_test_score is not None else None
        return state
