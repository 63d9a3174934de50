"""Tests for database and state models."""
from datetime import datetime, UTC
from typing import Generator

import pytest
from faker import Faker
from sqlalchemy.orm import Session

from wordquest.models.base import SessionLocal, init_db
from wordquest.models.catalog_models import Category, WordEntry, normalize_token
from wordquest.models.models import StoredValue
from wordquest.models.state import AdaptiveState, CategoryProgress, WordPerformance

fake = Faker()


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    init_db()
    db = SessionLocal()
    try:
        yield db
    finally:
        db.query(StoredValue).delete()
        db.commit()
        db.close()


def test_stored_value_model(db: Session) -> None:
    """Test StoredValue model creation and timestamps."""
    key = fake.slug()
    row = StoredValue(key=key, value='"hello"')
    db.add(row)
    db.commit()

    saved = db.query(StoredValue).filter(StoredValue.key == key).first()
    assert saved.value == '"hello"'
    assert saved.created_at is not None
    assert saved.updated_at is not None


def test_word_entry_key() -> None:
    """Test that word keys are normalized."""
    entry = WordEntry("Living Room", "סלון", Category.HOUSE, "🛋️")
    assert entry.key == "living room"
    assert normalize_token("  BAKE ") == "bake"


def test_word_performance_success_rate() -> None:
    """Test word success rate."""
    assert WordPerformance(token="bake").success_rate == 0
    assert WordPerformance(token="bake", attempts=4, correct=3).success_rate == 0.75


def test_category_progress_success_rate() -> None:
    """Test category success rate."""
    assert CategoryProgress(category=Category.NUMBERS).success_rate == 0
    progress = CategoryProgress(category=Category.NUMBERS, total_attempts=5, total_correct=2)
    assert progress.success_rate == 0.4


def test_state_serialization() -> None:
    """Test that a state survives conversion to plain data."""
    state = AdaptiveState(total_score=70, combo=2, max_combo=4, easy_mode=True)
    state.word_performance["bake"] = WordPerformance(
        token="bake",
        attempts=3,
        correct=2,
        avg_response_time_ms=512.5,
        last_seen_at=datetime(2026, 3, 1, 9, 30, tzinfo=UTC),
        streak=1,
    )
    state.category_progress[Category.MAGIC_E].boss_unlocked = True

    data = state.to_dict()
    assert data["category_progress"]["magic-e"]["boss_unlocked"] is True
    assert data["word_performance"]["bake"]["last_seen_at"] == "2026-03-01T09:30:00+00:00"
    assert AdaptiveState.from_dict(data) == state


def test_state_from_empty_data() -> None:
    """Test that empty data gives a fresh state."""
    assert AdaptiveState.from_dict({}) == AdaptiveState()


def test_state_drops_unknown_categories() -> None:
    """Test that progress of a removed category is dropped."""
    data = AdaptiveState().to_dict()
    data["category_progress"]["spaceships"] = {"category": "spaceships", "total_correct": 3}
    state = AdaptiveState.from_dict(data)
    assert set(state.category_progress) == set(Category)
