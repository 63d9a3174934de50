"""Tests for the game session."""
import random
import threading
from typing import Generator
from unittest.mock import patch

import pytest
from faker import Faker
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from wordquest.models.base import SessionLocal, init_db
from wordquest.models.catalog_models import Category
from wordquest.models.models import StoredValue
from wordquest.services import word_bank
from wordquest.services.game_session import GameSession
from wordquest.services.storage_service import ProgressStorage

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


@pytest.fixture
def storage(db: Session) -> ProgressStorage:
    """Create a storage instance."""
    return ProgressStorage(db)


@pytest.fixture
def session(storage: ProgressStorage) -> GameSession:
    """Create a game session with a seeded random source."""
    return GameSession(storage, rng=random.Random(99))


def test_new_session_starts_fresh(session: GameSession) -> None:
    """Test that a session without saved data starts from zero."""
    assert session.state.total_score == 0
    assert session.unlocked_achievements == set()
    assert session.player_name == ""
    assert session.pending_achievement is None


def test_record_answer_unlocks_achievement(session: GameSession) -> None:
    """Test that the first correct answer queues an achievement."""
    update = session.record_answer("bake", Category.MAGIC_E, True, 800)
    assert update.state.total_score == 10
    assert [a.id for a in update.new_achievements] == ["first_correct"]
    assert session.pending_achievement.id == "first_correct"
    assert "first_correct" in session.unlocked_achievements

    update = session.record_answer("game", Category.MAGIC_E, True, 800)
    assert update.new_achievements == []


def test_achievements_are_shown_one_at_a_time(session: GameSession) -> None:
    """Test the achievement queue."""
    for token in ["bake", "game", "home"]:
        session.record_answer(token, Category.MAGIC_E, True, 500)
    assert session.pending_achievement.id == "first_correct"
    assert session.dismiss_achievement().id == "combo_3"
    assert session.dismiss_achievement() is None
    assert session.dismiss_achievement() is None


def test_progress_survives_restart(storage: ProgressStorage, session: GameSession) -> None:
    """Test that a new session picks up saved progress."""
    session.set_player_name(f"  {fake.first_name()}  ")
    session.record_answer("coat", Category.CLOTHING, True, 700)
    session.complete_boss(Category.CLOTHING, 2)

    restored = GameSession(storage)
    assert restored.state == session.state
    assert restored.unlocked_achievements == session.unlocked_achievements
    assert restored.player_name == session.player_name
    assert restored.player_name == restored.player_name.strip()
    assert restored.pending_achievement is None


def test_negative_response_time_is_clamped(session: GameSession) -> None:
    """Test that a clock glitch cannot produce a negative average."""
    update = session.record_answer("coat", Category.CLOTHING, False, -50)
    assert update.state.word_performance["coat"].avg_response_time_ms == 0


def test_unknown_word_raises(session: GameSession) -> None:
    """Test that an unknown word leaves the session unchanged."""
    with pytest.raises(ValueError):
        session.record_answer("banana", Category.HOUSE, True, 500)
    assert session.state.word_performance == {}


def test_boss_and_mock_test_gates(session: GameSession) -> None:
    """Test the progression gates through the session."""
    for _ in range(10):
        session.record_answer("mirror", Category.HOUSE, True, 300)
    assert session.is_boss_unlocked(Category.HOUSE)
    assert not session.is_mock_test_available()

    for category in Category:
        session.complete_boss(category, 3)
    assert session.all_bosses_completed()
    assert session.is_mock_test_available()

    update = session.complete_mock_test(95)
    ids = [a.id for a in update.new_achievements]
    assert ids == ["mock_test_pass", "mock_test_ace"]


def test_reset_progress(storage: ProgressStorage, session: GameSession) -> None:
    """Test that a reset wipes progress and achievements but keeps the name."""
    session.set_player_name("Dana")
    for token in ["bake", "game", "home"]:
        session.record_answer(token, Category.MAGIC_E, True, 500)

    update = session.reset_progress()
    assert update.state.total_score == 0
    assert session.unlocked_achievements == set()
    assert session.pending_achievement is None

    restored = GameSession(storage)
    assert restored.state.total_score == 0
    assert restored.unlocked_achievements == set()
    assert restored.player_name == "Dana"

    # Achievements can be earned again after a reset
    update = session.record_answer("bake", Category.MAGIC_E, True, 500)
    assert [a.id for a in update.new_achievements] == ["first_correct"]


def test_failed_save_keeps_playing(storage: ProgressStorage, session: GameSession) -> None:
    """Test that a storage failure does not interrupt the game."""
    error = OperationalError("UPDATE", {}, Exception("disk full"))
    with patch.object(storage.db, "commit", side_effect=error):
        update = session.record_answer("bake", Category.MAGIC_E, True, 500)
    assert update.state.total_score == 10
    assert session.state.total_score == 10


def test_pick_words(session: GameSession) -> None:
    """Test choosing words for a round."""
    pool = [entry.token for entry in word_bank.clothing_words()]
    picked = session.pick_words(pool, 4)
    assert len(picked) == 4
    assert len(set(picked)) == 4
    assert set(picked) <= set(pool)


def test_concurrent_answers_are_all_counted(session: GameSession) -> None:
    """Test that answers from several threads are never lost."""
    def play() -> None:
        for _ in range(5):
            session.record_answer("shirt", Category.CLOTHING, True, 100)

    threads = [threading.Thread(target=play) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert session.state.word_performance["shirt"].attempts == 20
    assert session.state.category_progress[Category.CLOTHING].total_correct == 20
