"""Best-effort persistence of learner progress."""
import json
import logging
from typing import Any, Optional, Set

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from wordquest import monitoring
from wordquest.models.models import StoredValue
from wordquest.models.state import AdaptiveState

logger = logging.getLogger(__name__)

STATE_KEY = "adaptive-state"
ACHIEVEMENTS_KEY = "achievements"
PLAYER_NAME_KEY = "player-name"


class ProgressStorage:
    """Key-value blob store for progress, achievements and the player name.

    Failures never reach the caller: reads fall back to "absent" and writes
    are dropped after logging.
    """

    def __init__(self, db: Session):
        """Initialize the storage with a database session."""
        self.db = db

    def _read(self, key: str) -> Optional[Any]:
        try:
            row = self.db.query(StoredValue).filter(StoredValue.key == key).first()
        except SQLAlchemyError as e:
            logger.error(f"Could not read {key}: {e}")
            monitoring.storage_errors.labels(operation="read").inc()
            self.db.rollback()
            return None
        if row is None:
            return None
        try:
            return json.loads(row.value)
        except json.JSONDecodeError as e:
            logger.warning(f"Ignoring corrupt value for {key}: {e}")
            monitoring.storage_errors.labels(operation="decode").inc()
            return None

    def _write(self, key: str, value: Any) -> None:
        try:
            row = self.db.query(StoredValue).filter(StoredValue.key == key).first()
            if row is None:
                row = StoredValue(key=key, value=json.dumps(value, ensure_ascii=False))
                self.db.add(row)
            else:
                row.value = json.dumps(value, ensure_ascii=False)
            self.db.commit()
        except SQLAlchemyError as e:
            logger.error(f"Could not save {key}: {e}")
            monitoring.storage_errors.labels(operation="write").inc()
            self.db.rollback()

    def load_state(self) -> Optional[AdaptiveState]:
        """Load the saved state, or None when absent or unreadable."""
        data = self._read(STATE_KEY)
        if data is None:
            return None
        try:
            return AdaptiveState.from_dict(data)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            logger.warning(f"Ignoring saved state with unexpected shape: {e}")
            monitoring.storage_errors.labels(operation="decode").inc()
            return None

    def save_state(self, state: AdaptiveState) -> None:
        self._write(STATE_KEY, state.to_dict())

    def load_unlocked_achievements(self) -> Set[str]:
        data = self._read(ACHIEVEMENTS_KEY)
        if not isinstance(data, list):
            return set()
        return {item for item in data if isinstance(item, str)}

    def save_unlocked_achievements(self, achievement_ids: Set[str]) -> None:
        self._write(ACHIEVEMENTS_KEY, sorted(achievement_ids))

    def load_player_name(self) -> str:
        data = self._read(PLAYER_NAME_KEY)
        return data if isinstance(data, str) else ""

    def save_player_name(self, name: str) -> None:
        self._write(PLAYER_NAME_KEY, name)

    def clear(self) -> None:
        """Delete every stored value."""
        try:
            self.db.query(StoredValue).delete()
            self.db.commit()
        except SQLAlchemyError as e:
            logger.error(f"Could not clear storage: {e}")
            monitoring.storage_errors.labels(operation="clear").inc()
            self.db.rollback()
