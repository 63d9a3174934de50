"""Configuration settings for the learning engine."""
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Define base directory
BASE_DIR = Path(__file__).parent.parent.parent

# Load environment variables from .env file
env_file = ".env.test" if os.getenv("ENV") == "test" else ".env"
load_dotenv(env_file)


# Define data directories from environment variables
DATA_DIR = Path(os.getenv("DATA_DIR", "./data"))

# Progression settings
BOSS_UNLOCK_THRESHOLD = 10  # correct answers in a category before its boss opens
EASY_MODE_ERROR_THRESHOLD = 3  # consecutive errors that switch easy mode on
EASY_MODE_RECOVERY_COMBO = 3  # combo that switches easy mode off again

# Scoring settings
POINTS_PER_CORRECT = 10
MAX_COMBO_MULTIPLIER = 5
POINTS_PER_BOSS_STAR = 50
MAX_BOSS_STARS = 3

# Word selection settings, not tuned yet
WEAK_WORDS_RATIO = 0.6  # share of a round drawn from the weak half
WEAK_POOL_FRACTION = 0.5  # where the weakness-ordered pool is split


def ensure_directories() -> None:
    """Ensure all required directories exist."""
    DATA_DIR.mkdir(parents=True, exist_ok=True)


@dataclass
class DatabaseSettings:
    """Database configuration settings."""
    url: str = os.getenv("DATABASE_URL", f"sqlite:///{DATA_DIR / 'wordquest.db'}")
    echo: bool = os.getenv("DATABASE_ECHO", "false").lower() == "true"


@dataclass
class LoggingSettings:
    """Logging configuration settings."""
    level: str = os.getenv("LOG_LEVEL", "INFO")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    dir: Optional[str] = os.getenv("LOG_DIR", None)
    rotation: str = os.getenv("LOG_ROTATION", "midnight")
    interval: int = int(os.getenv("LOG_INTERVAL", "1"))
    backup_count: int = int(os.getenv("LOG_BACKUP_COUNT", "7"))


@dataclass
class LearningSettings:
    """Adaptive learning and scoring settings."""
    boss_unlock_threshold: int = BOSS_UNLOCK_THRESHOLD
    easy_mode_error_threshold: int = EASY_MODE_ERROR_THRESHOLD
    easy_mode_recovery_combo: int = EASY_MODE_RECOVERY_COMBO
    points_per_correct: int = POINTS_PER_CORRECT
    max_combo_multiplier: int = MAX_COMBO_MULTIPLIER
    points_per_boss_star: int = POINTS_PER_BOSS_STAR
    max_boss_stars: int = MAX_BOSS_STARS
    weak_words_ratio: float = float(os.getenv("WEAK_WORDS_RATIO", str(WEAK_WORDS_RATIO)))
    weak_pool_fraction: float = float(os.getenv("WEAK_POOL_FRACTION", str(WEAK_POOL_FRACTION)))


@dataclass
class CoachSettings:
    """External hint generator settings."""
    api_key: str = os.getenv("COACH_API_KEY", "")
    api_url: str = os.getenv("COACH_API_URL", "https://api.anthropic.com/v1/messages")
    api_version: str = os.getenv("COACH_API_VERSION", "2023-06-01")
    model: str = os.getenv("COACH_MODEL", "claude-sonnet-4-20250514")
    max_tokens: int = int(os.getenv("COACH_MAX_TOKENS", "150"))
    timeout: float = float(os.getenv("COACH_TIMEOUT", "5.0"))
    max_hint_length: int = int(os.getenv("COACH_MAX_HINT_LENGTH", "200"))

    @property
    def enabled(self) -> bool:
        return bool(self.api_key)


def get_database_settings() -> DatabaseSettings:
    """Get database settings."""
    return DatabaseSettings()


def get_logging_settings() -> LoggingSettings:
    """Get logging settings."""
    return LoggingSettings()


def get_learning_settings() -> LearningSettings:
    """Get learning settings."""
    return LearningSettings()


def get_coach_settings() -> CoachSettings:
    """Get coach settings."""
    return CoachSettings()


@dataclass
class Settings:
    """Main settings class that combines all configuration settings."""
    database: DatabaseSettings = field(default_factory=get_database_settings)
    logging: LoggingSettings = field(default_factory=get_logging_settings)
    learning: LearningSettings = field(default_factory=get_learning_settings)
    coach: CoachSettings = field(default_factory=get_coach_settings)

    def validate(self) -> None:
        """Validate settings and raise ValueError if invalid."""
        if not 0 <= self.learning.weak_words_ratio <= 1:
            raise ValueError("WEAK_WORDS_RATIO must be between 0 and 1")

        if not 0 <= self.learning.weak_pool_fraction <= 1:
            raise ValueError("WEAK_POOL_FRACTION must be between 0 and 1")

        if self.learning.boss_unlock_threshold < 1:
            raise ValueError("Boss unlock threshold must be positive")

        if self.coach.timeout <= 0:
            raise ValueError("COACH_TIMEOUT must be positive")

        if self.coach.max_hint_length < 1:
            raise ValueError("COACH_MAX_HINT_LENGTH must be positive")


# Create global settings instance
settings = Settings()
settings.validate()
