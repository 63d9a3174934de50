"""Models for the static word catalog."""
from dataclasses import dataclass
from enum import Enum


class Category(Enum):
    """Learning domains, each with its own progress record and boss."""
    MAGIC_E = "magic-e"
    CLOTHING = "clothing"
    NUMBERS = "numbers"
    HOUSE = "house"


@dataclass(frozen=True)
class CategoryInfo:
    """Display metadata for a category."""
    name: str
    emoji: str


@dataclass(frozen=True)
class WordEntry:
    """A learnable vocabulary item."""
    token: str
    translation: str  # Hebrew
    category: Category
    emoji: str

    @property
    def key(self) -> str:
        """Case-insensitive identity of the entry."""
        return normalize_token(self.token)


def normalize_token(token: str) -> str:
    """Normalize a token for case-insensitive comparison."""
    return token.strip().lower()
