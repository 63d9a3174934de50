"""Models for coach hints."""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class ModuleType(Enum):
    """Exercise types that can ask for a hint."""
    MAGIC_E = "magicE"
    SENTENCE_BUILDER = "sentenceBuilder"
    PRICE_TAG = "priceTag"
    VOCABULARY = "vocabulary"
    BOSS = "boss"
    MOCK_TEST = "mockTest"

    @classmethod
    def from_task_type(cls, task_type: str) -> "ModuleType":
        """Resolve a task type string, defaulting to vocabulary when unknown."""
        for module in cls:
            if module.value.lower() == task_type.strip().lower():
                return module
        return cls.VOCABULARY


class HintTrigger(Enum):
    """Learning events that pick a canned hint pool."""
    START = "start"
    WRONG_1 = "wrong_1"
    WRONG_2 = "wrong_2"
    WRONG_3 = "wrong_3"
    STREAK = "streak"
    COMPLETE = "complete"
    IDLE = "idle"


class HintSource(Enum):
    """Where a served hint came from."""
    GENERATED = "generated"
    FALLBACK = "fallback"


@dataclass
class CoachRequest:
    """A request for a hint from the external generator."""
    task_type: str
    word: str
    child_choice: Optional[str] = None
    recent_errors: List[str] = field(default_factory=list)
    attempt_count: int = 0

    @property
    def module(self) -> ModuleType:
        return ModuleType.from_task_type(self.task_type)


@dataclass(frozen=True)
class CoachResponse:
    """A hint ready to be shown."""
    hint: str
    emoji: str = "💡"


@dataclass(frozen=True)
class HintResult:
    """Outcome of the hint pipeline: a generated hint or a canned fallback."""
    response: CoachResponse
    source: HintSource
    reason: Optional[str] = None  # why the fallback was used

    @property
    def is_fallback(self) -> bool:
        return self.source is HintSource.FALLBACK

    @classmethod
    def ok(cls, response: CoachResponse) -> "HintResult":
        return cls(response=response, source=HintSource.GENERATED)

    @classmethod
    def fallback(cls, response: CoachResponse, reason: str) -> "HintResult":
        return cls(response=response, source=HintSource.FALLBACK, reason=reason)
