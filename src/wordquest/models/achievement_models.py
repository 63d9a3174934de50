"""Models for achievements."""
from dataclasses import dataclass


@dataclass(frozen=True)
class Achievement:
    """A milestone the learner can unlock once."""
    id: str
    title: str
    description: str
    icon: str
