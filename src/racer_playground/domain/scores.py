"""
Domain module for comparable scores.

A score only has to say how ``<`` works. The remaining ordering operators
are derived from it by the Score base class.
"""

from abc import ABC, abstractmethod

from pydantic import BaseModel, ConfigDict, Field


class Score(ABC):
    """Abstract comparable score.

    Subclasses expose an integer ``value`` and implement ``__lt__``.
    ``>``, ``<=`` and ``>=`` are defined in terms of ``<`` and assume a
    total order.
    """

    value: int

    @abstractmethod
    def __lt__(self, other: "Score") -> bool:
        """Return True if this score ranks strictly below ``other``."""

    def __gt__(self, other: "Score") -> bool:
        if not isinstance(other, Score):
            return NotImplemented
        return other < self

    def __le__(self, other: "Score") -> bool:
        if not isinstance(other, Score):
            return NotImplemented
        return not other < self

    def __ge__(self, other: "Score") -> bool:
        if not isinstance(other, Score):
            return NotImplemented
        return not self < other


class RacingScore(Score, BaseModel):
    """Score earned in a race, ordered by its value."""

    model_config = ConfigDict(frozen=True)

    value: int = Field(..., description="Points earned in the race")

    def __lt__(self, other: "Score") -> bool:
        if not isinstance(other, Score):
            return NotImplemented
        return self.value < other.value
