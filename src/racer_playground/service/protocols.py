"""
Service protocols and interfaces for racing.

This module defines the structural protocols racers and cheaters conform to,
and the abstract base class for top speed selection services. Protocols are
checked structurally, so existing types such as Motorcycle conform without
inheriting from anything.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Protocol, runtime_checkable


@runtime_checkable
class Racer(Protocol):
    """Anything that can take part in a race.

    Speed is the only thing racers care about.
    """

    @property
    def speed(self) -> float:
        ...


@runtime_checkable
class Cheat(Protocol):
    """Racer that can permanently boost its own speed."""

    def boost(self, power: float) -> None:
        """Increase future speed by ``power``.

        Args:
            power: Amount added to the racer's speed factor.
        """
        ...


class ISpeedSelector(ABC):
    """Abstract base class for top speed selection services.

    Implementations receive any iterable of racers, including slices of a
    larger roster, and return the highest ``speed`` found. They only read
    ``speed`` and never mutate a racer.

    Example:
        class SortingSpeedSelector(ISpeedSelector):
            def select_max(self, racers: Iterable[Racer]) -> float:
                speeds = sorted(racer.speed for racer in racers)
                return speeds[-1] if speeds else 0.0
    """

    @abstractmethod
    def select_max(self, racers: Iterable[Racer]) -> float:
        """Return the top speed among ``racers``.

        Args:
            racers: Racers to compare. May be empty.

        Returns:
            float: The maximum speed, or 0.0 when ``racers`` is empty.
        """
        pass


@runtime_checkable
class SpeedSelectorProtocol(Protocol):
    """Protocol type for top speed selectors that do not inherit ISpeedSelector."""

    def select_max(self, racers: Iterable[Racer]) -> float:
        ...


__all__ = [
    "Racer",
    "Cheat",
    "ISpeedSelector",
    "SpeedSelectorProtocol",
]
