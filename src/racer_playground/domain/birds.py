"""
Domain module for bird entities.

Contains the Bird mixin with its default behaviour, the Flyable capability
and the concrete bird species used across the playground.
"""

from enum import Enum
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from ..exceptions import UnknownSwallowError

DEFAULT_SPEED_FACTOR = 1000.0
PENGUIN_SPEED = 42.0


@runtime_checkable
class Flyable(Protocol):
    """Capability of anything that has an airspeed velocity."""

    @property
    def airspeed_velocity(self) -> float:
        ...


class Bird:
    """Mixin with the default behaviour shared by every bird.

    Concrete birds provide a ``name``. They get ``can_fly`` and
    ``description`` for free and may override either of them.

    Example:
        class Dodo(Bird, BaseModel):
            name: str

        Dodo(name="Dodo").can_fly  # False, dodos are not Flyable
    """

    @property
    def can_fly(self) -> bool:
        """Whether the bird can fly.

        Returns:
            True when the bird conforms to Flyable, False otherwise.
        """
        return isinstance(self, Flyable)

    @property
    def description(self) -> str:
        """Human readable summary of the bird's flying ability."""
        return "I can fly" if self.can_fly else "I can't fly :("

    def __str__(self) -> str:
        return self.description


class FlappyBird(Bird, BaseModel):
    """A bird that flies by flapping at a given amplitude and frequency.

    Attributes:
        name: Name of the bird.
        flappy_amplitude: Amplitude of a single flap.
        flappy_frequency: Flaps per unit of time.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., min_length=1, description="Name of the bird")
    flappy_amplitude: float = Field(..., ge=0.0, description="Amplitude of a flap")
    flappy_frequency: float = Field(..., ge=0.0, description="Flap frequency")

    @property
    def airspeed_velocity(self) -> float:
        return 3 * self.flappy_amplitude * self.flappy_frequency

    @property
    def speed(self) -> float:
        return self.airspeed_velocity


class Penguin(Bird, BaseModel):
    """A bird that cannot fly but still races at a steady pace."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., min_length=1, description="Name of the penguin")

    @property
    def speed(self) -> float:
        return PENGUIN_SPEED


class SwiftBird(Bird, BaseModel):
    """A bird whose airspeed grows with its version number.

    The speed factor is private state. It only changes through ``boost``,
    which makes SwiftBird the one mutable racer in the playground.

    Attributes:
        version: Version number multiplied into the airspeed.
    """

    model_config = ConfigDict(extra="forbid")

    version: float = Field(..., ge=0.0, description="Swift version number")

    _speed_factor: float = PrivateAttr(default=DEFAULT_SPEED_FACTOR)

    @property
    def name(self) -> str:
        return f"Swift {self.version}"

    @property
    def speed_factor(self) -> float:
        return self._speed_factor

    @property
    def airspeed_velocity(self) -> float:
        return self.version * self._speed_factor

    @property
    def speed(self) -> float:
        return self.airspeed_velocity

    def boost(self, power: float) -> None:
        """Permanently add ``power`` to the speed factor.

        Args:
            power: Amount added to the speed factor. Boosts accumulate.
        """
        self._speed_factor += power


class UnladenSwallow(Bird, Enum):
    """The swallows of the bridge of death.

    Only the African and European swallows have a known airspeed velocity.
    """

    AFRICAN = "African"
    EUROPEAN = "European"
    UNKNOWN = "Unknown"

    @property
    def name(self) -> str:
        # Member lookups such as UnladenSwallow["AFRICAN"] keep using _name_.
        return self.value

    @property
    def can_fly(self) -> bool:
        return self is not UnladenSwallow.UNKNOWN

    @property
    def airspeed_velocity(self) -> float:
        """Airspeed velocity of the swallow.

        Raises:
            UnknownSwallowError: For the unknown swallow.
        """
        if self is UnladenSwallow.AFRICAN:
            return 10.0
        if self is UnladenSwallow.EUROPEAN:
            return 9.0
        raise UnknownSwallowError()

    @property
    def speed(self) -> float:
        return self.airspeed_velocity if self.can_fly else 0.0


__all__ = [
    "Bird",
    "Flyable",
    "FlappyBird",
    "Penguin",
    "SwiftBird",
    "UnladenSwallow",
    "DEFAULT_SPEED_FACTOR",
    "PENGUIN_SPEED",
]
