"""
Service package for racing.

This package provides the racing protocols and the top speed selection
services. Selectors follow the Strategy pattern behind the ISpeedSelector
interface.

Main exports:
    - Racer, Cheat: Structural protocols for racers and boostable racers
    - ISpeedSelector: Abstract interface for top speed selection
    - LinearScanSpeedSelector: Default single pass implementation
    - RacerRoster: Immutable sequence of racers with ``top_speed()``
    - RacerAdapter: Wrapper for foreign objects without a ``speed``

Example usage:
    from racer_playground.service import RacerRoster, top_speed
    from racer_playground.domain import Penguin, UnladenSwallow

    racers = [UnladenSwallow.AFRICAN, Penguin(name="King Penguin")]
    top_speed(racers)  # 42.0
    RacerRoster(racers)[:1].top_speed()  # 10.0
"""

from typing import Iterable

from ..domain import DEFAULT_SPEED_FACTOR, MOTORCYCLE_SPEED, PENGUIN_SPEED
from .adapters import FixedSpeedRacer, RacerAdapter
from .protocols import Cheat, ISpeedSelector, Racer, SpeedSelectorProtocol
from .speed_selector import (
    EMPTY_TOP_SPEED,
    LinearScanSpeedSelector,
    RacerRoster,
    select_max,
)

__all__ = [
    # Protocols and interfaces
    "Racer",
    "Cheat",
    "ISpeedSelector",
    "SpeedSelectorProtocol",
    # Implementations
    "LinearScanSpeedSelector",
    "RacerRoster",
    "RacerAdapter",
    "FixedSpeedRacer",
    "select_max",
    # Package helpers
    "ServiceConfig",
    "create_speed_selector",
    "top_speed",
]


class ServiceConfig:
    """Constants shared by the racing services."""

    EMPTY_TOP_SPEED = EMPTY_TOP_SPEED
    DEFAULT_SPEED_FACTOR = DEFAULT_SPEED_FACTOR
    PENGUIN_SPEED = PENGUIN_SPEED
    MOTORCYCLE_SPEED = MOTORCYCLE_SPEED

    SELECTOR_TYPES = {
        "linear": LinearScanSpeedSelector,
    }

    @classmethod
    def validate_config(cls) -> bool:
        """Validate configuration parameters.

        Returns:
            bool: True if configuration is valid, False otherwise.
        """
        if cls.EMPTY_TOP_SPEED != 0.0:
            return False

        for speed in (cls.DEFAULT_SPEED_FACTOR, cls.PENGUIN_SPEED, cls.MOTORCYCLE_SPEED):
            if speed < 0:
                return False

        return bool(cls.SELECTOR_TYPES)


if not ServiceConfig.validate_config():
    raise ValueError("Invalid service configuration detected")


def create_speed_selector(selector_type: str = "linear") -> ISpeedSelector:
    """Factory function for creating top speed selectors.

    Args:
        selector_type: Type of selector to create. Only "linear" exists.

    Returns:
        ISpeedSelector: New selector instance.

    Raises:
        ValueError: If selector_type is unknown.
    """
    try:
        return ServiceConfig.SELECTOR_TYPES[selector_type]()
    except KeyError:
        raise ValueError(
            f"Unsupported selector type: {selector_type}. "
            f"Supported types: {', '.join(repr(t) for t in ServiceConfig.SELECTOR_TYPES)}"
        ) from None


def top_speed(racers: Iterable[Racer], selector_type: str = "linear") -> float:
    """Convenience function returning the top speed of ``racers``.

    Args:
        racers: Racers to compare.
        selector_type: Selector to use, see ``create_speed_selector``.

    Returns:
        float: The top speed, 0.0 for no racers.
    """
    return create_speed_selector(selector_type).select_max(racers)
