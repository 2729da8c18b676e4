"""
Domain package for racer playground entities.

This package contains the birds, the motorcycle and the score types the
playground races and compares.

Main exports:
    - Bird: Mixin with default ``can_fly`` and ``description``
    - Flyable: Protocol for anything with an airspeed velocity
    - FlappyBird, Penguin, SwiftBird, UnladenSwallow: Bird species
    - Motorcycle: Plain vehicle that races without knowing it
    - Score, RacingScore: Comparable scores

Example usage:
    from racer_playground.domain import FlappyBird, UnladenSwallow

    felipe = FlappyBird(name="Felipe", flappy_amplitude=3.0, flappy_frequency=20.0)
    felipe.airspeed_velocity  # 180.0
    UnladenSwallow.UNKNOWN.can_fly  # False
"""

from .birds import (
    DEFAULT_SPEED_FACTOR,
    PENGUIN_SPEED,
    Bird,
    FlappyBird,
    Flyable,
    Penguin,
    SwiftBird,
    UnladenSwallow,
)
from .motorcycle import MOTORCYCLE_SPEED, Motorcycle
from .scores import RacingScore, Score

__all__ = [
    "Bird",
    "Flyable",
    "FlappyBird",
    "Penguin",
    "SwiftBird",
    "UnladenSwallow",
    "Motorcycle",
    "Score",
    "RacingScore",
    "DEFAULT_SPEED_FACTOR",
    "PENGUIN_SPEED",
    "MOTORCYCLE_SPEED",
]
