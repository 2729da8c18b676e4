"""
Guided walkthrough of the racing protocols.

Evaluates the playground expressions in order, logs every result and
collects them into a PlaygroundReport.
"""

import logging
import sys
from typing import List, Optional

from pydantic import BaseModel, Field

from .config import PlaygroundSettings, load_settings
from .domain import (
    FlappyBird,
    Motorcycle,
    Penguin,
    RacingScore,
    SwiftBird,
    UnladenSwallow,
)
from .logging_config import setup_logging
from .service import RacerRoster

logger = logging.getLogger(__name__)

BOOST_POWER = 3.0


class PlaygroundReport(BaseModel):
    """Results of one walkthrough run."""

    unknown_swallow_can_fly: bool
    european_swallow_can_fly: bool
    penguin_can_fly: bool
    roster_speeds: List[float] = Field(default_factory=list)
    top_speed: float
    slice_top_speed: float
    score_comparison: bool
    boosted_speeds: List[float] = Field(default_factory=list)


def build_roster() -> RacerRoster:
    """The default race: three swallows, a penguin, two flyers and a motorcycle."""
    return RacerRoster([
        UnladenSwallow.AFRICAN,
        UnladenSwallow.EUROPEAN,
        UnladenSwallow.UNKNOWN,
        Penguin(name="King Penguin"),
        SwiftBird(version=5.1),
        FlappyBird(name="Felipe", flappy_amplitude=3.0, flappy_frequency=20.0),
        Motorcycle(name="Giacomo"),
    ])


def boost_twice(version: float = 5.0, power: float = BOOST_POWER) -> List[float]:
    """Boost a fresh SwiftBird twice and return its speed after each boost."""
    swift_bird = SwiftBird(version=version)
    speeds = []
    for _ in range(2):
        swift_bird.boost(power)
        speeds.append(swift_bird.airspeed_velocity)
    return speeds


def run_playground() -> PlaygroundReport:
    """Run every playground step and return the collected results."""
    unknown_can_fly = UnladenSwallow.UNKNOWN.can_fly
    european_can_fly = UnladenSwallow.EUROPEAN.can_fly
    penguin = Penguin(name="King Penguin")
    logger.info(
        "Can fly: unknown swallow=%s, european swallow=%s, %s=%s",
        unknown_can_fly, european_can_fly, penguin.name, penguin.can_fly,
    )
    logger.info("%s says: %s", UnladenSwallow.AFRICAN.name, UnladenSwallow.AFRICAN)

    roster = build_roster()
    speeds = [racer.speed for racer in roster]
    top = roster.top_speed()
    logger.info("Roster speeds %s, top speed %s", speeds, top)

    slice_top = roster[1:4].top_speed()
    logger.info("Top speed of racers 1 to 3: %s", slice_top)

    comparison = RacingScore(value=150) >= RacingScore(value=130)
    logger.info("RacingScore(150) >= RacingScore(130): %s", comparison)

    boosted = boost_twice()
    logger.info("Swift 5.0 airspeed after each boost: %s", boosted)

    return PlaygroundReport(
        unknown_swallow_can_fly=unknown_can_fly,
        european_swallow_can_fly=european_can_fly,
        penguin_can_fly=penguin.can_fly,
        roster_speeds=speeds,
        top_speed=top,
        slice_top_speed=slice_top,
        score_comparison=comparison,
        boosted_speeds=boosted,
    )


def main(settings: Optional[PlaygroundSettings] = None) -> int:
    """Run the walkthrough and print the report as JSON."""
    settings = settings or load_settings()
    setup_logging("racer_playground", log_dir=settings.log_dir, level=settings.log_level)
    report = run_playground()
    print(report.model_dump_json(indent=2))
    return 0


if __name__ == '__main__':
    sys.exit(main())
