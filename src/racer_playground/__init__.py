"""
Racer Playground

Protocol-oriented racing in Python:
- domain: birds, a motorcycle and comparable scores
- service: racing protocols and top speed selection
- playground: guided walkthrough of everything above
- api: FastAPI app serving the roster and the selector
"""

from .exceptions import NotARacerError, PlaygroundError, UnknownSwallowError
from .service import RacerRoster, select_max, top_speed

__all__ = [
    "PlaygroundError",
    "UnknownSwallowError",
    "NotARacerError",
    "RacerRoster",
    "select_max",
    "top_speed",
]

__version__ = "1.0.0"
