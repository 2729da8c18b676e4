"""
Top speed selection over heterogeneous racers.

Racers of any kind can be mixed in one collection as long as each exposes a
``speed``. The selector walks the collection once and keeps the running
maximum.
"""

import logging
from collections.abc import Sequence
from typing import Iterable, Iterator, Optional, Union, overload

from ..exceptions import NotARacerError
from .protocols import ISpeedSelector, Racer, SpeedSelectorProtocol

logger = logging.getLogger(__name__)

EMPTY_TOP_SPEED = 0.0


def select_max(racers: Iterable[Racer]) -> float:
    """Return the highest speed among ``racers``.

    Speeds are compared with plain ``<``. NaN speeds are not supported.

    Args:
        racers: Any iterable of racers, for example a list or a slice of one.

    Returns:
        float: The top speed, or ``EMPTY_TOP_SPEED`` (0.0) when there are no racers.
    """
    top: Optional[float] = None
    for racer in racers:
        speed = racer.speed
        if top is None or top < speed:
            top = speed
    return EMPTY_TOP_SPEED if top is None else float(top)


class LinearScanSpeedSelector(ISpeedSelector):
    """Default ISpeedSelector implementation backed by ``select_max``."""

    def select_max(self, racers: Iterable[Racer]) -> float:
        top = select_max(racers)
        logger.debug("Selected top speed %s", top)
        return top


class RacerRoster(Sequence):
    """Immutable, ordered collection of racers.

    Slicing a roster gives back a roster, so ``roster[1:4].top_speed()``
    works the same way as ``roster.top_speed()``.

    Args:
        racers: Racers to enter, in order.
        selector: Any object with a ``select_max(racers)`` method, used by
            ``top_speed``. Defaults to a LinearScanSpeedSelector.

    Raises:
        NotARacerError: If an entry does not expose ``speed``.
    """

    def __init__(
        self,
        racers: Iterable[Racer] = (),
        selector: Optional[SpeedSelectorProtocol] = None,
    ):
        entries = tuple(racers)
        for entry in entries:
            if not isinstance(entry, Racer):
                raise NotARacerError(entry)
        self._racers = entries
        self._selector = selector or LinearScanSpeedSelector()

    @overload
    def __getitem__(self, index: int) -> Racer: ...

    @overload
    def __getitem__(self, index: slice) -> "RacerRoster": ...

    def __getitem__(self, index: Union[int, slice]) -> Union[Racer, "RacerRoster"]:
        if isinstance(index, slice):
            return RacerRoster(self._racers[index], selector=self._selector)
        return self._racers[index]

    def __len__(self) -> int:
        return len(self._racers)

    def __iter__(self) -> Iterator[Racer]:
        return iter(self._racers)

    def __repr__(self) -> str:
        return f"RacerRoster({list(self._racers)!r})"

    def top_speed(self) -> float:
        """Top speed of the racers in this roster."""
        return self._selector.select_max(self._racers)


__all__ = [
    "EMPTY_TOP_SPEED",
    "select_max",
    "LinearScanSpeedSelector",
    "RacerRoster",
]
