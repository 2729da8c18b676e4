"""Adapters that let foreign objects take part in a race."""

from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")


class RacerAdapter(Generic[T]):
    """Wrap an object that has no ``speed`` so it conforms to Racer.

    ``speed`` is computed by ``speed_of`` on every read. Any other attribute
    is looked up on the wrapped object.

    Example:
        sailboat = RacerAdapter(boat, lambda b: b.knots * 1.852)
        select_max([sailboat, Penguin(name="Pingu")])
    """

    def __init__(self, target: T, speed_of: Callable[[T], float]):
        self._target = target
        self._speed_of = speed_of

    @property
    def target(self) -> T:
        return self._target

    @property
    def speed(self) -> float:
        return float(self._speed_of(self._target))

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        return getattr(self._target, name)

    def __repr__(self) -> str:
        return f"RacerAdapter({self._target!r})"


class FixedSpeedRacer:
    """Anonymous racer with a constant speed."""

    def __init__(self, speed: float):
        self._speed = float(speed)

    @property
    def speed(self) -> float:
        return self._speed

    def __repr__(self) -> str:
        return f"FixedSpeedRacer(speed={self._speed})"
