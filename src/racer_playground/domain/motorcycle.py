"""Motorcycle domain type.

Motorcycle predates the racing protocols and knows nothing about them. It
still races, because it happens to expose a ``speed`` attribute.
"""

MOTORCYCLE_SPEED = 200.0


class Motorcycle:
    """A plain, mutable vehicle with a name and a top speed."""

    def __init__(self, name: str):
        self.name = name
        self.speed = MOTORCYCLE_SPEED

    def __repr__(self) -> str:
        return f"Motorcycle(name={self.name!r}, speed={self.speed})"
