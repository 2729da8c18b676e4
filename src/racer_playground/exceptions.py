"""Exceptions raised by the racer playground."""


class PlaygroundError(Exception):
    """Base class for all racer playground errors."""


class UnknownSwallowError(PlaygroundError):
    """Raised when asking an unknown swallow for its airspeed velocity.

    Nobody knows the airspeed velocity of an unknown swallow, so the value
    is refused instead of guessed.
    """

    def __init__(self, message: str = "You are thrown from the bridge of death!"):
        super().__init__(message)


class NotARacerError(PlaygroundError, TypeError):
    """Raised when an object without a ``speed`` is entered into a roster."""

    def __init__(self, candidate: object):
        self.candidate = candidate
        super().__init__(
            f"Expected an object exposing 'speed', got {type(candidate).__name__}"
        )
