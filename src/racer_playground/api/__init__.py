"""HTTP interface for the racer playground."""

from .server import app, run

__all__ = ["app", "run"]
