from typing import List

from pydantic import BaseModel, Field


class RacerInfo(BaseModel):
    """A racer entered in the default roster.

    Attributes:
        name (str): Racer name.
        kind (str): Racer type, e.g. "Penguin".
        speed (float): Current speed.
    """
    name: str
    kind: str
    speed: float


class TopSpeedRequest(BaseModel):
    """Request model for the top speed of arbitrary speeds.

    Attributes:
        speeds (List[float]): Speeds to compare, possibly empty.
    """
    speeds: List[float] = Field(default_factory=list, description="Speeds to compare")


class TopSpeedResponse(BaseModel):
    """Response model for top speed queries.

    Attributes:
        top_speed (float): Highest speed found, 0.0 for no racers.
        count (int): Number of racers compared.
    """
    top_speed: float = Field(..., description="Highest speed found")
    count: int = Field(..., ge=0, description="Number of racers compared")


class BoostRequest(BaseModel):
    """Request model for boosting a SwiftBird.

    Attributes:
        version (float): Version of the SwiftBird to build.
        boosts (List[float]): Powers applied one after another.
    """
    version: float = Field(..., ge=0.0, description="SwiftBird version")
    boosts: List[float] = Field(..., min_length=1, description="Boost powers, applied in order")


class BoostResponse(BaseModel):
    """Response model for boosting a SwiftBird.

    Attributes:
        name (str): Name of the boosted bird.
        initial_speed (float): Speed before any boost.
        speeds (List[float]): Speed after each boost.
    """
    name: str
    initial_speed: float
    speeds: List[float]


class ScoreComparisonRequest(BaseModel):
    """Request model for comparing two racing scores."""
    left: int = Field(..., description="Value of the left score")
    right: int = Field(..., description="Value of the right score")


class ScoreComparisonResponse(BaseModel):
    """Results of every ordering operator applied to left and right."""
    less: bool
    greater: bool
    less_or_equal: bool
    greater_or_equal: bool
