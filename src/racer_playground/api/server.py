import logging
from typing import List, Optional

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.responses import JSONResponse

from ..config import PlaygroundSettings, load_settings
from ..domain import RacingScore, SwiftBird, UnladenSwallow
from ..exceptions import PlaygroundError
from ..playground import build_roster
from ..service import FixedSpeedRacer, create_speed_selector
from .models import (
    BoostRequest,
    BoostResponse,
    RacerInfo,
    ScoreComparisonRequest,
    ScoreComparisonResponse,
    TopSpeedRequest,
    TopSpeedResponse,
)

logger = logging.getLogger(__name__)

app = FastAPI(title="Racer Playground", description="API for racing birds, penguins and motorcycles")

selector = create_speed_selector()


@app.exception_handler(PlaygroundError)
async def playground_error_handler(request: Request, exc: PlaygroundError) -> JSONResponse:
    logger.warning("Playground error on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.get("/health")
def health() -> dict:
    return {"status": "healthy"}


@app.get("/racers", response_model=List[RacerInfo])
def list_racers() -> List[RacerInfo]:
    """Endpoint listing the default roster.

    Returns:
        List[RacerInfo]: Name, type and speed of every racer, in roster order.
    """
    return [
        RacerInfo(name=racer.name, kind=type(racer).__name__, speed=racer.speed)
        for racer in build_roster()
    ]


@app.get("/racers/top-speed", response_model=TopSpeedResponse)
def roster_top_speed(
    start: Optional[int] = Query(None, description="First roster index, inclusive"),
    stop: Optional[int] = Query(None, description="Last roster index, exclusive"),
) -> TopSpeedResponse:
    """Endpoint for the top speed of a slice of the default roster.

    Follows Python slice semantics, so out of range bounds give an empty
    slice and a top speed of 0.0.
    """
    racers = build_roster()[start:stop]
    return TopSpeedResponse(top_speed=racers.top_speed(), count=len(racers))


@app.post("/top-speed", response_model=TopSpeedResponse)
def top_speed_endpoint(request: TopSpeedRequest) -> TopSpeedResponse:
    """Endpoint for the top speed of arbitrary racers given by their speeds."""
    racers = [FixedSpeedRacer(speed) for speed in request.speeds]
    return TopSpeedResponse(top_speed=selector.select_max(racers), count=len(racers))


@app.post("/swift-bird/boost", response_model=BoostResponse)
def boost_swift_bird(request: BoostRequest) -> BoostResponse:
    """Endpoint that builds a SwiftBird and boosts it once per requested power."""
    swift_bird = SwiftBird(version=request.version)
    initial_speed = swift_bird.speed
    speeds = []
    for power in request.boosts:
        swift_bird.boost(power)
        speeds.append(swift_bird.speed)
    return BoostResponse(name=swift_bird.name, initial_speed=initial_speed, speeds=speeds)


@app.get("/swallows/{kind}/airspeed")
def swallow_airspeed(kind: str) -> dict:
    """Endpoint for the airspeed velocity of an unladen swallow.

    Raises:
        HTTPException: 404 if there is no such swallow.
        UnknownSwallowError: For the unknown swallow, answered with 400.
    """
    try:
        swallow = UnladenSwallow[kind.upper()]
    except KeyError:
        raise HTTPException(status_code=404, detail=f"No such swallow: {kind}")
    return {"swallow": swallow.name, "airspeed_velocity": swallow.airspeed_velocity}


@app.post("/scores/compare", response_model=ScoreComparisonResponse)
def compare_scores(request: ScoreComparisonRequest) -> ScoreComparisonResponse:
    left = RacingScore(value=request.left)
    right = RacingScore(value=request.right)
    return ScoreComparisonResponse(
        less=left < right,
        greater=left > right,
        less_or_equal=left <= right,
        greater_or_equal=left >= right,
    )


def run(settings: Optional[PlaygroundSettings] = None) -> None:
    """Run the FastAPI server."""
    import uvicorn
    settings = settings or load_settings()
    uvicorn.run(
        app, host=settings.host, port=settings.port,
        log_level=settings.log_level.lower(), reload=False
    )


if __name__ == "__main__":
    run()
