"""Runtime settings for the racer playground, read from the environment."""

import os
from typing import Literal, Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

ENV_PREFIX = "RACER_PLAYGROUND_"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class PlaygroundSettings(BaseModel):
    """Settings for the CLI and the HTTP server.

    Attributes:
        host: Interface the HTTP server binds to.
        port: Port the HTTP server listens on.
        log_level: Level for the playground loggers.
        log_dir: Directory receiving the rotating log files.
    """

    host: str = Field("127.0.0.1", min_length=1)
    port: int = Field(8000, ge=1, le=65535)
    log_level: LogLevel = "INFO"
    log_dir: str = Field("logs", min_length=1)


def load_settings(
    environ: Optional[Mapping[str, str]] = None,
    env_file: str = ".env",
) -> PlaygroundSettings:
    """Build settings from ``RACER_PLAYGROUND_*`` variables.

    When reading ``os.environ``, variables from ``env_file`` are loaded first.
    Variables already set in the process environment take precedence.

    Args:
        environ: Mapping to read instead of ``os.environ``. No dotenv file is
            loaded in that case.
        env_file: Dotenv file, relative to the working directory. A missing
            file is ignored.

    Returns:
        PlaygroundSettings: Validated settings. Unset variables keep defaults.

    Raises:
        pydantic.ValidationError: If a variable holds an invalid value.
    """
    if environ is None:
        load_dotenv(env_file)
        environ = os.environ
    values = {}
    for field_name in PlaygroundSettings.model_fields:
        raw = environ.get(f"{ENV_PREFIX}{field_name.upper()}")
        if raw is not None:
            values[field_name] = raw.upper() if field_name == "log_level" else raw
    return PlaygroundSettings(**values)
