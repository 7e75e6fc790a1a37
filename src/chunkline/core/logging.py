import logging
import os
import sys
from typing import IO, Any, Literal, Optional

import structlog

LogFormat = Literal["json", "plain", "auto"]

_CI_ENV_VARS = ("CI", "CONTINUOUS_INTEGRATION", "GITHUB_ACTIONS", "JENKINS_URL")


def _should_use_json_format(stream: Optional[IO[str]] = None) -> bool:
    """JSON when running under CI or when the log stream is not a terminal."""
    if any(os.environ.get(var) for var in _CI_ENV_VARS):
        return True

    stream = stream if stream is not None else sys.stderr
    return not stream.isatty()


def _level_number(level: str) -> int:
    number = logging.getLevelName(level.upper())
    if not isinstance(number, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return number


def setup_logging(
    format_type: LogFormat = "auto",
    level: str = "info",
    stream: Optional[IO[str]] = None,
) -> None:
    """
    Configure structlog for chunkline.

    Chunk records own stdout, so log lines go to ``stream`` (stderr unless
    given). The splitter's routing events are debug-level and only show up
    with ``level="debug"``.

    Args:
        format_type: "json", "plain", or "auto" to pick JSON under CI or
                when the stream is not a TTY
        level: Minimum level name (debug, info, warning, error)
        stream: Destination for log lines

    Raises:
        ValueError: If ``level`` is not a known level name
    """
    stream = stream if stream is not None else sys.stderr
    min_level = _level_number(level)

    use_json = format_type == "json" or (
        format_type == "auto" and _should_use_json_format(stream)
    )
    renderer: Any = (
        structlog.processors.JSONRenderer()
        if use_json
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(min_level),
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        # Tests reconfigure against fresh streams; cached loggers would keep the old one
        cache_logger_on_first_use=False,
    )


log = structlog.get_logger()
