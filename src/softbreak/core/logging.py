import logging as stdlib_logging
import os
import sys
from typing import Any, Literal

import structlog

LogFormat = Literal["json", "plain", "auto"]

# Level applied until an application calls setup_logging
LIBRARY_LEVEL = "warning"


def _should_use_json_format() -> bool:
    """Determine if JSON format should be used based on environment."""
    # Check if running in CI
    ci_vars = ["CI", "CONTINUOUS_INTEGRATION", "GITHUB_ACTIONS", "JENKINS_URL"]
    if any(os.environ.get(var) for var in ci_vars):
        return True

    # stderr redirected (not a TTY)
    return bool(not sys.stderr.isatty())


def _stderr_logger(*args: Any) -> structlog.PrintLogger:
    # Resolved per logger so a swapped sys.stderr is honoured
    return structlog.PrintLogger(file=sys.stderr)


def _level_number(level: str) -> int:
    number = stdlib_logging.getLevelName(level.upper())
    if not isinstance(number, int):
        raise ValueError(f"unknown log level: {level!r}")
    return number


def _configure(renderer: Any, level: str) -> None:
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_level_number(level)),
        logger_factory=_stderr_logger,
        cache_logger_on_first_use=False,
    )


def configure_default() -> None:
    """Quiet stderr logging for library use; leaves an existing configuration alone."""
    if structlog.is_configured():
        return
    _configure(structlog.dev.ConsoleRenderer(colors=False), LIBRARY_LEVEL)


def setup_logging(format_type: LogFormat = "auto", level: str = "info") -> None:
    """
    Setup structured logging with format and level control.

    Logs go to stderr; stdout is reserved for segmentation output.

    Args:
        format_type: "json" for JSON output, "plain" for human-readable,
                "auto" to auto-detect based on TTY/CI.
        level: minimum level name ("debug", "info", "warning", ...).
    """
    use_json = format_type == "json" or (format_type == "auto" and _should_use_json_format())

    if use_json:
        renderer: Any = structlog.processors.JSONRenderer(ensure_ascii=False)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)
    _configure(renderer, level)


configure_default()

log = structlog.get_logger()
