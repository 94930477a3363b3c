"""
Violet API Backend - Logging Setup
===================================

What:  Severity levels, logger factory and root logging configuration.
Why:   The routing layer reports problems with a finer severity scale than the
       stdlib offers (notice, alert, emergency), following the GCP log levels.
How:   Registers the extra levels with `logging`, wraps loggers in a
       LoggerAdapter exposing one method per level.

Severity scale (numeric stdlib levels):
    DEBUG 10 · INFO 20 · NOTICE 25 · WARNING 30 · ERROR 40 ·
    CRITICAL 50 · ALERT 55 · EMERGENCY 60
"""

import logging
import sys
from typing import Any

NOTICE = 25
ALERT = 55
EMERGENCY = 60

logging.addLevelName(NOTICE, "NOTICE")
logging.addLevelName(ALERT, "ALERT")
logging.addLevelName(EMERGENCY, "EMERGENCY")

LEVEL_NAMES = {
    "DEBUG",
    "INFO",
    "NOTICE",
    "WARNING",
    "ERROR",
    "CRITICAL",
    "ALERT",
    "EMERGENCY",
}


class SeverityLogger(logging.LoggerAdapter):
    """
    Logger with the full severity scale used by the registry.

    The stdlib methods (debug, info, warning, error, critical, exception)
    are inherited; notice, alert and emergency are added on top.
    """

    def __init__(self, logger: logging.Logger):
        super().__init__(logger, {})

    def process(self, msg: Any, kwargs: Any):
        return msg, kwargs

    def notice(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        """(300) Normal but significant events, such as start-up."""
        self.log(NOTICE, msg, *args, **kwargs)

    def alert(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        """(700) A person must take an action immediately."""
        self.log(ALERT, msg, *args, **kwargs)

    def emergency(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        """(800) One or more systems are unusable."""
        self.log(EMERGENCY, msg, *args, **kwargs)


def get_logger(name: str) -> SeverityLogger:
    return SeverityLogger(logging.getLogger(name))


def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger for the whole application.

    What:    One stdout handler, ISO timestamps, level name in brackets.
    When:    Called once during app startup, before routes are registered,
             so the route listing and duplicate warnings are visible.
    """
    logging.basicConfig(
        level=logging.getLevelName(level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Third-party access logs duplicate our own request logging
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
