"""
Logging setup for the service.

One stdout handler on the root logger, pipe-separated lines.
Series fallbacks are logged at WARNING by the provider; cache hits and
per-request scoring detail only show up at DEBUG.
API keys and raw provider payloads are never logged.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that are chatty at INFO
QUIET_LOGGERS = ("uvicorn.access", "httpx", "httpcore")


def configure_logging(level: str = "INFO", debug: bool = False) -> None:
    """Install the service log handler.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR). Unknown
            names fall back to INFO.
        debug: Forces DEBUG regardless of `level`.
    """
    resolved = logging.DEBUG if debug else logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO

    logging.basicConfig(
        level=resolved,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
