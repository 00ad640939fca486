"""Singleton logging configuration.

setup_logging() configures the root logger once per process, writing
to stdout; uvicorn is started without its own log config so its
records land here too.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(name)s] - %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%S"

# Third-party loggers to suppress to WARNING
_SUPPRESSED_LOGGERS = (
    "aiosqlite",
    "sqlalchemy.engine",
    "httpx",
)

_configured = False


def setup_logging(level: str = "INFO") -> None:
    """Configure root logger and quiet chatty libraries.

    Idempotent — second call is a no-op.
    """
    global _configured  # noqa: PLW0603
    if _configured:
        return
    _configured = True

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
        stream=sys.stdout,
    )

    for name in _SUPPRESSED_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
