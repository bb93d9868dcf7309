"""
Logging configuration for the application.

One root handler on stdout; uvicorn is started with ``log_config=None``
so its access and error lines go through it too.
Never logs passwords or raw request bodies.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Statement logging includes bound parameters, i.e. passwords.
STATEMENT_LOGGER = "sqlalchemy.engine"
# Pool and driver chatter, shown only when running at DEBUG.
CONNECTION_LOGGERS = ("sqlalchemy.pool", "asyncpg")


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger and the database loggers.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
            Unknown names fall back to INFO.
    """
    root_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=root_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    logging.getLogger(STATEMENT_LOGGER).setLevel(logging.WARNING)
    connection_level = logging.DEBUG if root_level <= logging.DEBUG else logging.WARNING
    for name in CONNECTION_LOGGERS:
        logging.getLogger(name).setLevel(connection_level)
