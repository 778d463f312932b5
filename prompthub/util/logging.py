"""Stdlib logging setup.

Application code reports through logfire; this only shapes what the
standard library loggers of uvicorn, SQLAlchemy, boto3 and our own modules
print.
"""

import logging
import sys

from prompthub.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

# Libraries that are chatty at INFO
QUIET_LOGGERS = ("httpx", "httpcore", "botocore", "boto3", "s3transfer", "asyncio")


def setup_logging(settings: Settings) -> None:
    """Route stdlib logging to stdout at a level matching the environment.

    Debug mode logs everything at DEBUG, SQL included. Otherwise INFO, with
    the libraries in ``QUIET_LOGGERS`` held at WARNING.
    """
    level = logging.DEBUG if settings.debug else logging.INFO
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%dT%H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.debug else logging.WARNING
    )

    logging.getLogger(__name__).info(
        f"Logging to stdout at {logging.getLevelName(level)} "
        f"({settings.environment})"
    )
