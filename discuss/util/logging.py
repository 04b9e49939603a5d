"""Standard-library logging setup.

Logfire carries spans and structured events; plain ``logging`` output from
uvicorn, SQLAlchemy and alembic goes to stdout through this configuration.
"""

import logging
import sys

from discuss.config import Settings

# Libraries that are chatty at INFO
QUIET_LOGGERS = ("sqlalchemy.engine", "asyncpg", "uvicorn.access", "alembic.runtime")


def setup_logging(settings: Settings) -> None:
    """Route all loggers to stdout at DEBUG (debug mode) or INFO."""
    level = logging.DEBUG if settings.debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        stream=sys.stdout,
        force=True,
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        "Logging configured for %s at %s",
        settings.environment,
        logging.getLevelName(level),
    )
