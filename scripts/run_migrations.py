#!/usr/bin/env python3
"""Upgrade the database schema to the latest alembic revision."""

import sys

import logfire
from alembic import command
from alembic.config import Config

from discuss.config import Settings
from discuss.util.logging import setup_logging
from discuss.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    with logfire.span("run_migrations", environment=settings.environment):
        try:
            command.upgrade(Config("alembic.ini"), "head")
        except Exception:
            # Fail the deploy rather than serve against a stale schema
            logfire.exception("Database migration failed")
            raise
        logfire.info("Database schema is at head")
    return 0


if __name__ == "__main__":
    sys.exit(main())
