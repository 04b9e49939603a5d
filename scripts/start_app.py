#!/usr/bin/env python3
"""Run the API under uvicorn, reporting startup failures to Logfire."""

import sys

import logfire
import uvicorn

from discuss.config import Settings
from discuss.util.logging import setup_logging
from discuss.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    logfire.info("Starting discuss API", git_sha=settings.git_sha, port=settings.port)
    try:
        # Factory mode: the app and its DI container are built in the worker
        uvicorn.run(
            "discuss.interface.api.app:create_app",
            factory=True,
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception:
        logfire.exception("API failed to start")
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
