"""Logfire exporter setup and library instrumentation.

Services open their own spans with ``logfire.span`` and log with
``logfire.info``/``warn``; nothing here is needed for that to work.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from discuss.config import ObservabilitySettings, Settings

SERVICE_NAME = "discuss-backend"


def _should_send(observability: ObservabilitySettings) -> bool:
    # An explicit flag wins; otherwise a token implies cloud export
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once at process start.

    Without a token or OBSERVABILITY__SEND_TO_LOGFIRE, spans are printed to
    the console only.
    """
    observability = settings.observability
    send = _should_send(observability)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send,
        token=observability.logfire_token,
        console=logfire.ConsoleOptions(
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )
    logfire.info(
        "Logfire configured",
        environment=settings.environment,
        send_to_logfire=send,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Open a span per HTTP request."""
    logfire.instrument_fastapi(app)


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Open a span per SQL statement, tagging queries with trace context."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
