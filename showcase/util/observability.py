"""Logfire tracing for the Showcase API.

The API, the migration runner and the reconciliation script all call
``configure_logfire`` once at startup. After that, modules log structured
events directly:

    logfire.info("Vote recorded", work_id=str(work_id), user_id=str(user_id))

and wrap multi-step operations in spans:

    with logfire.span("upload_file", file_type=file_type.value):
        ...
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from showcase.config import Settings

SERVICE_NAME = "showcase-api"
SERVICE_VERSION = "0.1.0"


def _should_send(settings: Settings) -> bool:
    """Explicit setting wins, then token presence; console-only otherwise."""
    if settings.observability.send_to_logfire is not None:
        return settings.observability.send_to_logfire
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the current process.

    Args:
        settings: Application settings
    """
    send_to_logfire = _should_send(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        git_sha=settings.git_sha,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request, tagging spans with the work being touched."""

    def _request_attributes(request, attributes):
        result = {**attributes}
        if hasattr(request, "method"):
            result["method"] = request.method
        if hasattr(request, "url"):
            result["path"] = request.url.path
        work_id = getattr(request, "path_params", {}).get("work_id")
        if work_id is not None:
            result["work_id"] = str(work_id)
        return result

    # Headers stay out of spans: the session cookie travels in them
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Emit a span per SQL statement issued through the engine."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)


def instrument_httpx() -> None:
    """Trace outbound Supabase Storage calls."""
    logfire.instrument_httpx()
