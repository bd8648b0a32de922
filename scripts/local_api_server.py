"""
FastAPI Server for Local Development

Serves GET /api/check-expiry with the same responses as the CheckExpiry
Lambda, so an external scheduler (cron, curl) can trigger sweeps locally.

Point REMINDERS_DYNAMODB_ENDPOINT_URL / REMINDERS_SES_ENDPOINT_URL at
local emulators, or leave them unset to use real AWS.
"""

from typing import Annotated

import structlog
from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse

from reminders.shared.config import Settings, get_settings
from reminders.shared.logging_config import configure_logging
from reminders.sweep.runner import build_default_dependencies, run_expiry_sweep

log = structlog.get_logger()


def get_sweep_dependencies(
    settings: Annotated[Settings, Depends(get_settings)],
):
    """Employee directory and email sender for one request."""
    return build_default_dependencies(settings)


app = FastAPI(
    title="Expiry Reminders API",
    description="Local development server for expiry reminder sweeps",
)


@app.get("/")
def root():
    """Health check endpoint."""
    return {"status": "ok", "environment": "local", "version": "0.1.0"}


@app.get("/api/check-expiry")
def check_expiry(
    dependencies: Annotated[tuple, Depends(get_sweep_dependencies)],
    settings: Annotated[Settings, Depends(get_settings)],
):
    """Run one expiry sweep and report per-recipient results."""
    directory, sender = dependencies
    log.info("check_expiry_requested")

    try:
        outcome = run_expiry_sweep(directory, sender, settings=settings)
    except Exception as e:
        log.error("check_expiry_failed", error=str(e), exc_info=True)
        return JSONResponse(status_code=500, content={"error": str(e)})

    status_code, body = outcome.to_response()
    return JSONResponse(status_code=status_code, content=body)


if __name__ == "__main__":
    import uvicorn

    _settings = get_settings()
    configure_logging(_settings.log_level, "console")

    log.info("starting_local_api_server", host="0.0.0.0", port=8000)
    uvicorn.run(app, host="0.0.0.0", port=8000, log_level="info")
