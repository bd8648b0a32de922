"""
CheckExpiry Lambda Handler

HTTP-triggered entry point for the expiry sweep, for external schedulers
calling through API Gateway (GET, no parameters).

Trigger: API Gateway GET /api/check-expiry
Output: reminder emails via SES, JSON summary response

Flow:
1. Build DynamoDB directory and SES sender from settings
2. Run one expiry sweep synchronously
3. Map the outcome to a status code and JSON body
"""

import json
from typing import Any

import structlog

from reminders.shared.config import get_settings
from reminders.shared.logging_config import configure_logging
from reminders.sweep.runner import build_default_dependencies, run_expiry_sweep

_settings = get_settings()
configure_logging(_settings.log_level, _settings.log_format)

log = structlog.get_logger()


def _response(status_code: int, body: dict[str, Any]) -> dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body),
    }


def lambda_handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """
    Main Lambda handler for on-demand expiry sweeps.

    The request payload is ignored; every call runs a full sweep.

    Args:
        event: API Gateway proxy event
        context: Lambda context

    Returns:
        API Gateway proxy response:
        - 200 {"status": "ok", "message": ...} when nothing is due
        - 200 {"status": "done", "processed": n, "results": [...]}
        - 500 {"error": ...} when the employee query fails
    """
    log.info(
        "check_expiry_invoked",
        http_method=event.get("httpMethod") if isinstance(event, dict) else None,
        path=event.get("path") if isinstance(event, dict) else None,
    )

    settings = get_settings()

    try:
        directory, sender = build_default_dependencies(settings)
        outcome = run_expiry_sweep(directory, sender, settings=settings)
    except Exception as e:
        log.exception("check_expiry_failed", error=str(e))
        return _response(500, {"error": str(e)})

    status_code, body = outcome.to_response()

    log.info(
        "check_expiry_completed",
        status_code=status_code,
        matched=outcome.matched,
        sent=outcome.sent_count,
        failed=outcome.failed_count,
        duration_ms=round(outcome.duration_ms, 2),
    )

    return _response(status_code, body)
