"""
Expiry Sweep Runner

One sweep: compute the window, query once, then dispatch reminders.
Shared by the Lambda handler, the local API server and the watcher.

Flow:
1. Build the [today, today + window_days] window
2. Query the employees table for rows with any date in the window
3. Stop on query failure (nothing is sent)
4. Build and send one reminder per row, isolating per-recipient failures
5. Return a SweepOutcome summary
"""

import time
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Protocol

import structlog

from reminders.shared.config import Settings, get_settings
from reminders.shared.exceptions import DynamoDBError
from reminders.shared.models.employee import NotificationResult, SendStatus, SweepWindow
from reminders.shared.tools.dynamodb import EmployeeDirectory
from reminders.shared.tools.email import SesEmailSender
from reminders.sweep.dispatcher import EmailSender, dispatch_notifications
from reminders.sweep.query_builder import build_sweep_window

log = structlog.get_logger()


class DueEmployeeSource(Protocol):
    """Anything that can list employees due inside a window."""

    def find_due(self, window: SweepWindow) -> list[dict[str, Any]]: ...


@dataclass
class SweepOutcome:
    """Summary of one sweep. Discarded after it is returned or logged."""

    window: SweepWindow
    matched: int = 0
    results: list[NotificationResult] = field(default_factory=list)
    error: str | None = None
    duration_ms: float = 0.0

    @property
    def succeeded(self) -> bool:
        """Whether the query succeeded (send failures do not count)."""
        return self.error is None

    @property
    def processed(self) -> int:
        return len(self.results)

    @property
    def sent_count(self) -> int:
        return sum(1 for r in self.results if r.status == SendStatus.SENT)

    @property
    def failed_count(self) -> int:
        return sum(1 for r in self.results if r.status == SendStatus.ERROR)

    def to_response(self) -> tuple[int, dict[str, Any]]:
        """
        Map to the triggered-form status code and JSON body.

        Returns:
            Tuple of (HTTP status code, body)
        """
        if self.error is not None:
            return 500, {"error": self.error}
        if self.matched == 0:
            return 200, {
                "status": "ok",
                "message": f"No upcoming expirations in {self.window.days} days.",
            }
        return 200, {
            "status": "done",
            "processed": self.processed,
            "results": [r.to_dict() for r in self.results],
        }


def build_default_dependencies(
    settings: Settings | None = None,
) -> tuple[EmployeeDirectory, SesEmailSender]:
    """Build the DynamoDB directory and SES sender from settings."""
    settings = settings or get_settings()
    return EmployeeDirectory.from_settings(settings), SesEmailSender.from_settings(settings)


def run_expiry_sweep(
    directory: DueEmployeeSource,
    sender: EmailSender,
    *,
    now: datetime | None = None,
    settings: Settings | None = None,
) -> SweepOutcome:
    """
    Run one expiry sweep.

    Args:
        directory: Source of due employee rows
        sender: Email delivery service
        now: Invocation time (defaults to the current time)
        settings: Settings override (defaults to get_settings())

    Returns:
        SweepOutcome; `error` is set when the query failed
    """
    settings = settings or get_settings()
    start_time = time.time()

    window = build_sweep_window(now, days=settings.window_days, tz=settings.timezone)
    outcome = SweepOutcome(window=window)

    log.info(
        "expiry_sweep_started",
        start=window.start_iso,
        end=window.end_iso,
    )

    try:
        items = directory.find_due(window)
    except DynamoDBError as e:
        # Callers get the store's own failure text, logs keep the table context
        outcome.error = e.error_message or str(e)
        outcome.duration_ms = (time.time() - start_time) * 1000
        log.error(
            "expiry_query_failed",
            error=str(e),
            table=e.table_name,
            duration_ms=outcome.duration_ms,
        )
        return outcome

    outcome.matched = len(items)

    if items:
        log.info("sending_reminders", count=len(items))
        outcome.results = dispatch_notifications(
            items,
            window,
            sender,
            subject=settings.reminder_subject,
        )
    else:
        log.info("no_upcoming_expirations", days=window.days)

    outcome.duration_ms = (time.time() - start_time) * 1000

    log.info(
        "expiry_sweep_completed",
        matched=outcome.matched,
        sent=outcome.sent_count,
        failed=outcome.failed_count,
        duration_ms=outcome.duration_ms,
    )

    return outcome
