"""
Reminder Dispatcher

Sends one reminder per matched employee, one at a time, in query order.
A failure for one recipient is recorded and the loop moves on.
"""

from typing import Any, Protocol

from pydantic import ValidationError
import structlog

from reminders.shared.exceptions import InvalidEmployeeRecordError
from reminders.shared.models.employee import EmployeeRecord, NotificationResult, SweepWindow
from reminders.sweep.notification_builder import (
    REMINDER_SUBJECT,
    build_notification_html,
    build_notification_text,
    due_reasons,
)

log = structlog.get_logger()


class EmailSender(Protocol):
    """Anything that can deliver one email and return its message id."""

    def send(
        self,
        to_address: str,
        subject: str,
        body_html: str,
        *,
        body_text: str | None = None,
    ) -> str: ...


def _parse_record(item: dict[str, Any]) -> EmployeeRecord:
    try:
        return EmployeeRecord.from_dynamodb(item)
    except ValidationError as e:
        raise InvalidEmployeeRecordError(
            email=item.get("email", ""),
            error_message=str(e),
        ) from e


def dispatch_notifications(
    items: list[dict[str, Any]],
    window: SweepWindow,
    sender: EmailSender,
    *,
    subject: str = REMINDER_SUBJECT,
) -> list[NotificationResult]:
    """
    Build and send a reminder for every item.

    No retries, batching or reordering. Every item yields exactly one
    result, so len(results) == len(items).

    Args:
        items: Raw employee items, in query order
        window: Window the items were matched against
        sender: Email delivery service
        subject: Subject line for every reminder

    Returns:
        One NotificationResult per item
    """
    results: list[NotificationResult] = []

    for item in items:
        email = item.get("email", "")
        try:
            record = _parse_record(item)
            message_id = sender.send(
                record.email,
                subject,
                build_notification_html(record, window),
                body_text=build_notification_text(record, window),
            )
        except Exception as e:
            log.error(
                "reminder_failed",
                email=email,
                error=str(e),
                error_type=type(e).__name__,
            )
            results.append(NotificationResult.failed(email, str(e)))
            continue

        log.info(
            "reminder_sent",
            email=record.email,
            message_id=message_id,
            reasons=due_reasons(record, window),
        )
        results.append(NotificationResult.sent(record.email, message_id))

    return results
