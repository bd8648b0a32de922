"""
Expiry Sweep

Components:
- query_builder: sweep window and DynamoDB due-date filter
- notification_builder: reminder bodies for one employee
- dispatcher: sequential send loop with per-recipient error capture
- runner: run_expiry_sweep, the behavior shared by every entry point

runner is imported directly (reminders.sweep.runner) since it pulls in
the DynamoDB and SES tools, which themselves use query_builder.
"""

from reminders.sweep.dispatcher import dispatch_notifications
from reminders.sweep.notification_builder import (
    REMINDER_SUBJECT,
    build_notification_html,
    build_notification_text,
)
from reminders.sweep.query_builder import build_due_filter, build_sweep_window

__all__ = [
    "REMINDER_SUBJECT",
    "build_due_filter",
    "build_notification_html",
    "build_notification_text",
    "build_sweep_window",
    "dispatch_notifications",
]
