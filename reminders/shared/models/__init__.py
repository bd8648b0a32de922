# Shared Models
"""
Data models for employee records and sweep outcomes.
"""

from reminders.shared.models.employee import (
    EmployeeRecord,
    NotificationResult,
    SendStatus,
    SweepWindow,
)

__all__ = [
    "EmployeeRecord",
    "NotificationResult",
    "SendStatus",
    "SweepWindow",
]
