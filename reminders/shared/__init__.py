# Shared Infrastructure for the Expiry Reminder Service
"""
Shared infrastructure components.

This package provides:
- Pydantic models for employee items and sweep outcomes
- Tool implementations for DynamoDB and SES
- Configuration management
- Logging setup
- Custom exceptions
"""

from reminders.shared.config import Settings, get_settings
from reminders.shared.exceptions import (
    DynamoDBError,
    InvalidEmployeeRecordError,
    RemindersError,
    SESError,
)

__all__ = [
    # Exceptions
    "RemindersError",
    "DynamoDBError",
    "SESError",
    "InvalidEmployeeRecordError",
    # Config
    "Settings",
    "get_settings",
]
