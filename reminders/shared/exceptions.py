"""
Custom Exceptions for the Expiry Reminder Service

Only two failure domains exist: the employee query (fatal to one sweep)
and a single reminder send (isolated to one recipient).
"""

from dataclasses import dataclass
from typing import Any


class RemindersError(Exception):
    """Base exception for the expiry reminder service."""

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


@dataclass
class DynamoDBError(RemindersError):
    """DynamoDB operation failed."""

    operation: str  # "scan"
    table_name: str
    error_message: str | None = None

    def __init__(
        self,
        operation: str,
        table_name: str,
        error_message: str | None = None,
    ) -> None:
        self.operation = operation
        self.table_name = table_name
        self.error_message = error_message
        super().__init__(
            f"DynamoDB {operation} failed on table '{table_name}': {error_message or 'Unknown error'}",
        )


@dataclass
class SESError(RemindersError):
    """SES email operation failed."""

    operation: str  # "send"
    recipient: str | None = None
    error_message: str | None = None

    def __init__(
        self,
        operation: str,
        recipient: str | None = None,
        error_message: str | None = None,
    ) -> None:
        self.operation = operation
        self.recipient = recipient
        self.error_message = error_message
        super().__init__(
            f"SES {operation} failed{f' for {recipient}' if recipient else ''}: "
            f"{error_message or 'Unknown error'}",
        )


@dataclass
class InvalidEmployeeRecordError(RemindersError):
    """An employee item could not be parsed (e.g. malformed date)."""

    email: str
    error_message: str | None = None

    def __init__(self, email: str, error_message: str | None = None) -> None:
        self.email = email
        self.error_message = error_message
        super().__init__(
            f"Invalid employee record for '{email}': {error_message or 'Unknown error'}",
        )
