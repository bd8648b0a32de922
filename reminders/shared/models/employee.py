"""
Employee Models

Pydantic models for employee items read from the employees table,
plus the per-sweep window and per-recipient outcome.

Nothing here is written back to the table.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


# =====================================================
# Employee Record
# =====================================================


class EmployeeRecord(BaseModel):
    """
    Employee item as stored in DynamoDB.

    Date attributes are ISO strings (YYYY-MM-DD) in the table and are
    parsed into dates here, so every comparison is a calendar comparison.
    """

    model_config = ConfigDict(frozen=True)

    full_name: str = Field(..., description="Display name used in the greeting")
    email: str = Field(..., description="Recipient address (not validated)")
    dni_expiry_date: date | None = Field(default=None, description="DNI expiry date")
    medical_recognition_date: date | None = Field(
        default=None, description="Medical recognition due date"
    )

    @field_validator("dni_expiry_date", "medical_recognition_date", mode="before")
    @classmethod
    def _parse_iso_date(cls, value: Any) -> Any:
        if value is None or value == "":
            return None
        if isinstance(value, str):
            # Only the zero-padded calendar form is accepted
            return date.fromisoformat(value)
        return value

    @classmethod
    def from_dynamodb(cls, item: dict[str, Any]) -> "EmployeeRecord":
        """Parse from DynamoDB item."""
        return cls(
            full_name=item.get("full_name", ""),
            email=item.get("email", ""),
            dni_expiry_date=item.get("dni_expiry_date"),
            medical_recognition_date=item.get("medical_recognition_date"),
        )


# =====================================================
# Sweep Window
# =====================================================


@dataclass(frozen=True)
class SweepWindow:
    """
    Inclusive date range [start, end] checked by one sweep.

    Recomputed on every invocation; never persisted.
    """

    start: date
    end: date

    @classmethod
    def starting(cls, today: date, days: int = 5) -> "SweepWindow":
        """Window covering today and the following `days` days."""
        return cls(start=today, end=today + timedelta(days=days))

    @property
    def start_iso(self) -> str:
        return self.start.isoformat()

    @property
    def end_iso(self) -> str:
        return self.end.isoformat()

    @property
    def days(self) -> int:
        """Days after start included in the window."""
        return (self.end - self.start).days

    def contains(self, value: date | None) -> bool:
        """Whether a date falls in the window (both endpoints included)."""
        if value is None:
            return False
        return self.start <= value <= self.end


# =====================================================
# Notification Result
# =====================================================


class SendStatus(str, Enum):
    """Outcome of one reminder send."""

    SENT = "sent"
    ERROR = "error"


@dataclass(frozen=True)
class NotificationResult:
    """Per-recipient outcome of a sweep."""

    email: str
    status: SendStatus
    message_id: str | None = None
    error_message: str | None = None

    @classmethod
    def sent(cls, email: str, message_id: str) -> "NotificationResult":
        return cls(email=email, status=SendStatus.SENT, message_id=message_id)

    @classmethod
    def failed(cls, email: str, error_message: str) -> "NotificationResult":
        return cls(email=email, status=SendStatus.ERROR, error_message=error_message)

    def to_dict(self) -> dict[str, Any]:
        """Response payload entry: {email, status, id} or {email, status, message}."""
        if self.status == SendStatus.SENT:
            return {"email": self.email, "status": self.status.value, "id": self.message_id}
        return {"email": self.email, "status": self.status.value, "message": self.error_message}
