"""
Query Builder for Expiry Detection

Constructs the sweep window and the DynamoDB filter that finds employees
whose DNI expiry or medical recognition date falls inside it.

Both date attributes are stored as zero-padded ISO strings (YYYY-MM-DD),
so DynamoDB's lexical BETWEEN matches calendar order.
"""

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

from boto3.dynamodb.conditions import Attr, ConditionBase
import structlog

from reminders.shared.models.employee import SweepWindow

log = structlog.get_logger()


DNI_EXPIRY_ATTR = "dni_expiry_date"
MEDICAL_RECOGNITION_ATTR = "medical_recognition_date"

# Columns projected by the sweep query
EMPLOYEE_COLUMNS: tuple[str, ...] = (
    "full_name",
    "email",
    DNI_EXPIRY_ATTR,
    MEDICAL_RECOGNITION_ATTR,
)

DEFAULT_WINDOW_DAYS = 5


def build_sweep_window(
    now: datetime | None = None,
    *,
    days: int = DEFAULT_WINDOW_DAYS,
    tz: str = "UTC",
) -> SweepWindow:
    """
    Build the [today, today + days] window for one sweep.

    Args:
        now: Invocation time (defaults to the current time)
        days: Days after today to include
        tz: Timezone that decides which calendar day "today" is

    Returns:
        SweepWindow for this invocation
    """
    zone = ZoneInfo(tz)
    current = now or datetime.now(timezone.utc)
    if current.tzinfo is None:
        # Naive datetimes are taken as already local
        today = current.date()
    else:
        today = current.astimezone(zone).date()

    window = SweepWindow.starting(today, days)

    log.debug(
        "sweep_window_built",
        start=window.start_iso,
        end=window.end_iso,
        timezone=tz,
    )

    return window


def build_due_filter(window: SweepWindow) -> ConditionBase:
    """
    Build the filter matching employees with any date inside the window.

    (dni BETWEEN start AND end) OR (medical BETWEEN start AND end)
    """
    return Attr(DNI_EXPIRY_ATTR).between(window.start_iso, window.end_iso) | Attr(
        MEDICAL_RECOGNITION_ATTR
    ).between(window.start_iso, window.end_iso)


def build_projection() -> tuple[str, dict[str, str]]:
    """
    Build the ProjectionExpression for EMPLOYEE_COLUMNS.

    Returns:
        Tuple of (projection expression, expression attribute names)
    """
    names = {f"#{column}": column for column in EMPLOYEE_COLUMNS}
    return ", ".join(names), names
