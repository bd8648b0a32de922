"""
Notification Builder

Pure functions turning one employee record into reminder bodies.

Each date is checked against the window again here rather than trusting
the query, so a paragraph only appears for a date that is really due.
"""

from reminders.shared.models.employee import EmployeeRecord, SweepWindow

REMINDER_SUBJECT = "Important Reminder: Upcoming Expiration(s)"

CALL_TO_ACTION = "Please take the necessary actions in time."


def due_reasons(record: EmployeeRecord, window: SweepWindow) -> list[str]:
    """Which dates of the record fall in the window, DNI first."""
    reasons = []
    if window.contains(record.dni_expiry_date):
        reasons.append("dni")
    if window.contains(record.medical_recognition_date):
        reasons.append("medical")
    return reasons


def build_notification_html(record: EmployeeRecord, window: SweepWindow) -> str:
    """
    Build the HTML reminder for one employee.

    Greeting, then the DNI paragraph and the medical paragraph for
    whichever dates are in the window, then the call to action. A record
    with neither date in the window gets greeting and call to action only.
    """
    reasons = due_reasons(record, window)

    html = f"<p>Hi {record.full_name},</p>"
    if "dni" in reasons:
        html += (
            f"<p>✅ Your <strong>DNI</strong> will expire on "
            f"<strong>{record.dni_expiry_date.isoformat()}</strong>.</p>"
        )
    if "medical" in reasons:
        html += (
            f"<p>🩺 Your <strong>Medical Recognition</strong> is due on "
            f"<strong>{record.medical_recognition_date.isoformat()}</strong>.</p>"
        )
    html += f"<p>{CALL_TO_ACTION}</p>"
    return html


def build_notification_text(record: EmployeeRecord, window: SweepWindow) -> str:
    """Plain text alternative of build_notification_html."""
    reasons = due_reasons(record, window)

    lines = [f"Hi {record.full_name},"]
    if "dni" in reasons:
        lines.append(f"Your DNI will expire on {record.dni_expiry_date.isoformat()}.")
    if "medical" in reasons:
        lines.append(
            f"Your Medical Recognition is due on {record.medical_recognition_date.isoformat()}."
        )
    lines.append(CALL_TO_ACTION)
    return "\n\n".join(lines)
