"""
Unit tests for the reminder dispatcher.
"""

from datetime import date

from reminders.shared.models.employee import SendStatus, SweepWindow
from reminders.sweep.dispatcher import dispatch_notifications
from reminders.sweep.notification_builder import REMINDER_SUBJECT
from tests.mocks.reminder_services import FakeSender

WINDOW = SweepWindow.starting(date(2025, 1, 10))


class TestDispatchNotifications:
    """Tests for dispatch_notifications function."""

    def test_sends_one_email_per_item_in_order(self, employee_factory, fake_sender):
        """Each item gets one send, in query order, with the fixed subject."""
        items = [
            employee_factory(full_name="Ana", email="ana@example.com"),
            employee_factory(full_name="Luis", email="luis@example.com"),
            employee_factory(full_name="Marta", email="marta@example.com"),
        ]

        results = dispatch_notifications(items, WINDOW, fake_sender)

        assert [s["to"] for s in fake_sender.sent] == [
            "ana@example.com",
            "luis@example.com",
            "marta@example.com",
        ]
        assert all(s["subject"] == REMINDER_SUBJECT for s in fake_sender.sent)
        assert fake_sender.sent[1]["html"].startswith("<p>Hi Luis,</p>")
        assert fake_sender.sent[1]["text"].startswith("Hi Luis,")
        assert [r.to_dict() for r in results] == [
            {"email": "ana@example.com", "status": "sent", "id": "msg-001"},
            {"email": "luis@example.com", "status": "sent", "id": "msg-002"},
            {"email": "marta@example.com", "status": "sent", "id": "msg-003"},
        ]

    def test_one_failure_does_not_abort_batch(self, employee_factory):
        """A send failure is recorded and every other recipient still gets mail."""
        sender = FakeSender(fail_for={"luis@example.com"})
        items = [
            employee_factory(email="ana@example.com"),
            employee_factory(email="luis@example.com"),
            employee_factory(email="marta@example.com"),
        ]

        results = dispatch_notifications(items, WINDOW, sender)

        assert len(results) == len(items)
        assert sender.attempts == [
            "ana@example.com",
            "luis@example.com",
            "marta@example.com",
        ]
        by_email = {r.email: r for r in results}
        assert by_email["ana@example.com"].status == SendStatus.SENT
        assert by_email["marta@example.com"].status == SendStatus.SENT
        assert by_email["luis@example.com"].status == SendStatus.ERROR
        assert "MessageRejected" in by_email["luis@example.com"].error_message
        assert by_email["luis@example.com"].to_dict() == {
            "email": "luis@example.com",
            "status": "error",
            "message": by_email["luis@example.com"].error_message,
        }

    def test_malformed_record_is_per_item_error(self, employee_factory, fake_sender):
        """An unparseable date fails that item only; nothing is sent for it."""
        items = [
            employee_factory(email="bad@example.com", dni_expiry_date="14/01/2025"),
            employee_factory(email="good@example.com"),
        ]

        results = dispatch_notifications(items, WINDOW, fake_sender)

        assert [r.status for r in results] == [SendStatus.ERROR, SendStatus.SENT]
        assert results[0].email == "bad@example.com"
        assert "Invalid employee record" in results[0].error_message
        assert [s["to"] for s in fake_sender.sent] == ["good@example.com"]

    def test_unexpected_sender_exception_is_captured(self, employee_factory):
        """Any exception from the sender is isolated to its recipient."""

        class ExplodingSender:
            def send(self, to_address, subject, body_html, *, body_text=None):
                raise ConnectionError("connection reset by peer")

        results = dispatch_notifications([employee_factory()], WINDOW, ExplodingSender())

        assert results[0].status == SendStatus.ERROR
        assert results[0].error_message == "connection reset by peer"

    def test_custom_subject(self, employee_factory, fake_sender):
        dispatch_notifications([employee_factory()], WINDOW, fake_sender, subject="Aviso")

        assert fake_sender.sent[0]["subject"] == "Aviso"

    def test_no_items_sends_nothing(self, fake_sender):
        assert dispatch_notifications([], WINDOW, fake_sender) == []
        assert fake_sender.sent == []
