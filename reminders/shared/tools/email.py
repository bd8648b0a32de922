"""
Email Tools

SES delivery for reminder emails.
"""

from typing import Any

import boto3
from botocore.exceptions import ClientError
import structlog

from reminders.shared.config import Settings, get_settings
from reminders.shared.exceptions import SESError

log = structlog.get_logger()


class SesEmailSender:
    """
    Sends one email per call through an SES client.

    The client is injected; `from_settings` builds the real one.
    """

    def __init__(
        self,
        client: Any,
        from_address: str,
        *,
        from_name: str | None = None,
        configuration_set: str | None = None,
    ) -> None:
        self._client = client
        self.from_address = from_address
        self.from_name = from_name
        self.configuration_set = configuration_set

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "SesEmailSender":
        """Build a sender from the configured SES settings."""
        settings = settings or get_settings()
        return cls(
            boto3.client("ses", **settings.ses_config),
            settings.ses_from_address,
            from_name=settings.ses_from_name,
            configuration_set=settings.ses_configuration_set,
        )

    @property
    def source(self) -> str:
        """SES Source header, with display name when configured."""
        if self.from_name:
            return f"{self.from_name} <{self.from_address}>"
        return self.from_address

    def send(
        self,
        to_address: str,
        subject: str,
        body_html: str,
        *,
        body_text: str | None = None,
    ) -> str:
        """
        Send an email via SES.

        Args:
            to_address: Recipient email address
            subject: Email subject
            body_html: HTML body
            body_text: Optional plain text alternative

        Returns:
            SES message ID

        Raises:
            SESError: If send fails
        """
        message_body = {"Html": {"Data": body_html, "Charset": "UTF-8"}}
        if body_text:
            message_body["Text"] = {"Data": body_text, "Charset": "UTF-8"}

        send_params = {
            "Source": self.source,
            "Destination": {"ToAddresses": [to_address]},
            "Message": {
                "Subject": {"Data": subject, "Charset": "UTF-8"},
                "Body": message_body,
            },
        }

        if self.configuration_set:
            send_params["ConfigurationSetName"] = self.configuration_set

        log.debug(
            "sending_ses_email",
            to=to_address,
            subject=subject[:50],
        )

        try:
            response = self._client.send_email(**send_params)
        except ClientError as e:
            error_code = e.response["Error"]["Code"]
            error_message = e.response["Error"]["Message"]

            log.error(
                "ses_send_failed",
                to=to_address,
                error_code=error_code,
                error_message=error_message,
            )

            raise SESError(
                operation="send",
                recipient=to_address,
                error_message=f"{error_code}: {error_message}",
            ) from e

        return response["MessageId"]
