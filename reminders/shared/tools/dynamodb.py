"""
DynamoDB Tools

Read-only access to the employees table. The sweep never writes to it.
"""

from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError
import structlog

from reminders.shared.config import Settings, get_settings
from reminders.shared.exceptions import DynamoDBError
from reminders.shared.models.employee import SweepWindow
from reminders.sweep.query_builder import build_due_filter, build_projection

log = structlog.get_logger()


class EmployeeDirectory:
    """
    Employee lookups against a DynamoDB table resource.

    The table is injected so tests can hand in a moto-backed table
    or a stand-in object exposing `scan` and `name`.
    """

    def __init__(self, table: Any) -> None:
        self._table = table

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "EmployeeDirectory":
        """Build a directory for the configured employees table."""
        settings = settings or get_settings()
        dynamodb = boto3.resource("dynamodb", **settings.dynamodb_config)
        return cls(dynamodb.Table(settings.dynamodb_table_name))

    @property
    def table_name(self) -> str:
        return getattr(self._table, "name", "employees")

    def find_due(self, window: SweepWindow) -> list[dict[str, Any]]:
        """
        Find employees with a DNI or medical date inside the window.

        One logical query: a filtered scan over every page of the table.
        Items come back in the order DynamoDB returns them.

        Args:
            window: Inclusive date window of this sweep

        Returns:
            Raw DynamoDB items (full_name, email and both dates)

        Raises:
            DynamoDBError: On DynamoDB operation failure
        """
        projection, names = build_projection()
        scan_kwargs: dict[str, Any] = {
            "FilterExpression": build_due_filter(window),
            "ProjectionExpression": projection,
            "ExpressionAttributeNames": dict(names),
        }

        log.debug(
            "scanning_due_employees",
            table=self.table_name,
            start=window.start_iso,
            end=window.end_iso,
        )

        items: list[dict[str, Any]] = []
        pages = 0
        try:
            while True:
                response = self._table.scan(**scan_kwargs)
                items.extend(response.get("Items", []))
                pages += 1
                last_key = response.get("LastEvaluatedKey")
                if not last_key:
                    break
                scan_kwargs["ExclusiveStartKey"] = last_key
        except (ClientError, BotoCoreError) as e:
            log.error(
                "dynamodb_scan_failed",
                table=self.table_name,
                error=str(e),
            )
            raise DynamoDBError(
                operation="scan",
                table_name=self.table_name,
                error_message=str(e),
            ) from e

        log.info(
            "due_employees_found",
            table=self.table_name,
            count=len(items),
            pages=pages,
        )

        return items
