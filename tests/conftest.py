"""
Pytest Configuration and Shared Fixtures

Provides moto AWS mocking, a fixed clock, employee item factories and
in-memory stand-ins for the employee directory and email sender.
"""

import os
from datetime import datetime, timezone
from typing import Any

import boto3
import pytest
from moto import mock_aws

# Set test environment before importing application modules
os.environ["REMINDERS_DYNAMODB_TABLE_NAME"] = "test-employees"
os.environ["REMINDERS_SES_FROM_ADDRESS"] = "pre@kapitalfibra.es"
os.environ["REMINDERS_AWS_REGION"] = "eu-west-1"
os.environ["REMINDERS_LOG_FORMAT"] = "console"
os.environ["AWS_DEFAULT_REGION"] = "eu-west-1"
os.environ["AWS_ACCESS_KEY_ID"] = "testing"
os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"

from reminders.shared.config import Settings, get_settings  # noqa: E402
from tests.mocks.reminder_services import FakeDirectory, FakeSender  # noqa: E402

TEST_TABLE_NAME = "test-employees"
TEST_REGION = "eu-west-1"
SENDER_ADDRESS = "pre@kapitalfibra.es"


# --- Settings Fixtures ---


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read settings from the environment afresh."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    """Settings for tests (defaults plus the test env vars above)."""
    return Settings()


# --- Time Fixtures ---


@pytest.fixture
def frozen_datetime() -> datetime:
    """Fixed invocation time: 2025-01-10 09:30 UTC."""
    return datetime(2025, 1, 10, 9, 30, tzinfo=timezone.utc)


# --- Employee Fixtures ---


def make_employee(
    full_name: str = "Ana García",
    email: str = "ana@example.com",
    dni_expiry_date: str | None = "2025-01-14",
    medical_recognition_date: str | None = "2025-02-01",
    **extra: Any,
) -> dict[str, Any]:
    """Build a raw employee item as DynamoDB returns it."""
    item: dict[str, Any] = {"full_name": full_name, "email": email}
    if dni_expiry_date is not None:
        item["dni_expiry_date"] = dni_expiry_date
    if medical_recognition_date is not None:
        item["medical_recognition_date"] = medical_recognition_date
    item.update(extra)
    return item


@pytest.fixture
def employee_factory():
    """Factory for raw employee items."""
    return make_employee


# --- In-memory Collaborators ---


@pytest.fixture
def fake_sender() -> FakeSender:
    return FakeSender()


@pytest.fixture
def empty_directory() -> FakeDirectory:
    return FakeDirectory()


# --- AWS Mocking Fixtures ---


@pytest.fixture
def aws_credentials():
    """Mock AWS credentials for moto."""
    return {
        "aws_access_key_id": "testing",
        "aws_secret_access_key": "testing",
        "region_name": TEST_REGION,
    }


@pytest.fixture
def mock_employees_table(aws_credentials):
    """Create a mocked employees table keyed on employee_id."""
    with mock_aws():
        dynamodb = boto3.resource("dynamodb", **aws_credentials)
        table = dynamodb.create_table(
            TableName=TEST_TABLE_NAME,
            KeySchema=[{"AttributeName": "employee_id", "KeyType": "HASH"}],
            AttributeDefinitions=[
                {"AttributeName": "employee_id", "AttributeType": "S"},
            ],
            BillingMode="PAY_PER_REQUEST",
        )
        table.meta.client.get_waiter("table_exists").wait(TableName=TEST_TABLE_NAME)
        yield table


@pytest.fixture
def mock_ses(aws_credentials):
    """Create a mocked SES client with the sender identity verified."""
    with mock_aws():
        ses = boto3.client("ses", **aws_credentials)
        ses.verify_email_identity(EmailAddress=SENDER_ADDRESS)
        yield ses


@pytest.fixture
def mock_aws_all(aws_credentials):
    """
    Mock both AWS services used by the application.

    Yields:
        Tuple of (employees table, SES client)
    """
    with mock_aws():
        dynamodb = boto3.resource("dynamodb", **aws_credentials)
        table = dynamodb.create_table(
            TableName=TEST_TABLE_NAME,
            KeySchema=[{"AttributeName": "employee_id", "KeyType": "HASH"}],
            AttributeDefinitions=[
                {"AttributeName": "employee_id", "AttributeType": "S"},
            ],
            BillingMode="PAY_PER_REQUEST",
        )
        table.meta.client.get_waiter("table_exists").wait(TableName=TEST_TABLE_NAME)

        ses = boto3.client("ses", **aws_credentials)
        ses.verify_email_identity(EmailAddress=SENDER_ADDRESS)

        yield table, ses
