#!/usr/bin/env python3
"""
Generate Sample Employee Data

Creates the employees table (if missing) and seeds it with employees
whose DNI or medical dates fall inside, at the edges of, and outside
the reminder window, for manual testing against DynamoDB Local or AWS.

Usage:
    python scripts/generate_test_data.py [--email-domain example.com] [--dry-run]
"""

import argparse
import json
import sys
from datetime import date, timedelta
from pathlib import Path
from uuid import uuid4

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import boto3
from botocore.exceptions import ClientError

from reminders.shared.config import get_settings


def generate_sample_employees(today: date, email_domain: str) -> list[dict]:
    """Sample employees covering every window case."""
    window_days = get_settings().window_days

    def iso(offset: int) -> str:
        return (today + timedelta(days=offset)).isoformat()

    cases = [
        ("Ana García", iso(2), iso(90)),  # DNI only
        ("Luis Martín", iso(120), iso(window_days)),  # medical only, last day
        ("Marta López", iso(0), iso(0)),  # both, today
        ("Jorge Ruiz", iso(window_days + 1), iso(-1)),  # neither
        ("Sofía Díaz", iso(365), iso(30)),  # neither
    ]

    employees = []
    for full_name, dni, medical in cases:
        local_part = full_name.lower().split()[0].encode("ascii", "ignore").decode()
        employees.append(
            {
                "employee_id": str(uuid4()),
                "full_name": full_name,
                "email": f"{local_part}@{email_domain}",
                "dni_expiry_date": dni,
                "medical_recognition_date": medical,
            }
        )
    return employees


def ensure_table(dynamodb, table_name: str):
    """Create the employees table keyed on employee_id if needed."""
    try:
        table = dynamodb.create_table(
            TableName=table_name,
            KeySchema=[{"AttributeName": "employee_id", "KeyType": "HASH"}],
            AttributeDefinitions=[{"AttributeName": "employee_id", "AttributeType": "S"}],
            BillingMode="PAY_PER_REQUEST",
        )
        table.meta.client.get_waiter("table_exists").wait(TableName=table_name)
        print(f"Created table {table_name}")
        return table
    except ClientError as e:
        if e.response["Error"]["Code"] != "ResourceInUseException":
            raise
        return dynamodb.Table(table_name)


def main():
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--email-domain", default="example.com")
    parser.add_argument("--dry-run", action="store_true", help="Print items only")
    args = parser.parse_args()

    settings = get_settings()
    employees = generate_sample_employees(date.today(), args.email_domain)

    if args.dry_run:
        print(json.dumps(employees, indent=2, ensure_ascii=False))
        return

    dynamodb = boto3.resource("dynamodb", **settings.dynamodb_config)
    table = ensure_table(dynamodb, settings.dynamodb_table_name)

    with table.batch_writer() as batch:
        for employee in employees:
            batch.put_item(Item=employee)

    print(f"Seeded {len(employees)} employees into {settings.dynamodb_table_name}")


if __name__ == "__main__":
    main()
