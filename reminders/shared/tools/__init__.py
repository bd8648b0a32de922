# Shared Tools
"""
Clients for the two external services: the employees table and SES.
"""

from reminders.shared.tools.dynamodb import EmployeeDirectory
from reminders.shared.tools.email import SesEmailSender

__all__ = [
    "EmployeeDirectory",
    "SesEmailSender",
]
