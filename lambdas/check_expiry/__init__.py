"""
CheckExpiry Lambda

HTTP-triggered Lambda (API Gateway GET) that runs one expiry sweep and
returns a JSON summary. Meant for external schedulers.

Components:
- handler: Lambda entry point

Flow:
1. Compute the [today, today + 5] window
2. Scan the employees table for DNI or medical dates in the window
3. Send one reminder email per match via SES
4. Return per-recipient results
"""

from lambdas.check_expiry.handler import lambda_handler

__all__ = [
    "lambda_handler",
]
