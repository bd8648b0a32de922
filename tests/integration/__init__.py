"""
Integration tests for the expiry reminder service.

These run complete sweeps against moto-backed DynamoDB and SES.
"""
