"""
Expiry reminders for employee DNI and medical recognition dates.
"""

__version__ = "0.1.0"
