"""
Security logging module.

This module provides specialized logging for account events such as
failed logins and rejected registrations.
"""

from flask import current_app, has_request_context, request
from datetime import datetime


class SecurityLogger:
    """
    Security event logger.

    Logs security-related events for monitoring and auditing.
    """

    @staticmethod
    def _remote_addr() -> str:
        return request.remote_addr if has_request_context() else "-"

    @staticmethod
    def log_failed_login(username: str, reason: str = "Invalid credentials"):
        """
        Log a failed login attempt.

        Args:
            username: Username used in login attempt
            reason: Reason for failure (kept server-side only)
        """
        current_app.logger.warning(
            f"SECURITY: Failed login attempt - Username: {username}, "
            f"IP: {SecurityLogger._remote_addr()}, Reason: {reason}, "
            f"Time: {datetime.utcnow().isoformat()}"
        )

    @staticmethod
    def log_successful_login(student_id: int, username: str):
        """
        Log a successful login.

        Args:
            student_id: Student ID
            username: Student username
        """
        current_app.logger.info(
            f"SECURITY: Successful login - Student ID: {student_id}, "
            f"Username: {username}, IP: {SecurityLogger._remote_addr()}, "
            f"Time: {datetime.utcnow().isoformat()}"
        )

    @staticmethod
    def log_duplicate_registration(field: str, value: str):
        """
        Log a registration rejected because the username or email is taken.

        Args:
            field: "username" or "email"
            value: The rejected value
        """
        current_app.logger.warning(
            f"SECURITY: Duplicate registration - {field}: {value}, "
            f"IP: {SecurityLogger._remote_addr()}, "
            f"Time: {datetime.utcnow().isoformat()}"
        )
