"""
Input validation and sanitization module.

This module provides utilities to validate and sanitize user input
before it is mapped onto database models.
"""

import re
from typing import Any, Optional
from flask import current_app


class InputValidator:
    """
    Input validator for common input types and patterns.
    """

    EMAIL_PATTERN = re.compile(
        r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$'
    )

    XSS_PATTERNS = [
        r'<script[^>]*>.*?</script>',
        r'javascript:',
        r'<iframe[^>]*>',
        r'<object[^>]*>',
        r'<embed[^>]*>',
    ]

    @classmethod
    def validate_email(cls, email: str) -> bool:
        """
        Validate email address format.

        Args:
            email: Email address to validate

        Returns:
            True if valid, False otherwise
        """
        if not email or not isinstance(email, str):
            return False
        return bool(cls.EMAIL_PATTERN.match(email.strip().lower()))

    @classmethod
    def detect_xss(cls, value: str) -> bool:
        """Return True if the value contains a markup/script injection pattern."""
        if not value or not isinstance(value, str):
            return False

        for pattern in cls.XSS_PATTERNS:
            if re.search(pattern, value, re.IGNORECASE):
                return True
        return False

    @classmethod
    def validate_length(cls, value: str, min_length: int = 0,
                        max_length: Optional[int] = None) -> bool:
        """
        Validate string length.

        Args:
            value: String to validate
            min_length: Minimum length
            max_length: Maximum length (None for no limit)

        Returns:
            True if length is valid, False otherwise
        """
        if not isinstance(value, str):
            return False

        length = len(value)
        if length < min_length:
            return False
        if max_length is not None and length > max_length:
            return False
        return True

    @staticmethod
    def is_whole_number(value: Any) -> bool:
        """JSON integers only; booleans are rejected even though bool subclasses int."""
        return isinstance(value, int) and not isinstance(value, bool)


def sanitize_input(value: Any) -> Optional[str]:
    """
    Sanitize a free-text field.

    Strings are stripped and null bytes removed; anything that is not a
    string (including None) yields None so callers report it as missing.
    """
    if not isinstance(value, str):
        return None

    value = value.strip().replace('\x00', '')

    if InputValidator.detect_xss(value):
        current_app.logger.warning(
            f"Potential XSS detected: {value[:100]}"
        )

    return value
