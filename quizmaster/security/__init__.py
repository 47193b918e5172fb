"""
Security module for the application.

This module provides:
- Input validation and sanitization
- CORS and security headers
- Security logging
"""

from .input_validator import InputValidator, sanitize_input
from .security_headers import SecurityHeaders
from .security_logger import SecurityLogger
from .security_init import init_security

__all__ = [
    'InputValidator',
    'sanitize_input',
    'SecurityHeaders',
    'SecurityLogger',
    'init_security',
]
