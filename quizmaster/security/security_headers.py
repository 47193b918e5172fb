"""
Security and cross-origin headers.

Adds CORS headers so browser clients on any configured origin can call
the API, plus the basic protective headers, to every response.
"""

from flask import request, current_app

ALLOWED_METHODS = "GET, POST, PUT, DELETE, OPTIONS"
DEFAULT_ALLOWED_HEADERS = "Content-Type, Authorization"


class SecurityHeaders:
    """
    Response header middleware.

    Credentials are never advertised to other origins, which keeps the
    wildcard origin valid for browsers.
    """

    @staticmethod
    def init_app(app):
        """
        Initialize security headers for the Flask app.

        Args:
            app: Flask application instance
        """
        @app.after_request
        def add_security_headers(response):
            """Add CORS and security headers to all responses."""
            response.headers['Access-Control-Allow-Origin'] = current_app.config.get(
                'CORS_ALLOWED_ORIGINS', '*'
            )
            response.headers['Access-Control-Allow-Methods'] = ALLOWED_METHODS
            response.headers['Access-Control-Allow-Headers'] = request.headers.get(
                'Access-Control-Request-Headers', DEFAULT_ALLOWED_HEADERS
            )
            if request.method == 'OPTIONS':
                response.headers['Access-Control-Max-Age'] = '3600'

            # X-Content-Type-Options: Prevent MIME type sniffing
            response.headers['X-Content-Type-Options'] = 'nosniff'
            response.headers['X-Frame-Options'] = 'DENY'
            response.headers['Referrer-Policy'] = 'strict-origin-when-cross-origin'

            # Strict-Transport-Security: Force HTTPS (only in production)
            if current_app.config.get('SESSION_COOKIE_SECURE', False):
                response.headers['Strict-Transport-Security'] = (
                    'max-age=31536000; includeSubDomains'
                )

            return response
