"""
Web Package.

Flask application exposing the lookup operations as a JSON API.
"""

from logos.web.app import API_PREFIX, create_app

__all__ = ["create_app", "API_PREFIX"]
