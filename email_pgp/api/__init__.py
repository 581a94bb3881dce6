"""
HTTP layer for email_pgp.
"""

from email_pgp.api.app import create_app

__all__ = [
    "create_app",
]
