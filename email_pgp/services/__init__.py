"""
Service layer for email_pgp.
"""

from email_pgp.services.pgp_service import PgpService

__all__ = [
    "PgpService",
]
