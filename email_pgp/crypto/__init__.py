"""
OpenPGP operations for email_pgp.

This module provides:
- The PGPEngine protocol the service layer depends on
- A pgpy-backed implementation (Curve25519 keys)
- Zeroable passphrase handling
"""

from email_pgp.crypto.pgpy_backend import PgpyBackend, PgpyKey
from email_pgp.crypto.protocol import PGPEngine, PGPKey
from email_pgp.crypto.secure_bytes import SecureBytes

__all__ = [
    "SecureBytes",
    "PGPEngine",
    "PGPKey",
    "PgpyBackend",
    "PgpyKey",
]
