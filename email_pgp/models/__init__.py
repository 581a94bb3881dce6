"""
Domain models for email_pgp.

These are immutable (frozen) dataclasses representing the values exchanged
with the PGP engine.
"""

from email_pgp.models.crypto import (
    MESSAGE_HEADER,
    PRIVATE_KEY_HEADER,
    PUBLIC_KEY_HEADER,
    DecryptedMessage,
    EncryptedMessage,
    KeyPair,
    UserIdentity,
)

__all__ = [
    "MESSAGE_HEADER",
    "PRIVATE_KEY_HEADER",
    "PUBLIC_KEY_HEADER",
    "UserIdentity",
    "KeyPair",
    "EncryptedMessage",
    "DecryptedMessage",
]
