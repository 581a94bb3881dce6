"""
email_pgp exception hierarchy.

All exceptions inherit from EmailPgpError for easy catching.

Two families live here:
- CryptoError and its subclasses are raised by the PGP engine and carry the
  internal cause. They never cross the HTTP boundary.
- ServiceError and its subclasses are raised by the service layer and carry
  the HTTP status and the fixed message shown to clients.
"""

from typing import Any


class EmailPgpError(Exception):
    """Base exception for all email_pgp errors."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx})"
        return self.message


class CryptoError(EmailPgpError):
    """PGP engine operation failed."""


class KeyGenerationError(CryptoError):
    """Failed to generate a key pair."""


class KeyLoadError(CryptoError):
    """Failed to parse an armored key."""

    def __init__(self, message: str, *, key_type: str | None = None) -> None:
        super().__init__(message, key_type=key_type)
        self.key_type = key_type


class KeyUnlockError(CryptoError):
    """Failed to unlock a private key with the provided passphrase."""


class MessageEncryptionError(CryptoError):
    """Failed to encrypt a message."""


class MessageDecryptionError(CryptoError):
    """Failed to parse or decrypt a message."""


class ServiceError(EmailPgpError):
    """Request could not be served; maps to an HTTP error response."""

    http_status: int = 500
    public_message: str = "Internal server error."

    def __init__(self, message: str | None = None, **context: Any) -> None:
        super().__init__(message or self.public_message, **context)


class InvalidInputError(ServiceError):
    """Required request fields are missing or empty."""

    http_status = 400

    def __init__(self, message: str, *, missing: tuple[str, ...] = ()) -> None:
        super().__init__(message, missing=missing)
        self.public_message = message
        self.missing = missing


class OperationFailedError(ServiceError):
    """The PGP engine failed while serving a valid request."""

    http_status = 500

    def __init__(self, *, operation: str) -> None:
        super().__init__(operation=operation)
        self.operation = operation


class GenerationFailedError(OperationFailedError):
    """Key generation failed."""

    public_message = "Failed to generate keys."

    def __init__(self) -> None:
        super().__init__(operation="generate_keys")


class EncryptionFailedError(OperationFailedError):
    """Encryption failed."""

    public_message = "Encryption failed. Is the public key valid?"

    def __init__(self) -> None:
        super().__init__(operation="encrypt")


class DecryptionFailedError(OperationFailedError):
    """Decryption failed."""

    public_message = "Decryption failed. Check the private key, passphrase, and message format."

    def __init__(self) -> None:
        super().__init__(operation="decrypt")
