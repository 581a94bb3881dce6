"""
PGP request service.

Validates request fields, runs engine calls off the event loop and maps
engine failures to the fixed client-facing errors.
"""

import asyncio
from collections.abc import Callable
from typing import Any, TypeVar

import structlog

from email_pgp.crypto.protocol import PGPEngine
from email_pgp.crypto.secure_bytes import SecureBytes
from email_pgp.exceptions import (
    DecryptionFailedError,
    EncryptionFailedError,
    GenerationFailedError,
    InvalidInputError,
)
from email_pgp.models.crypto import DecryptedMessage, EncryptedMessage, KeyPair, UserIdentity

logger = structlog.get_logger(__name__)

T = TypeVar("T")

GENERATE_KEYS_REQUIRED = "Name, email, and passphrase are required."
ENCRYPT_REQUIRED = "Message and public key are required."
DECRYPT_REQUIRED = "Encrypted message, private key, and passphrase are required."


def require_fields(message: str, /, **fields: str | None) -> None:
    """
    Check that every field is present and non-empty.

    Args:
        message: Client-facing message used if a field is missing.
        **fields: Field values keyed by name.

    Raises:
        InvalidInputError: If any field is None or empty.
    """
    missing = tuple(name for name, value in fields.items() if not value)
    if missing:
        raise InvalidInputError(message, missing=missing)


class PgpService:
    """
    Serves key generation, encryption and decryption requests.

    The service keeps no per-request state. Engine calls run in worker
    threads, each bounded by a timeout; a semaphore caps how many run at once.
    Passphrases are copied into SecureBytes, which is zeroed once the call
    ends. The request's own str passphrase is not zeroed.

    Args:
        engine: PGP engine doing the actual cryptography.
        timeout: Maximum seconds for a single engine call.
        max_concurrent: Maximum number of engine calls running at once.
    """

    def __init__(self, engine: PGPEngine, *, timeout: float = 30.0, max_concurrent: int = 4) -> None:
        self._engine = engine
        self._timeout = timeout
        self._semaphore = asyncio.Semaphore(max_concurrent)

    async def generate_keys(
        self, name: str | None, email: str | None, passphrase: str | None
    ) -> KeyPair:
        """
        Generate a passphrase-protected key pair for name and email.

        Raises:
            InvalidInputError: If a field is missing or empty.
            GenerationFailedError: If the engine fails or times out.
        """
        require_fields(GENERATE_KEYS_REQUIRED, name=name, email=email, passphrase=passphrase)
        identity = UserIdentity(name=name, email=email)

        logger.info("Generating key pair")
        with SecureBytes.from_string(passphrase) as secret:
            try:
                pair = await self._run(self._engine.generate_key_pair, identity, secret)
            except Exception as e:
                logger.error("Key generation failed", error_type=type(e).__name__, exc_info=e)
                raise GenerationFailedError() from e

        logger.info("Key pair generated", fingerprint=pair.fingerprint)
        return pair

    async def encrypt(
        self, message: str | None, public_key_armored: str | None
    ) -> EncryptedMessage:
        """
        Encrypt message for the owner of public_key_armored.

        Raises:
            InvalidInputError: If a field is missing or empty.
            EncryptionFailedError: If the key is invalid or the engine fails.
        """
        require_fields(ENCRYPT_REQUIRED, message=message, public_key_armored=public_key_armored)

        try:
            encrypted = await self._run(self._encrypt_sync, message, public_key_armored)
        except Exception as e:
            logger.error("Encryption failed", error_type=type(e).__name__, exc_info=e)
            raise EncryptionFailedError() from e

        logger.info("Message encrypted")
        return encrypted

    async def decrypt(
        self,
        encrypted_message: str | None,
        private_key_armored: str | None,
        passphrase: str | None,
    ) -> DecryptedMessage:
        """
        Decrypt encrypted_message with the passphrase-protected private key.

        Raises:
            InvalidInputError: If a field is missing or empty.
            DecryptionFailedError: If the key, passphrase or message is wrong,
                or the engine fails.
        """
        require_fields(
            DECRYPT_REQUIRED,
            encrypted_message=encrypted_message,
            private_key_armored=private_key_armored,
            passphrase=passphrase,
        )

        with SecureBytes.from_string(passphrase) as secret:
            try:
                text = await self._run(
                    self._decrypt_sync, encrypted_message, private_key_armored, secret
                )
            except Exception as e:
                logger.error("Decryption failed", error_type=type(e).__name__, exc_info=e)
                raise DecryptionFailedError() from e

        logger.info("Message decrypted")
        return DecryptedMessage(text=text)

    def _encrypt_sync(self, message: str, public_key_armored: str) -> EncryptedMessage:
        public_key = self._engine.load_public_key(public_key_armored)
        return self._engine.encrypt_message(message, public_key)

    def _decrypt_sync(
        self, encrypted_message: str, private_key_armored: str, passphrase: SecureBytes
    ) -> str:
        private_key = self._engine.load_private_key(private_key_armored)
        return self._engine.decrypt_message(encrypted_message, private_key, passphrase)

    async def _run(self, func: Callable[..., T], *args: Any) -> T:
        # The slot is released when the worker thread finishes, not when the
        # caller stops waiting, so timed-out calls still count against the cap.
        await self._semaphore.acquire()
        future = asyncio.ensure_future(asyncio.to_thread(func, *args))
        future.add_done_callback(self._release_slot)
        return await asyncio.wait_for(asyncio.shield(future), timeout=self._timeout)

    def _release_slot(self, future: "asyncio.Future[Any]") -> None:
        if not future.cancelled():
            future.exception()
        self._semaphore.release()
