"""
PGP engine protocol definition.

This defines the interface the service layer needs from an OpenPGP library,
allowing different implementations (pgpy, python-gnupg, etc.) to be swapped
without changing the rest of the codebase.
"""

from typing import Protocol, runtime_checkable

from email_pgp.crypto.secure_bytes import SecureBytes
from email_pgp.models.crypto import EncryptedMessage, KeyPair, UserIdentity


@runtime_checkable
class PGPKey(Protocol):
    """Protocol for a parsed key object."""

    @property
    def fingerprint(self) -> str:
        """Get the primary key fingerprint."""
        ...

    @property
    def is_public(self) -> bool:
        """Whether only the public half is available."""
        ...


@runtime_checkable
class PGPEngine(Protocol):
    """
    Abstract interface for the PGP operations served over HTTP.

    Implementations are synchronous and may be CPU-bound; callers are
    expected to run them off the event loop.
    """

    def generate_key_pair(self, identity: UserIdentity, passphrase: SecureBytes) -> KeyPair:
        """
        Generate a passphrase-protected Curve25519 key pair.

        Args:
            identity: Name and email bound to the key.
            passphrase: Passphrase protecting the private key.

        Returns:
            The armored key pair.

        Raises:
            KeyGenerationError: If the key cannot be generated.
        """
        ...

    def load_public_key(self, armored_key: str) -> PGPKey:
        """
        Load a public key from ASCII-armored format.

        Raises:
            KeyLoadError: If the key cannot be parsed.
        """
        ...

    def load_private_key(self, armored_key: str) -> PGPKey:
        """
        Load a private key from ASCII-armored format.

        Raises:
            KeyLoadError: If the key cannot be parsed or is not a private key.
        """
        ...

    def encrypt_message(self, message: str, public_key: PGPKey) -> EncryptedMessage:
        """
        Encrypt a text message for the owner of public_key.

        Raises:
            MessageEncryptionError: If encryption fails.
        """
        ...

    def decrypt_message(
        self,
        encrypted_message: str,
        private_key: PGPKey,
        passphrase: SecureBytes,
    ) -> str:
        """
        Decrypt an ASCII-armored PGP message.

        Args:
            encrypted_message: ASCII-armored encrypted message.
            private_key: Private key for decryption.
            passphrase: Key passphrase.

        Returns:
            Decrypted message text.

        Raises:
            KeyUnlockError: If the passphrase is incorrect.
            MessageDecryptionError: If the message cannot be decrypted.
        """
        ...
