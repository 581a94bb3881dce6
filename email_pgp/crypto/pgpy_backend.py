"""
PGP engine implementation using pgpy library.

This is the current implementation that can be swapped out later
for another OpenPGP library behind the PGPEngine protocol.
"""

from dataclasses import dataclass

import pgpy
from pgpy.constants import (
    CompressionAlgorithm,
    EllipticCurveOID,
    HashAlgorithm,
    KeyFlags,
    PubKeyAlgorithm,
    SymmetricKeyAlgorithm,
)

from email_pgp.crypto.secure_bytes import SecureBytes
from email_pgp.exceptions import (
    KeyGenerationError,
    KeyLoadError,
    KeyUnlockError,
    MessageDecryptionError,
    MessageEncryptionError,
)
from email_pgp.models.crypto import EncryptedMessage, KeyPair, UserIdentity

_PRIMARY_USAGE = {KeyFlags.Certify, KeyFlags.Sign}
_SUBKEY_USAGE = {KeyFlags.EncryptCommunications, KeyFlags.EncryptStorage}
_HASHES = [HashAlgorithm.SHA256, HashAlgorithm.SHA512]
_CIPHERS = [SymmetricKeyAlgorithm.AES256, SymmetricKeyAlgorithm.AES128]
_COMPRESSION = [CompressionAlgorithm.ZLIB, CompressionAlgorithm.Uncompressed]


@dataclass
class PgpyKey:
    """Wrapper around pgpy.PGPKey to implement PGPKey protocol."""

    _key: pgpy.PGPKey

    @property
    def fingerprint(self) -> str:
        return str(self._key.fingerprint)

    @property
    def is_public(self) -> bool:
        return bool(self._key.is_public)

    @property
    def pgpy_key(self) -> pgpy.PGPKey:
        return self._key


class PgpyBackend:
    """
    PGP engine implementation using pgpy.

    Generated keys are an EdDSA (Ed25519) primary key for certification and
    signing with an ECDH (Curve25519) subkey for encryption.

    Example:
        backend = PgpyBackend()
        pair = backend.generate_key_pair(identity, passphrase)
        public_key = backend.load_public_key(pair.public_key)
        encrypted = backend.encrypt_message("hello", public_key)
    """

    def generate_key_pair(self, identity: UserIdentity, passphrase: SecureBytes) -> KeyPair:
        """
        Generate a passphrase-protected Curve25519 key pair.

        Args:
            identity: Name and email bound to the key.
            passphrase: Passphrase protecting the primary key and subkey.

        Returns:
            KeyPair with both halves ASCII-armored.

        Raises:
            KeyGenerationError: If generation or protection fails.
        """
        try:
            key = pgpy.PGPKey.new(PubKeyAlgorithm.EdDSA, EllipticCurveOID.Ed25519)
            uid = pgpy.PGPUID.new(identity.name, email=identity.email)
            key.add_uid(
                uid,
                usage=_PRIMARY_USAGE,
                hashes=_HASHES,
                ciphers=_CIPHERS,
                compression=_COMPRESSION,
            )
            subkey = pgpy.PGPKey.new(PubKeyAlgorithm.ECDH, EllipticCurveOID.Curve25519)
            key.add_subkey(subkey, usage=_SUBKEY_USAGE)
            # protect() covers subkeys, so it must run after add_subkey()
            key.protect(passphrase.decode(), SymmetricKeyAlgorithm.AES256, HashAlgorithm.SHA256)
            return KeyPair(
                private_key=str(key),
                public_key=str(key.pubkey),
                fingerprint=str(key.fingerprint),
            )
        except Exception as e:
            msg = f"Failed to generate key pair: {e}"
            raise KeyGenerationError(msg) from e

    @staticmethod
    def load_public_key(armored_key: str) -> PgpyKey:
        """
        Load a public key from ASCII-armored format.

        An armored private key is accepted and reduced to its public half.

        Args:
            armored_key: ASCII-armored public (or private) key.

        Returns:
            PgpyKey wrapping a public key.

        Raises:
            KeyLoadError: If the key cannot be parsed.
        """
        key = PgpyBackend._parse_key(armored_key, key_type="public")
        if not key.is_public:
            key = key.pubkey
        return PgpyKey(_key=key)

    @staticmethod
    def load_private_key(armored_key: str) -> PgpyKey:
        """
        Load a private key from ASCII-armored format.

        Args:
            armored_key: ASCII-armored private key.

        Returns:
            PgpyKey wrapping a private key.

        Raises:
            KeyLoadError: If the key cannot be parsed or is a public key.
        """
        key = PgpyBackend._parse_key(armored_key, key_type="private")
        if key.is_public:
            msg = "Expected a private key, got a public key"
            raise KeyLoadError(msg, key_type="private")
        return PgpyKey(_key=key)

    def encrypt_message(self, message: str, public_key: PgpyKey) -> EncryptedMessage:
        """
        Encrypt a text message for the owner of public_key.

        Args:
            message: Plaintext to encrypt.
            public_key: Recipient key; its encryption subkey is used.

        Returns:
            EncryptedMessage with ASCII-armored content.

        Raises:
            MessageEncryptionError: If encryption fails.
        """
        try:
            literal = pgpy.PGPMessage.new(message)
            encrypted = public_key.pgpy_key.encrypt(literal)
            return EncryptedMessage(armored=str(encrypted))
        except Exception as e:
            msg = f"Failed to encrypt message: {e}"
            raise MessageEncryptionError(msg) from e

    def decrypt_message(
        self,
        encrypted_message: str,
        private_key: PgpyKey,
        passphrase: SecureBytes,
    ) -> str:
        """
        Decrypt a PGP message.

        Args:
            encrypted_message: ASCII-armored encrypted message.
            private_key: Private key for decryption.
            passphrase: Key passphrase.

        Returns:
            Decrypted message text.

        Raises:
            KeyUnlockError: If the key is unprotected or the passphrase is incorrect.
            MessageDecryptionError: If the message cannot be parsed or decrypted.
        """
        message = self._parse_message(encrypted_message)
        key = private_key.pgpy_key
        if not key.is_protected:
            msg = "Private key is not passphrase-protected"
            raise KeyUnlockError(msg, fingerprint=private_key.fingerprint)
        try:
            with key.unlock(passphrase.decode()):
                return self._decrypt_with_unlocked_key(key, message)
        except MessageDecryptionError:
            raise
        except Exception as e:
            msg = f"Failed to unlock key: {e}"
            raise KeyUnlockError(msg, fingerprint=private_key.fingerprint) from e

    @staticmethod
    def _parse_key(armored_key: str, *, key_type: str) -> pgpy.PGPKey:
        try:
            key, _ = pgpy.PGPKey.from_blob(armored_key)
            return key
        except Exception as e:
            msg = f"Failed to load {key_type} key: {e}"
            raise KeyLoadError(msg, key_type=key_type) from e

    @staticmethod
    def _parse_message(encrypted_message: str) -> pgpy.PGPMessage:
        try:
            message = pgpy.PGPMessage.from_blob(encrypted_message)
        except Exception as e:
            msg = f"Failed to parse message: {e}"
            raise MessageDecryptionError(msg) from e
        if not message.is_encrypted:
            msg = "Message is not encrypted"
            raise MessageDecryptionError(msg)
        return message

    @staticmethod
    def _decrypt_with_unlocked_key(key: pgpy.PGPKey, message: pgpy.PGPMessage) -> str:
        try:
            decrypted = key.decrypt(message)
            return PgpyBackend._normalize_decrypted_content(decrypted.message)
        except Exception as e:
            msg = f"Failed to decrypt message: {e}"
            raise MessageDecryptionError(msg) from e

    @staticmethod
    def _normalize_decrypted_content(content: bytes | str | bytearray) -> str:
        if isinstance(content, (bytes, bytearray)):
            return bytes(content).decode("utf-8")
        return content
