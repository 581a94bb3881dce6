"""
email_pgp: a small HTTP service for OpenPGP key generation, encryption
and decryption.

Example:
    ```python
    import uvicorn

    from email_pgp import EmailPgpConfig, create_app

    config = EmailPgpConfig(port=3000)
    uvicorn.run(create_app(config), host=config.host, port=config.port)
    ```

Or from a shell: ``email-pgp-server`` (configured through EMAIL_PGP_* variables).
"""

from email_pgp.api.app import create_app
from email_pgp.config import EmailPgpConfig
from email_pgp.exceptions import (
    CryptoError,
    DecryptionFailedError,
    EmailPgpError,
    EncryptionFailedError,
    GenerationFailedError,
    InvalidInputError,
    KeyGenerationError,
    KeyLoadError,
    KeyUnlockError,
    MessageDecryptionError,
    MessageEncryptionError,
    OperationFailedError,
    ServiceError,
)
from email_pgp.services.pgp_service import PgpService

__version__ = "0.1.0"

__all__ = [
    # Application
    "create_app",
    "EmailPgpConfig",
    "PgpService",
    # Exceptions
    "EmailPgpError",
    "CryptoError",
    "KeyGenerationError",
    "KeyLoadError",
    "KeyUnlockError",
    "MessageEncryptionError",
    "MessageDecryptionError",
    "ServiceError",
    "InvalidInputError",
    "OperationFailedError",
    "GenerationFailedError",
    "EncryptionFailedError",
    "DecryptionFailedError",
]
