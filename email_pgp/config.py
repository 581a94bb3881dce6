"""
email_pgp server configuration.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Self

_ENV_PREFIX = "EMAIL_PGP_"
_LOG_FORMATS = ("console", "json")


@dataclass(frozen=True, kw_only=True)
class EmailPgpConfig:
    """
    Attributes:
        host: Interface the HTTP server binds to.
        port: TCP port the HTTP server listens on.
        engine_timeout: Maximum seconds a single PGP engine call may take.
        max_concurrent_operations: Maximum number of engine calls running at once.
        static_dir: Optional directory with a front-end to serve at "/".
        log_level: Minimum log level name.
        log_format: "console" for human-readable output, "json" for production.
    """

    host: str = "127.0.0.1"
    port: int = 3000
    engine_timeout: float = 30.0
    max_concurrent_operations: int = 4
    static_dir: str | None = None
    log_level: str = "INFO"
    log_format: str = "console"

    def __post_init__(self) -> None:
        if not 0 < self.port < 65536:
            msg = "port must be between 1 and 65535"
            raise ValueError(msg)
        if self.engine_timeout <= 0:
            msg = "engine_timeout must be positive"
            raise ValueError(msg)
        if self.max_concurrent_operations <= 0:
            msg = "max_concurrent_operations must be positive"
            raise ValueError(msg)
        if self.log_format not in _LOG_FORMATS:
            msg = f"log_format must be one of {_LOG_FORMATS}"
            raise ValueError(msg)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Self:
        """
        Build a config from EMAIL_PGP_* environment variables.

        Unset variables keep their defaults.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Raises:
            ValueError: If a variable cannot be converted or fails validation.
        """
        env = os.environ if environ is None else environ
        converters = {
            "host": str,
            "port": int,
            "engine_timeout": float,
            "max_concurrent_operations": int,
            "static_dir": str,
            "log_level": str.upper,
            "log_format": str.lower,
        }
        values = {}
        for field_name, convert in converters.items():
            raw = env.get(f"{_ENV_PREFIX}{field_name.upper()}")
            if raw is None or raw == "":
                continue
            values[field_name] = convert(raw)
        return cls(**values)
